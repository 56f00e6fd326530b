"""
Command Parser Module

Parses terminal command lines into structured format. Words are split on
whitespace only; there is no quoting. Pipes and redirections are
recognised so they can be rejected.

Author: Deviser
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum

from devios.exceptions import UnsupportedSyntaxError
from devios.i18n import Locale, DEFAULT_LOCALE, text


class TokenType(Enum):
    """Token types for command parsing."""
    WORD = "word"
    PIPE = "pipe"
    REDIRECT_OUT = "redirect_out"
    REDIRECT_APPEND = "redirect_append"


@dataclass
class Token:
    """A parsed token."""
    type: TokenType
    value: str


@dataclass
class ParsedCommand:
    """
    A parsed command line.

    ``command`` is lower-cased for dispatch; ``name`` keeps the spelling
    the user typed for error messages.
    """
    command: str
    name: str
    args: List[str] = field(default_factory=list)
    line: str = ""

    @property
    def options(self) -> List[str]:
        """Arguments that look like flags."""
        return [arg for arg in self.args if arg.startswith('-') and arg != '-']

    @property
    def operands(self) -> List[str]:
        """Arguments that are not flags."""
        return [arg for arg in self.args if not arg.startswith('-') or arg == '-']

    @property
    def short_flags(self) -> set[str]:
        """Letters of all single-dash flags, so ``-rf`` gives {'r', 'f'}."""
        letters: set[str] = set()
        for option in self.options:
            if not option.startswith('--'):
                letters.update(option[1:])
        return letters

    @property
    def long_flags(self) -> set[str]:
        return {option[2:] for option in self.options if option.startswith('--')}

    @property
    def is_recursive_force(self) -> bool:
        """Any spelling of ``-r -f``: ``-rf``, ``-fr``, ``-R -f``, ``--recursive --force``."""
        letters = self.short_flags
        long_flags = self.long_flags
        recursive = bool(letters & {'r', 'R'}) or 'recursive' in long_flags
        force = 'f' in letters or 'force' in long_flags
        return recursive and force


class CommandParser:
    """
    Parses terminal command lines.

    Handles:
    - Command and arguments
    - Pipes (|), rejected
    - Redirections (>, >>), rejected

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("LS -la ~/about")
        >>> cmd.command, cmd.args
        ('ls', ['-la', '~/about'])
    """

    def parse(self, line: str, locale: Locale = DEFAULT_LOCALE) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string
            locale: Language for error messages

        Returns:
            ParsedCommand or None if empty

        Raises:
            UnsupportedSyntaxError: If the line contains a pipe or redirection
        """
        line = line.strip()

        if not line:
            return None

        tokens = self.tokenize(line)

        if any(token.type == TokenType.PIPE for token in tokens):
            raise UnsupportedSyntaxError(text('err_pipe_unsupported', locale), operator='|')

        for token in tokens:
            if token.type in (TokenType.REDIRECT_OUT, TokenType.REDIRECT_APPEND):
                raise UnsupportedSyntaxError(text('err_redirect_unsupported', locale), operator=token.value)

        words = [token.value for token in tokens]
        return ParsedCommand(command=words[0].lower(), name=words[0], args=words[1:], line=line)

    @staticmethod
    def tokenize(line: str) -> List[Token]:
        """Convert a line into tokens."""
        tokens = []
        current = ""
        i = 0

        while i < len(line):
            char = line[i]

            if char == '|':
                if current:
                    tokens.append(Token(TokenType.WORD, current))
                    current = ""
                tokens.append(Token(TokenType.PIPE, '|'))
                i += 1
                continue

            if char == '>':
                if current:
                    tokens.append(Token(TokenType.WORD, current))
                    current = ""

                if i + 1 < len(line) and line[i + 1] == '>':
                    tokens.append(Token(TokenType.REDIRECT_APPEND, '>>'))
                    i += 2
                else:
                    tokens.append(Token(TokenType.REDIRECT_OUT, '>'))
                    i += 1
                continue

            # Handle whitespace
            if char.isspace():
                if current:
                    tokens.append(Token(TokenType.WORD, current))
                    current = ""
                i += 1
                continue

            # Regular character
            current += char
            i += 1

        # Don't forget last token
        if current:
            tokens.append(Token(TokenType.WORD, current))

        return tokens
