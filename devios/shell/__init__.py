"""
DeviOS Shell Module

Provides the terminal command dispatcher:
- Command parsing
- Built-in commands
- Result records and output history
- Manual pages
"""

from .parser import CommandParser, ParsedCommand, Token, TokenType
from .records import (
    RecordKind,
    ResultRecord,
    Listing,
    ListingEntry,
    OutputEntry,
    OutputHistory,
    HistoryEvent,
)
from .manual import manual_page
from .builtins import BuiltinCommands, BASIC_COMMANDS
from .shell import Shell, create_shell

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'Token',
    'TokenType',
    'RecordKind',
    'ResultRecord',
    'Listing',
    'ListingEntry',
    'OutputEntry',
    'OutputHistory',
    'HistoryEvent',
    'manual_page',
    'BuiltinCommands',
    'BASIC_COMMANDS',
    'Shell',
    'create_shell',
]
