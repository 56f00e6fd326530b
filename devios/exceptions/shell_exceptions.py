"""
Shell Exceptions

Exceptions raised by command handlers and the command dispatcher.
Every exception in the DeviOS hierarchy carries an ErrorKind so the
dispatcher can turn it into a single error record.

Author: Deviser
Version: 1.0.0
"""

from enum import Enum
from typing import Optional, Any, List


class ErrorKind(Enum):
    """Error taxonomy reported to the presentation layer."""
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_ARGUMENT = "invalid_argument"
    UNSUPPORTED = "unsupported"
    AUTH_FAILURE = "auth_failure"
    AUTH_LOCKOUT = "auth_lockout"
    COMMAND_NOT_FOUND = "command_not_found"
    INTERNAL = "internal"


class DeviOSError(Exception):
    """
    Base exception for all DeviOS errors.

    Attributes:
        message: Display text, already localised by the raiser
        kind: ErrorKind used for classification
        error_code: Numeric error code for programmatic handling
        hints: Follow-up lines shown as info records after the error
        context: Additional context for logging
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        hints: Optional[List[str]] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.hints = list(hints or [])
        self.context = context or {}

    def __str__(self) -> str:
        return f"[Error {self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"kind={self.kind.name}, "
            f"error_code={self.error_code})"
        )


class ShellException(DeviOSError):
    """Base exception for errors raised while dispatching a command."""

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        hints: Optional[List[str]] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code or 2000, hints, context)


class CommandNotFoundError(ShellException):
    """
    The command name is unknown, or hidden in restricted mode.

    Example:
        >>> raise CommandNotFoundError("foo: command not found", command="foo")
    """

    kind = ErrorKind.COMMAND_NOT_FOUND

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        hints: Optional[List[str]] = None
    ) -> None:
        super().__init__(message, 2001, hints, {'command': command} if command else None)
        self.command = command


class InvalidArgumentError(ShellException):
    """A command was called with unusable arguments."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        hints: Optional[List[str]] = None,
        error_code: Optional[int] = None
    ) -> None:
        super().__init__(
            message,
            error_code or 2002,
            hints,
            {'command': command} if command else None
        )
        self.command = command


class MissingOperandError(InvalidArgumentError):
    """A required operand was not given."""

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        super().__init__(message, command=command, error_code=2003)


class InvalidOptionError(InvalidArgumentError):
    """An unrecognised flag was given."""

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        option: Optional[str] = None,
        hints: Optional[List[str]] = None
    ) -> None:
        super().__init__(message, command=command, hints=hints, error_code=2004)
        self.option = option
        if option:
            self.context['option'] = option


class UnsupportedSyntaxError(ShellException):
    """
    Pipes and redirections are recognised but not implemented.

    Example:
        >>> raise UnsupportedSyntaxError("pipes are not supported", operator="|")
    """

    kind = ErrorKind.UNSUPPORTED

    def __init__(self, message: str, operator: Optional[str] = None) -> None:
        super().__init__(message, 2005, None, {'operator': operator} if operator else None)
        self.operator = operator


class UnsupportedCommandError(ShellException):
    """A known command whose full behaviour is not implemented."""

    kind = ErrorKind.UNSUPPORTED

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        super().__init__(message, 2006, None, {'command': command} if command else None)
        self.command = command
