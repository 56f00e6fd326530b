"""
Security Exceptions

Exceptions raised by the sudo password challenge.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import DeviOSError, ErrorKind


class SecurityException(DeviOSError):
    """
    Base exception for all authentication errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
    """

    kind = ErrorKind.AUTH_FAILURE

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 5000, context=context)


class AuthenticationError(SecurityException):
    """
    Wrong secret while a challenge is pending.

    The challenge stays open; ``attempts`` is the number of failures so far.

    Example:
        >>> raise AuthenticationError("sudo: authentication failed", attempts=1)
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        username: Optional[str] = None,
        attempts: int = 0
    ) -> None:
        ctx: dict[str, Any] = {"attempts": attempts}
        if username:
            ctx["username"] = username
        super().__init__(message, error_code=5002, context=ctx)
        self.username = username
        self.attempts = attempts


class AuthenticationLockoutError(AuthenticationError):
    """
    Too many wrong secrets in a row.

    The pending challenge and its stored command have been discarded; a new
    ``sudo`` invocation is required.
    """

    kind = ErrorKind.AUTH_LOCKOUT

    def __init__(
        self,
        message: str = "Too many failed attempts",
        username: Optional[str] = None,
        attempts: int = 0
    ) -> None:
        super().__init__(message, username=username, attempts=attempts)
        self.error_code = 5004
