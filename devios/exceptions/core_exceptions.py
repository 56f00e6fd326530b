"""
Core Exceptions

Exceptions raised while loading configuration and running scheduled
output sequences.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import DeviOSError, ErrorKind


class CoreException(DeviOSError):
    """
    Base exception for core (configuration, sequencer) errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    kind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 1000, context=context)

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base


class ConfigurationError(CoreException):
    """
    Configuration file missing, unreadable, or invalid.

    Example:
        >>> raise ConfigurationError("Configuration file not found", path="x.json")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        key: Optional[str] = None
    ) -> None:
        ctx: dict[str, Any] = {}
        if path:
            ctx["path"] = path
        if key:
            ctx["key"] = key
        super().__init__(message, error_code=1002, context=ctx)
        self.path = path
        self.key = key


class SequencerError(CoreException):
    """A chain was misused (e.g. extended after it started)."""

    def __init__(self, message: str, chain: Optional[str] = None) -> None:
        super().__init__(
            message,
            error_code=1003,
            context={"chain": chain} if chain else None
        )
        self.chain = chain
