"""
Filesystem Exceptions

Exceptions related to path resolution and file access on the
virtual filesystem.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import DeviOSError, ErrorKind


class FileSystemException(DeviOSError):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: Path expression associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 4000, context=context)
        self.path = path
        if path:
            self.context["path"] = path

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base


class PathNotFoundError(FileSystemException):
    """
    The path does not resolve to any node.

    Also raised for paths hidden by the restricted feature level, so the
    two cases cannot be told apart.

    Example:
        >>> raise PathNotFoundError("cd: nowhere: No such directory", "nowhere")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, path=path, error_code=4001, context=context)


class PermissionDeniedError(FileSystemException):
    """
    The permission evaluator denied the requested access.

    Example:
        >>> raise PermissionDeniedError("touch: a: Permission denied",
        ...                             path="a", operation="write")
    """

    kind = ErrorKind.PERMISSION_DENIED

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        operation: Optional[str] = None,
        actor: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        if actor:
            ctx["actor"] = actor
        super().__init__(message, path=path, error_code=4003, context=ctx)
        self.operation = operation
        self.actor = actor
