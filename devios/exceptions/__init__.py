"""
DeviOS Exception Hierarchy

All custom exceptions inherit from DeviOSError. Each class carries an
ErrorKind which the command dispatcher uses to build an error record.

Architecture:
    DeviOSError (Base)
    ├── ShellException
    │   ├── CommandNotFoundError
    │   ├── InvalidArgumentError
    │   │   ├── MissingOperandError
    │   │   └── InvalidOptionError
    │   ├── UnsupportedSyntaxError
    │   └── UnsupportedCommandError
    ├── FileSystemException
    │   ├── PathNotFoundError
    │   └── PermissionDeniedError
    ├── SecurityException
    │   └── AuthenticationError
    │       └── AuthenticationLockoutError
    └── CoreException
        ├── ConfigurationError
        └── SequencerError
"""

from .shell_exceptions import (
    ErrorKind,
    DeviOSError,
    ShellException,
    CommandNotFoundError,
    InvalidArgumentError,
    MissingOperandError,
    InvalidOptionError,
    UnsupportedSyntaxError,
    UnsupportedCommandError,
)

from .fs_exceptions import (
    FileSystemException,
    PathNotFoundError,
    PermissionDeniedError,
)

from .security_exceptions import (
    SecurityException,
    AuthenticationError,
    AuthenticationLockoutError,
)

from .core_exceptions import (
    CoreException,
    ConfigurationError,
    SequencerError,
)

__all__ = [
    # Base
    "ErrorKind",
    "DeviOSError",
    # Shell exceptions
    "ShellException",
    "CommandNotFoundError",
    "InvalidArgumentError",
    "MissingOperandError",
    "InvalidOptionError",
    "UnsupportedSyntaxError",
    "UnsupportedCommandError",
    # Filesystem exceptions
    "FileSystemException",
    "PathNotFoundError",
    "PermissionDeniedError",
    # Security exceptions
    "SecurityException",
    "AuthenticationError",
    "AuthenticationLockoutError",
    # Core exceptions
    "CoreException",
    "ConfigurationError",
    "SequencerError",
]
