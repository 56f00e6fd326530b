"""
Session Module

The single mutable state object of a terminal session: identity,
privilege, working directory, command history, the pending sudo
challenge, feature level and content locale.

Author: Deviser
Version: 1.0.0
"""

import secrets
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List

from devios.filesystem.path_resolver import ROOT
from devios.filesystem.permissions import Actor
from devios.i18n import Locale, DEFAULT_LOCALE


class FeatureLevel(Enum):
    """Which commands and top-level directories are visible."""
    RESTRICTED = "restricted"
    FULL = "full"


@dataclass
class AuthChallenge:
    """A sudo invocation waiting for its secret."""
    pending_command: str
    attempts: int = 0


@dataclass
class Session:
    """
    A terminal session.

    Handlers receive the session explicitly and mutate it in place.
    ``cwd`` is always a canonical ``~``-rooted directory path.
    ``history_cursor`` counts back from the newest history entry while the
    user browses with the arrow keys, and is None otherwise.
    """

    actor: str
    groups: set[str] = field(default_factory=lambda: {'users'})
    is_privileged: bool = False
    cwd: str = ROOT
    previous_cwd: Optional[str] = None
    history: List[str] = field(default_factory=list)
    history_cursor: Optional[int] = None
    auth_challenge: Optional[AuthChallenge] = None
    feature_level: FeatureLevel = FeatureLevel.RESTRICTED
    locale: Locale = DEFAULT_LOCALE
    session_id: str = field(default_factory=lambda: secrets.token_hex(8))
    created_at: float = field(default_factory=time.time)

    @property
    def awaiting_secret(self) -> bool:
        return self.auth_challenge is not None

    @property
    def restricted(self) -> bool:
        return self.feature_level == FeatureLevel.RESTRICTED

    @property
    def display_user(self) -> str:
        """Name shown in prompts and by whoami."""
        return 'root' if self.is_privileged else self.actor

    def as_actor(self) -> Actor:
        """Identity used for permission checks."""
        return Actor(
            name=self.actor,
            groups=frozenset(self.groups),
            privileged=self.is_privileged
        )

    def change_directory(self, path: str) -> None:
        """Move to an already-resolved directory, remembering the old one."""
        self.previous_cwd = self.cwd
        self.cwd = path

    def swap_directory(self) -> str:
        """
        Exchange ``cwd`` and ``previous_cwd``.

        Returns:
            The new current directory

        Raises:
            ValueError: If there is no previous directory
        """
        if self.previous_cwd is None:
            raise ValueError("No previous directory")

        self.cwd, self.previous_cwd = self.previous_cwd, self.cwd
        return self.cwd

    def unlock_full(self, service_user: str) -> bool:
        """
        Switch to the full feature level and the service identity.

        Returns:
            False if the session was already unlocked
        """
        if self.feature_level == FeatureLevel.FULL:
            return False

        self.feature_level = FeatureLevel.FULL
        self.actor = service_user
        return True

    # Command history

    def record_command(self, line: str, max_size: int = 1000) -> None:
        """Append a submitted line and stop browsing."""
        self.history.append(line)
        if len(self.history) > max_size:
            del self.history[:len(self.history) - max_size]
        self.history_cursor = None

    def history_previous(self) -> Optional[str]:
        """
        Step back one entry (arrow up).

        Returns:
            Line to show, or None if history is empty. Stays on the
            oldest entry once reached.
        """
        if not self.history:
            return None

        cursor = -1 if self.history_cursor is None else self.history_cursor
        if cursor < len(self.history) - 1:
            cursor += 1
        self.history_cursor = cursor
        return self.history[-1 - cursor]

    def history_next(self) -> Optional[str]:
        """
        Step forward one entry (arrow down).

        Returns:
            Line to show; an empty string when stepping past the newest
            entry; None when not browsing.
        """
        if self.history_cursor is None:
            return None

        if self.history_cursor == 0:
            self.history_cursor = None
            return ''

        self.history_cursor -= 1
        return self.history[-1 - self.history_cursor]
