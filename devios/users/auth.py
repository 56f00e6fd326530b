"""
Sudo Authentication

State machine for privilege escalation:
    Anonymous -> (sudo <cmd>) -> AwaitingSecret -> Elevated
                                                -> Anonymous (lockout)

The secret is kept only as a SHA-256 digest.

Author: Deviser
Version: 1.0.0
"""

import hashlib
import hmac

from devios.exceptions import AuthenticationError, AuthenticationLockoutError
from devios.i18n import text
from devios.logger import get_logger
from .session import Session, AuthChallenge


class SudoAuthenticator:
    """
    Runs the sudo challenge on a session.

    Example:
        >>> auth = SudoAuthenticator('password')
        >>> auth.begin(session, 'cat .bashrc')
        >>> auth.submit(session, 'password')
        'cat .bashrc'
    """

    def __init__(self, secret: str, max_attempts: int = 3):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self._logger = get_logger('auth')
        self._secret_hash = self._hash_secret(secret)
        self._max_attempts = max_attempts

    @staticmethod
    def _hash_secret(secret: str) -> str:
        """Hash a secret using SHA-256."""
        return hashlib.sha256(secret.encode()).hexdigest()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def verify(self, secret: str) -> bool:
        """Compare a candidate secret in constant time."""
        return hmac.compare_digest(self._hash_secret(secret), self._secret_hash)

    def begin(self, session: Session, command_line: str) -> None:
        """
        Enter AwaitingSecret, storing the command to run on success.

        A new invocation replaces any challenge already pending.
        """
        session.auth_challenge = AuthChallenge(pending_command=command_line)
        self._logger.debug(
            "Authentication challenge started",
            context={'user': session.actor, 'session': session.session_id}
        )

    def submit(self, session: Session, secret: str) -> str:
        """
        Answer the pending challenge.

        Args:
            session: Session in AwaitingSecret
            secret: Submitted line

        Returns:
            The stored command line, to be dispatched with privilege

        Raises:
            AuthenticationError: Wrong secret, challenge still pending
            AuthenticationLockoutError: Wrong secret for the last allowed
                time; the challenge and its command are discarded
        """
        challenge = session.auth_challenge
        if challenge is None:
            raise ValueError("No authentication challenge pending")

        if self.verify(secret):
            session.auth_challenge = None
            session.is_privileged = True
            self._logger.info(
                "Privileges elevated",
                context={'user': session.actor, 'session': session.session_id}
            )
            return challenge.pending_command

        challenge.attempts += 1

        if challenge.attempts >= self._max_attempts:
            session.auth_challenge = None
            self._logger.warning(
                "Authentication locked out",
                context={'user': session.actor, 'attempts': challenge.attempts}
            )
            raise AuthenticationLockoutError(
                text('err_sudo_lockout', session.locale, challenge.attempts),
                username=session.actor,
                attempts=challenge.attempts
            )

        self._logger.warning(
            "Authentication failed",
            context={'user': session.actor, 'attempts': challenge.attempts}
        )
        raise AuthenticationError(
            text('err_sudo_failed', session.locale),
            username=session.actor,
            attempts=challenge.attempts
        )
