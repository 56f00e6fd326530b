"""
Session and Authentication Tests

Author: Deviser
Version: 1.0.0
"""

import unittest

from devios.exceptions import AuthenticationError, AuthenticationLockoutError, ErrorKind
from devios.i18n import Locale
from devios.users import Session, SudoAuthenticator, FeatureLevel


class TestSession(unittest.TestCase):
    """Test session state."""

    def setUp(self):
        self.session = Session(actor='user')

    def test_defaults(self):
        """Test a fresh session."""
        session = self.session

        self.assertEqual(session.cwd, '~')
        self.assertIsNone(session.previous_cwd)
        self.assertFalse(session.is_privileged)
        self.assertTrue(session.restricted)
        self.assertFalse(session.awaiting_secret)
        self.assertEqual(session.locale, Locale.ZH_TW)

    def test_display_user(self):
        self.assertEqual(self.session.display_user, 'user')
        self.session.is_privileged = True
        self.assertEqual(self.session.display_user, 'root')

    def test_as_actor(self):
        actor = self.session.as_actor()

        self.assertEqual(actor.name, 'user')
        self.assertEqual(actor.groups, frozenset({'users'}))
        self.assertFalse(actor.privileged)

    def test_change_and_swap_directory(self):
        """Test that swapping returns to the directory before the last cd."""
        self.session.change_directory('~/about')

        self.assertEqual(self.session.swap_directory(), '~')
        self.assertEqual(self.session.previous_cwd, '~/about')
        self.assertEqual(self.session.swap_directory(), '~/about')

    def test_swap_without_previous(self):
        with self.assertRaises(ValueError):
            self.session.swap_directory()

    def test_unlock_full_once(self):
        """Test the one-way feature level switch."""
        self.assertTrue(self.session.unlock_full('deviser'))
        self.assertEqual(self.session.feature_level, FeatureLevel.FULL)
        self.assertEqual(self.session.actor, 'deviser')

        self.assertFalse(self.session.unlock_full('someone'))
        self.assertEqual(self.session.actor, 'deviser')

    def test_history_size_limit(self):
        for i in range(5):
            self.session.record_command(f"echo {i}", max_size=3)

        self.assertEqual(self.session.history, ['echo 2', 'echo 3', 'echo 4'])

    def test_history_browsing(self):
        """Test arrow up/down over the command history."""
        session = self.session
        self.assertIsNone(session.history_previous())

        session.record_command('ls')
        session.record_command('pwd')

        self.assertEqual(session.history_previous(), 'pwd')
        self.assertEqual(session.history_previous(), 'ls')
        self.assertEqual(session.history_previous(), 'ls')
        self.assertEqual(session.history_next(), 'pwd')
        self.assertEqual(session.history_next(), '')
        self.assertIsNone(session.history_next())

    def test_record_command_stops_browsing(self):
        self.session.record_command('ls')
        self.session.history_previous()
        self.session.record_command('pwd')

        self.assertIsNone(self.session.history_cursor)

    def test_session_ids_are_unique(self):
        self.assertNotEqual(Session(actor='a').session_id, Session(actor='a').session_id)


class TestSudoAuthenticator(unittest.TestCase):
    """Test the sudo challenge."""

    def setUp(self):
        self.auth = SudoAuthenticator('password')
        self.session = Session(actor='deviser')

    def test_secret_is_hashed(self):
        self.assertNotIn('password', vars(self.auth).values())
        self.assertTrue(self.auth.verify('password'))
        self.assertFalse(self.auth.verify('Password'))

    def test_success(self):
        """Test that the stored command comes back and privilege is granted."""
        self.auth.begin(self.session, 'cat .bashrc')
        self.assertTrue(self.session.awaiting_secret)

        command = self.auth.submit(self.session, 'password')

        self.assertEqual(command, 'cat .bashrc')
        self.assertTrue(self.session.is_privileged)
        self.assertFalse(self.session.awaiting_secret)

    def test_failure_keeps_challenge(self):
        self.auth.begin(self.session, 'id')

        with self.assertRaises(AuthenticationError) as ctx:
            self.auth.submit(self.session, 'nope')

        self.assertEqual(ctx.exception.kind, ErrorKind.AUTH_FAILURE)
        self.assertEqual(ctx.exception.attempts, 1)
        self.assertEqual(ctx.exception.message, 'sudo: 認證失敗')
        self.assertTrue(self.session.awaiting_secret)
        self.assertEqual(self.session.auth_challenge.attempts, 1)
        self.assertFalse(self.session.is_privileged)

    def test_lockout_clears_challenge(self):
        """Test that the third failure discards the pending command."""
        self.auth.begin(self.session, 'id')

        for _ in range(2):
            with self.assertRaises(AuthenticationError):
                self.auth.submit(self.session, 'nope')

        with self.assertRaises(AuthenticationLockoutError) as ctx:
            self.auth.submit(self.session, 'nope')

        self.assertEqual(ctx.exception.kind, ErrorKind.AUTH_LOCKOUT)
        self.assertIsNone(self.session.auth_challenge)
        self.assertFalse(self.session.is_privileged)

        with self.assertRaises(ValueError):
            self.auth.submit(self.session, 'password')

    def test_success_after_failures(self):
        self.auth.begin(self.session, 'id')
        with self.assertRaises(AuthenticationError):
            self.auth.submit(self.session, 'nope')

        self.assertEqual(self.auth.submit(self.session, 'password'), 'id')

    def test_begin_replaces_pending_challenge(self):
        self.auth.begin(self.session, 'id')
        with self.assertRaises(AuthenticationError):
            self.auth.submit(self.session, 'nope')

        self.auth.begin(self.session, 'whoami')

        self.assertEqual(self.session.auth_challenge.pending_command, 'whoami')
        self.assertEqual(self.session.auth_challenge.attempts, 0)

    def test_localized_failure(self):
        self.session.locale = Locale.EN_US
        self.auth.begin(self.session, 'id')

        with self.assertRaises(AuthenticationError) as ctx:
            self.auth.submit(self.session, 'nope')

        self.assertEqual(ctx.exception.message, 'sudo: authentication failed')

    def test_custom_attempt_limit(self):
        auth = SudoAuthenticator('secret', max_attempts=1)
        auth.begin(self.session, 'id')

        with self.assertRaises(AuthenticationLockoutError):
            auth.submit(self.session, 'nope')

    def test_invalid_attempt_limit(self):
        with self.assertRaises(ValueError):
            SudoAuthenticator('secret', max_attempts=0)


if __name__ == '__main__':
    unittest.main()
