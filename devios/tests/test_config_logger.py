"""
Configuration, Logging, Messages and Output History Tests

Author: Deviser
Version: 1.0.0
"""

import json
import os
import tempfile
import unittest

from devios.core import Config, ConfigLoader, Sequencer
from devios.exceptions import (
    ConfigurationError,
    DeviOSError,
    ErrorKind,
    CommandNotFoundError,
    MissingOperandError,
    InvalidArgumentError,
    PathNotFoundError,
    PermissionDeniedError,
    UnsupportedSyntaxError,
)
from devios.i18n import Locale, text
from devios.logger import Logger, LogLevel, get_logger
from devios.shell import Shell, OutputHistory, HistoryEvent, ResultRecord, RecordKind


class TestConfig(unittest.TestCase):
    """Test the configuration system."""

    def setUp(self):
        self.loader = ConfigLoader()
        self.loader.reset()

    def tearDown(self):
        self.loader.reset()

    def write_config(self, data):
        handle = tempfile.NamedTemporaryFile('w', suffix='.json', delete=False, encoding='utf-8')
        with handle:
            json.dump(data, handle)
        self.addCleanup(os.unlink, handle.name)
        return handle.name

    def test_default_config(self):
        """Test default configuration values."""
        config = Config()

        self.assertEqual(config.terminal.hostname, "terminal")
        self.assertEqual(config.terminal.guest_user, "user")
        self.assertEqual(config.auth.max_attempts, 3)
        self.assertEqual(config.locale.default, "zh_TW")
        self.assertIn(".github", config.shell.gated_directories)

    def test_singleton(self):
        self.assertIs(ConfigLoader(), self.loader)

    def test_bundled_config(self):
        """Test that the shipped config.json loads and matches the defaults."""
        defaults = self.loader.to_dict()

        config = self.loader.load()

        self.assertEqual(config.terminal.service_user, "deviser")
        self.assertEqual(self.loader.to_dict(), defaults)

    def test_partial_file(self):
        path = self.write_config({"terminal": {"hostname": "box"}})

        config = self.loader.load(path)

        self.assertEqual(config.terminal.hostname, "box")
        self.assertEqual(config.terminal.guest_user, "user")

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError):
            self.loader.load('/nonexistent/devios.json')

    def test_invalid_json(self):
        handle = tempfile.NamedTemporaryFile('w', suffix='.json', delete=False)
        with handle:
            handle.write('{not json')
        self.addCleanup(os.unlink, handle.name)

        with self.assertRaises(ConfigurationError):
            self.loader.load(handle.name)

    def test_unknown_keys_rejected(self):
        with self.assertRaises(ConfigurationError):
            ConfigLoader.parse({"kernel": {}})
        with self.assertRaises(ConfigurationError) as ctx:
            ConfigLoader.parse({"auth": {"secret": "x"}})
        self.assertEqual(ctx.exception.key, "auth.secret")

    def test_validation(self):
        with self.assertRaises(ConfigurationError):
            ConfigLoader.parse({"auth": {"max_attempts": 0}})
        with self.assertRaises(ConfigurationError):
            ConfigLoader.parse({"sequencer": {"time_scale": -1}})
        with self.assertRaises(ConfigurationError):
            ConfigLoader.parse({"locale": {"default": "fr_FR"}})

    def test_get_and_set(self):
        self.assertEqual(self.loader.get('terminal.hostname'), 'terminal')
        self.assertEqual(self.loader.get('terminal.nothing', 'fallback'), 'fallback')

        self.loader.set('auth.max_attempts', 5)
        self.assertEqual(self.loader.config.auth.max_attempts, 5)

        with self.assertRaises(ConfigurationError):
            self.loader.set('auth.nothing', 1)

    def test_config_drives_shell(self):
        """Test that identity, secret and attempt limit come from configuration."""
        config = ConfigLoader.parse({
            "terminal": {"hostname": "box", "guest_user": "guest"},
            "auth": {"sudo_secret": "opensesame", "max_attempts": 1},
            "locale": {"default": "en_US"},
        })
        shell = Shell(config=config, sequencer=Sequencer(clock=lambda: 0.0))

        self.assertEqual(shell.prompt(), 'guest@box:~$')
        self.assertEqual(shell.session.locale, Locale.EN_US)

        shell.execute('deviser start')
        shell.execute('sudo whoami')
        self.assertEqual(shell.execute('opensesame')[0].text, 'root')

        shell.execute('sudo id')
        self.assertEqual(shell.execute('password')[0].text, 'sudo: 1 incorrect password attempts')

    def test_supported_locales_limit_lang(self):
        """Test that lang refuses a language left out of locale.supported."""
        config = ConfigLoader.parse({"locale": {"default": "zh_TW", "supported": ["zh_TW"]}})
        shell = Shell(config=config, sequencer=Sequencer(clock=lambda: 0.0))

        records = shell.execute('lang en')

        self.assertEqual(records[0].kind, RecordKind.ERROR)
        self.assertEqual(records[0].text, text('err_lang_invalid', Locale.ZH_TW, 'en'))
        self.assertEqual(shell.session.locale, Locale.ZH_TW)

        shell.execute('lang zh')
        self.assertEqual(shell.session.locale, Locale.ZH_TW)

    def test_unknown_supported_locale_rejected(self):
        with self.assertRaises(ConfigurationError) as ctx:
            ConfigLoader.parse({"locale": {"supported": ["zh_TW", "fr_FR"]}})
        self.assertEqual(ctx.exception.key, "locale.supported")


class TestLogger(unittest.TestCase):
    """Test the logging system."""

    @classmethod
    def setUpClass(cls):
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)

    def test_logger_singleton(self):
        """Test that one subsystem name gives one logger."""
        self.assertIs(Logger('test1'), Logger('test1'))
        self.assertIs(get_logger('test1'), Logger('test1'))
        self.assertIsNot(Logger('test1'), Logger('test2'))

    def test_log_levels(self):
        self.assertTrue(LogLevel.ERROR > LogLevel.INFO)
        self.assertTrue(LogLevel.DEBUG < LogLevel.NOTICE < LogLevel.WARNING)
        self.assertEqual(LogLevel.from_name('warning'), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_name('bogus'), LogLevel.INFO)

    def test_session_logs(self):
        """Test that subsystem and context reach the session buffer."""
        get_logger('test-session').warning("Something odd", context={'answer': 42})

        logs = Logger.get_session_logs(level='WARNING', subsystem='test-session')

        self.assertEqual(logs[-1]['message'], "Something odd")
        self.assertEqual(logs[-1]['context'], {'answer': 42})

    def test_decoy_is_logged(self):
        shell = Shell(config=Config(), sequencer=Sequencer(clock=lambda: 0.0))
        shell.execute('rm -rf /')

        logs = Logger.get_session_logs(level='WARNING', subsystem='builtins')

        self.assertEqual(logs[-1]['message'], "Recursive delete intercepted")
        self.assertEqual(logs[-1]['context']['line'], 'rm -rf /')

    def test_lockout_is_logged(self):
        shell = Shell(config=Config(), sequencer=Sequencer(clock=lambda: 0.0))
        shell.execute('deviser start')
        shell.execute('sudo id')
        for _ in range(3):
            shell.execute('wrong')

        logs = Logger.get_session_logs(level='WARNING', subsystem='auth')

        self.assertEqual(logs[-1]['message'], "Authentication locked out")

    def test_handler_crash_is_logged(self):
        shell = Shell(config=Config(), sequencer=Sequencer(clock=lambda: 0.0))

        def broken(cmd, session):
            raise RuntimeError("boom")

        shell.builtins.get_commands()['pwd'] = broken
        shell.execute('pwd')

        logs = Logger.get_session_logs(level='ERROR', subsystem='shell')
        self.assertEqual(logs[-1]['message'], "Unexpected error in command handler")


class TestMessages(unittest.TestCase):
    """Test message lookup."""

    def test_parameters(self):
        self.assertEqual(text('err_no_such_dir', Locale.EN_US, 'cd', 'x'), 'cd: x: No such directory')

    def test_unknown_key(self):
        self.assertEqual(text('no_such_message', Locale.EN_US), 'no_such_message')

    def test_locale_codes(self):
        self.assertEqual(Locale.from_code('en_US'), Locale.EN_US)
        with self.assertRaises(ValueError):
            Locale.from_code('fr_FR')


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_kinds(self):
        """Test that each error class maps to its taxonomy entry."""
        cases = [
            (CommandNotFoundError("x"), ErrorKind.COMMAND_NOT_FOUND),
            (MissingOperandError("x"), ErrorKind.INVALID_ARGUMENT),
            (PathNotFoundError("x"), ErrorKind.NOT_FOUND),
            (PermissionDeniedError("x"), ErrorKind.PERMISSION_DENIED),
            (UnsupportedSyntaxError("x", operator='|'), ErrorKind.UNSUPPORTED),
        ]
        for exc, kind in cases:
            self.assertIsInstance(exc, DeviOSError)
            self.assertEqual(exc.kind, kind)

    def test_missing_operand_is_invalid_argument(self):
        exc = MissingOperandError("cat: missing file name", command='cat')

        self.assertIsInstance(exc, InvalidArgumentError)
        self.assertEqual(exc.command, 'cat')
        self.assertIn(str(exc.error_code), str(exc))

    def test_hints(self):
        exc = CommandNotFoundError("x", hints=["try help"])

        self.assertEqual(exc.hints, ["try help"])


class TestOutputHistory(unittest.TestCase):
    """Test the shared output history."""

    def setUp(self):
        self.history = OutputHistory()
        self.events = []
        self.history.add_listener(lambda event, entry, records: self.events.append((event, records)))

    def test_mutations_notify(self):
        first = [ResultRecord.success('a')]
        self.history.append_entry('ls', first)
        self.history.extend_last([ResultRecord.info('b')])
        self.history.replace_last([ResultRecord.system('c')])
        self.history.clear()

        self.assertEqual(
            [event for event, _ in self.events],
            [HistoryEvent.APPENDED, HistoryEvent.EXTENDED, HistoryEvent.REPLACED, HistoryEvent.CLEARED]
        )
        self.assertEqual(len(self.history), 0)

    def test_extend_after_clear_opens_entry(self):
        self.history.clear()
        self.history.extend_last([ResultRecord.success('late')])

        self.assertEqual(self.history.last.command, '')
        self.assertEqual(self.history.last.records[0].text, 'late')

    def test_snapshot_is_a_copy(self):
        self.history.append_entry('ls', [ResultRecord.success('a')])
        snapshot = self.history.snapshot()

        self.history.extend_last([ResultRecord.success('b')])

        self.assertEqual(len(snapshot[0].records), 1)
        self.assertEqual(len(self.history.last.records), 2)

    def test_remove_listener(self):
        history = OutputHistory()
        calls = []
        listener = lambda *args: calls.append(args)
        history.add_listener(listener)
        history.remove_listener(listener)

        history.append_entry('ls')

        self.assertEqual(calls, [])

    def test_record_factories(self):
        self.assertEqual(ResultRecord.warning('w').kind, RecordKind.WARNING)
        self.assertEqual(ResultRecord.error('e').text, 'e')
        self.assertEqual(ResultRecord.logout().kind, RecordKind.LOGOUT)


if __name__ == '__main__':
    unittest.main()
