"""
DeviOS Shell Module

The command dispatcher of the terminal. A presentation layer feeds it
submitted lines and key events and renders the output history it keeps.

Author: Deviser
Version: 1.0.0
"""

from typing import Optional, Callable, List

from .parser import CommandParser
from .builtins import BuiltinCommands, BASIC_COMMANDS
from .records import ResultRecord, OutputHistory
from devios.core.config_loader import Config, get_config
from devios.core.sequencer import Sequencer, Chain
from devios.exceptions import (
    DeviOSError,
    CommandNotFoundError,
    InvalidOptionError,
)
from devios.filesystem import VirtualFileSystem
from devios.i18n import Locale, text
from devios.logger import get_logger
from devios.users import Session, SudoAuthenticator


class Shell:
    """
    DeviOS command dispatcher.

    Provides:
    - Command parsing and dispatch
    - Restricted/full feature gate
    - sudo challenge handling
    - Command history browsing
    - Scheduled output through the sequencer

    ``execute`` appends one entry to the output history per submitted
    line and returns its records. Chains created while handling the line
    start only after that entry exists, so their output lands in it.

    Example:
        >>> shell = Shell()
        >>> [record.text for record in shell.execute('whoami')]
        ['user']
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        vfs: Optional[VirtualFileSystem] = None,
        sequencer: Optional[Sequencer] = None,
        output: Optional[OutputHistory] = None
    ):
        self._config = config or get_config()
        self._logger = get_logger('shell')

        terminal = self._config.terminal
        self._vfs = vfs or VirtualFileSystem(owner=terminal.service_user, group=terminal.primary_group)
        self._sequencer = sequencer or Sequencer(
            time_scale=self._config.sequencer.time_scale,
            tick_interval=self._config.sequencer.tick_interval
        )
        self._output = output or OutputHistory()
        self._authenticator = SudoAuthenticator(
            self._config.auth.sudo_secret,
            self._config.auth.max_attempts
        )

        self._parser = CommandParser()
        self._builtins = BuiltinCommands(self)
        self._after_entry: List[Callable[[], None]] = []
        self._session = self._new_session()

        self._output.append_entry('', self.welcome_records())

    # Properties

    @property
    def config(self) -> Config:
        return self._config

    @property
    def session(self) -> Session:
        return self._session

    @property
    def output(self) -> OutputHistory:
        return self._output

    @property
    def vfs(self) -> VirtualFileSystem:
        return self._vfs

    @property
    def sequencer(self) -> Sequencer:
        return self._sequencer

    @property
    def authenticator(self) -> SudoAuthenticator:
        return self._authenticator

    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins

    # Hooks used by command handlers

    def chain(self, name: str) -> Chain:
        """
        Create a chain writing into the newest output entry.

        The chain is started once the entry for the current line has been
        appended.
        """
        chain = self._sequencer.chain(name, self._output.extend_last)
        self._after_entry.append(chain.start)
        return chain

    def after_entry(self, action: Callable[[], None]) -> None:
        """Run ``action`` right after the current line's entry is appended."""
        self._after_entry.append(action)

    def logout_records(self, session: Session) -> List[ResultRecord]:
        return [
            ResultRecord.system(text('sys_logout', session.locale)),
            ResultRecord.system(text('sys_goodbye', session.locale)),
            ResultRecord.logout(),
        ]

    def welcome_records(self) -> List[ResultRecord]:
        """Banner shown when a session starts."""
        terminal = self._config.terminal
        locale = self._session.locale
        return [
            ResultRecord.system(text('welcome_banner', locale, terminal.banner_title, terminal.version)),
            ResultRecord.success(text('welcome_title', locale)),
            ResultRecord.info(text('welcome_guide', locale)),
            ResultRecord.info(text('welcome_help', locale)),
            ResultRecord.success(text('welcome_start', locale)),
        ]

    # Session lifecycle

    def _new_session(self) -> Session:
        terminal = self._config.terminal
        return Session(
            actor=terminal.guest_user,
            groups={terminal.primary_group},
            locale=Locale.from_code(self._config.locale.default)
        )

    def reset(self) -> None:
        """Start over with a fresh session and only the welcome entry."""
        old = self._session
        self._session = self._new_session()
        self._after_entry.clear()
        self._output.clear()
        self._output.append_entry('', self.welcome_records())

        self._logger.info(
            "Session reset",
            context={'old_session': old.session_id, 'session': self._session.session_id}
        )

    def prompt(self) -> str:
        """Prompt text, e.g. ``user@terminal:~/about$``."""
        session = self._session
        return f"{session.display_user}@{self._config.terminal.hostname}:{session.cwd}$"

    # Line handling

    def execute(self, line: str) -> List[ResultRecord]:
        """
        Handle one submitted line.

        Args:
            line: Raw line as typed

        Returns:
            Records of the new output entry
        """
        session = self._session
        stripped = line.strip()

        if not stripped:
            self._commit('', [])
            return []

        if session.awaiting_secret:
            # The secret is neither echoed nor recorded
            records = self._answer_challenge(session, stripped)
            self._commit('', records)
            return records

        session.record_command(stripped, self._config.shell.history_size)
        records = self._run(stripped, session)
        self._commit(line, records)
        return records

    def _commit(self, command: str, records: List[ResultRecord]) -> None:
        """Append the entry, then run the actions the handlers queued."""
        self._output.append_entry(command, records)

        actions, self._after_entry = self._after_entry, []
        for action in actions:
            action()

    def _answer_challenge(self, session: Session, secret: str) -> List[ResultRecord]:
        try:
            command = self._authenticator.submit(session, secret)
        except DeviOSError as e:
            return self._error_records(e)

        return self._run(command, session)

    def _run(self, line: str, session: Session) -> List[ResultRecord]:
        """Dispatch a line, turning raised errors into records."""
        try:
            return self._dispatch(line, session)

        except DeviOSError as e:
            self._logger.debug(
                "Command failed",
                context={'line': line, 'kind': e.kind.value, 'code': e.error_code}
            )
            return self._error_records(e)

        except Exception as e:
            self._logger.exception("Unexpected error in command handler", exc=e, context={'line': line})
            name = line.split()[0] if line.split() else line
            self._after_entry.clear()
            return [ResultRecord.error(text('err_internal', session.locale, name))]

    def _dispatch(self, line: str, session: Session) -> List[ResultRecord]:
        """
        Parse and run a line.

        Raises:
            DeviOSError: Any user-facing failure
        """
        cmd = self._parser.parse(line, session.locale)
        if cmd is None:
            return []

        self._logger.debug("Dispatching command", context={'command': cmd.command, 'args': cmd.args})

        # Recursive force delete is intercepted at every feature level
        if cmd.command == 'rm' and cmd.is_recursive_force:
            return self._builtins.decoy(cmd, session)

        if session.restricted and cmd.command not in BASIC_COMMANDS:
            self._builtins.reject_gated(cmd, session)

        handler = self._builtins.get(cmd.command)
        if handler is None:
            if cmd.options:
                raise InvalidOptionError(
                    text('err_invalid_option', session.locale, cmd.name, ' '.join(cmd.args)),
                    command=cmd.command,
                    option=cmd.options[0]
                )
            raise CommandNotFoundError(
                text('err_cmd_not_found', session.locale, cmd.name),
                command=cmd.command
            )

        return handler(cmd, session)

    @staticmethod
    def _error_records(error: DeviOSError) -> List[ResultRecord]:
        return [ResultRecord.error(error.message)] + [ResultRecord.info(hint) for hint in error.hints]

    # Key events

    def interrupt(self, line: str = '') -> List[ResultRecord]:
        """
        Ctrl+C: abandon the line being typed.

        Running chains are not affected.
        """
        session = self._session
        session.history_cursor = None
        records = [ResultRecord.error(text('interrupted', session.locale))]
        self._commit('' if session.awaiting_secret else line, records)
        return records

    def end_of_input(self, line: str = '') -> List[ResultRecord]:
        """
        Ctrl+D: log out when the line is empty, otherwise do nothing.

        Returns:
            The logout records, or an empty list
        """
        if line:
            return []

        records = self.logout_records(self._session)
        self._commit('', records)
        self._logger.info("Session ended", context={'session': self._session.session_id})
        return records

    def history_previous(self) -> Optional[str]:
        """Arrow up."""
        return self._session.history_previous()

    def history_next(self) -> Optional[str]:
        """Arrow down."""
        return self._session.history_next()


def create_shell(config: Optional[Config] = None) -> Shell:
    """
    Create a shell with a fresh filesystem and sequencer.

    Args:
        config: Configuration, defaults to the loaded one
    """
    return Shell(config=config)
