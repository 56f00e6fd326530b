"""
Shell Built-in Commands

Implements the terminal's commands. Every handler takes the parsed
command and the session, returns the records to display, and raises a
DeviOSError for anything the user did wrong.

Author: Deviser
Version: 1.0.0
"""

import re
import time
from typing import Optional, Callable, List

from devios.exceptions import (
    CommandNotFoundError,
    InvalidArgumentError,
    InvalidOptionError,
    MissingOperandError,
    UnsupportedCommandError,
    PathNotFoundError,
    PermissionDeniedError,
)
from devios.filesystem import PathResolver, PermissionEvaluator, AccessKind, ResolvedPath, ROOT
from devios.i18n import Locale, text
from devios.logger import get_logger
from devios.users import Session
from .manual import manual_page
from .parser import ParsedCommand
from .records import ResultRecord, Listing, ListingEntry


Handler = Callable[[ParsedCommand, Session], List[ResultRecord]]

# Commands accepted before the deviser service is started
BASIC_COMMANDS = frozenset({
    'help', 'clear', 'echo', 'exit', 'deviser', 'ls', 'cd',
    'cat', 'pwd', 'whoami', 'date', 'uname', 'lang',
})

# `lang` codes, enabled only when listed in locale.supported
LANGUAGE_CODES = {
    'en': Locale.EN_US,
    'zh': Locale.ZH_TW,
}

SECTIONS = {
    'about': ('section_about', 'cat bio.txt'),
    'skills': ('section_skills', 'cat frontend.txt'),
    'projects': ('section_projects', 'cd terminal-portfolio'),
    'contact': ('section_contact', 'cat info.txt'),
}

DECOY_PATHS = [
    '/home/deviser/Documents',
    '/home/deviser/Pictures',
    '/home/deviser/Downloads',
    '/home/deviser/.config',
    '/home/deviser/.local/share',
    '/var/log',
    '/etc/apt',
]

OCTAL_MODE = re.compile(r'^[0-7]{1,4}$')
SYMBOLIC_MODE = re.compile(r'^[ugoa]*[-+=][rwxX]*(,[ugoa]*[-+=][rwxX]*)*$')


def progress_bar(percent: int) -> str:
    """Ten-cell bar, e.g. ``[===       ] 30%``."""
    filled = percent // 10
    return f"[{'=' * filled}{' ' * (10 - filled)}] {percent}%"


class BuiltinCommands:
    """
    Built-in terminal commands.

    The command table is closed: names missing from it are reported as
    not found by the dispatcher.
    """

    def __init__(self, shell):
        """
        Initialize built-in commands.

        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._logger = get_logger('builtins')
        self._commands: dict[str, Handler] = {
            'help': self.cmd_help,
            'ls': self.cmd_ls,
            'cd': self.cmd_cd,
            'cat': self.cmd_cat,
            'pwd': self.cmd_pwd,
            'whoami': self.cmd_whoami,
            'id': self.cmd_id,
            'date': self.cmd_date,
            'uname': self.cmd_uname,
            'echo': self.cmd_echo,
            'man': self.cmd_man,
            'sudo': self.cmd_sudo,
            'touch': self.cmd_touch,
            'mkdir': self.cmd_mkdir,
            'chmod': self.cmd_chmod,
            'chown': self.cmd_chown,
            'rm': self.cmd_rm,
            'lang': self.cmd_lang,
            'deviser': self.cmd_deviser,
            'history': self.cmd_history,
            'about': self.cmd_section,
            'skills': self.cmd_section,
            'projects': self.cmd_section,
            'contact': self.cmd_section,
            'github': self.cmd_github,
            'find': self.cmd_find,
            'clear': self.cmd_clear,
            'exit': self.cmd_exit,
            'logout': self.cmd_exit,
        }

    def get_commands(self) -> dict[str, Handler]:
        """Get all built-in commands."""
        return self._commands

    def get(self, name: str) -> Optional[Handler]:
        return self._commands.get(name)

    # Helpers

    def _gated(self, session: Session) -> set[str]:
        """Top-level names hidden at the current feature level."""
        if not session.restricted:
            return set()
        return set(self._shell.config.shell.gated_directories)

    def _resolve(self, target: str, session: Session) -> Optional[ResolvedPath]:
        """
        Resolve a path, treating gated directories as absent.

        The gate is applied before any permission check so a hidden
        directory looks exactly like a missing one. A path that merely
        passes through a gated directory (``about/..``) is absent too.
        """
        if self._gated(session) & PathResolver.top_levels(target, session.cwd):
            return None
        return self._shell.vfs.resolve(target, session.cwd)

    @staticmethod
    def _require(
        node_path: ResolvedPath,
        session: Session,
        kind: AccessKind,
        command: str,
        target: str
    ) -> None:
        if not PermissionEvaluator.check(node_path.node, session.as_actor(), kind):
            raise PermissionDeniedError(
                text('err_perm_denied', session.locale, command, target),
                path=node_path.path,
                operation=kind.name.lower(),
                actor=session.actor
            )

    @staticmethod
    def _check_options(
        cmd: ParsedCommand,
        session: Session,
        short: str = '',
        long: tuple[str, ...] = ()
    ) -> None:
        """Reject any flag not made of the allowed letters or long names."""
        for option in cmd.options:
            if option.startswith('--'):
                valid = option[2:] in long
            else:
                valid = all(letter in short for letter in option[1:])
            if not valid:
                raise InvalidOptionError(
                    text('err_invalid_option', session.locale, cmd.name, option),
                    command=cmd.command,
                    option=option
                )

    # Command implementations

    def cmd_help(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display help information."""
        locale = session.locale

        if session.restricted:
            keys = [
                'help_basic_help', 'help_ls', 'help_cd', 'help_cat', 'help_pwd',
                'help_whoami', 'help_date', 'help_clear', 'help_echo', 'help_uname',
                'help_lang', 'help_basic_start', 'help_exit',
            ]
            return (
                [ResultRecord.system(text('help_basic_title', locale))]
                + [ResultRecord.success(text(key, locale)) for key in keys]
                + [ResultRecord.info(text('help_basic_tip', locale))]
            )

        keys = [
            'help_ls', 'help_cd', 'help_cat', 'help_pwd', 'help_whoami', 'help_id',
            'help_date', 'help_man', 'help_echo', 'help_uname', 'help_find',
            'help_mkdir', 'help_touch', 'help_chmod', 'help_chown', 'help_sudo',
            'help_history', 'help_github', 'help_lang', 'help_clear', 'help_exit',
        ]
        shortcuts = ['help_shortcuts', 'help_ctrl_c', 'help_ctrl_d', 'help_arrows']
        return (
            [ResultRecord.system(text('help_title', locale))]
            + [ResultRecord.success(text(key, locale)) for key in keys]
            + [ResultRecord.info(text(key, locale)) for key in shortcuts]
        )

    def cmd_ls(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """List directory contents."""
        self._check_options(cmd, session, short='al', long=('all', 'help'))

        if 'help' in cmd.long_flags:
            return manual_page('ls', session.locale) or []

        show_hidden = 'a' in cmd.short_flags or 'all' in cmd.long_flags
        long_format = 'l' in cmd.short_flags

        target = cmd.operands[0] if cmd.operands else '.'
        resolved = self._resolve(target, session)
        if resolved is None:
            raise PathNotFoundError(
                text('err_cannot_access', session.locale, 'ls', target),
                path=target
            )

        self._require(resolved, session, AccessKind.READ, 'ls', target)

        node = resolved.node
        if node.is_file:
            pairs = [(resolved.name, node)]
        else:
            hide = self._gated(session) if not resolved.segments else set()
            pairs = self._shell.vfs.readdir(node, show_hidden=show_hidden, hide=hide)

        entries = tuple(
            ListingEntry(name, child.is_directory, child.permissions, child.owner, child.group)
            for name, child in pairs
        )
        return [ResultRecord.success(Listing(entries, long_format))]

    def cmd_cd(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Change directory."""
        if not cmd.args:
            session.change_directory(ROOT)
            return []

        target = cmd.args[0]

        if target == '-':
            if session.previous_cwd is None:
                raise InvalidArgumentError(text('err_no_previous_dir', session.locale), command='cd')
            return [ResultRecord.system(session.swap_directory())]

        resolved = self._resolve(target, session)
        if resolved is None or not resolved.node.is_directory:
            raise PathNotFoundError(
                text('err_no_such_dir', session.locale, 'cd', target),
                path=target
            )

        self._require(resolved, session, AccessKind.EXECUTE, 'cd', target)

        session.change_directory(resolved.path)
        return []

    def cmd_cat(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display file contents."""
        if not cmd.args:
            raise MissingOperandError(text('err_cat_missing', session.locale), command='cat')

        target = cmd.args[0]
        resolved = self._resolve(target, session)
        if resolved is None or not resolved.node.is_file:
            raise PathNotFoundError(
                text('err_no_such_file', session.locale, 'cat', target),
                path=target
            )

        self._require(resolved, session, AccessKind.READ, 'cat', target)

        if resolved.name.lower().endswith('.pdf'):
            return self._download(resolved, session)

        return [ResultRecord.success(line) for line in resolved.node.content(session.locale)]

    def _download(self, resolved: ResolvedPath, session: Session) -> List[ResultRecord]:
        """Show a progress bar, then the document, instead of printing a PDF."""
        name = resolved.name
        output = self._shell.output

        def progress(percent: int) -> Callable[[], None]:
            def step() -> None:
                output.replace_last([
                    ResultRecord.system(text('download_progress', session.locale, name)),
                    ResultRecord.system(progress_bar(percent)),
                ])
            return step

        def complete() -> List[ResultRecord]:
            return (
                [ResultRecord.success(text('download_complete', session.locale))]
                + [ResultRecord.system(line) for line in resolved.node.content(session.locale)]
            )

        chain = self._shell.chain('download')
        chain.then(700, progress(10))
        for percent in range(20, 101, 10):
            chain.then(200, progress(percent))
        chain.then(700, complete)

        self._logger.debug("Download started", context={'path': resolved.path})

        return [
            ResultRecord.system(text('download_preparing', session.locale, name)),
            ResultRecord.system(progress_bar(0)),
        ]

    def cmd_pwd(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Print working directory."""
        return [ResultRecord.success(f"/home/{session.actor}{session.cwd[len(ROOT):]}")]

    def cmd_whoami(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display current username."""
        return [ResultRecord.success(session.display_user)]

    def cmd_id(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display user/group IDs."""
        terminal = self._shell.config.terminal

        if session.is_privileged:
            uid, name = 0, 'root'
        else:
            uid, name = terminal.uid, session.actor

        groups = ','.join(sorted(session.groups))
        return [ResultRecord.success(
            f"uid={uid}({name}) gid={terminal.gid}({terminal.primary_group}) groups={groups}"
        )]

    def cmd_date(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display current date/time."""
        return [ResultRecord.success(time.strftime('%a %b %d %H:%M:%S %Y'))]

    def cmd_uname(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display system information."""
        self._check_options(cmd, session, short='a')
        terminal = self._shell.config.terminal

        if 'a' in cmd.short_flags:
            return [ResultRecord.success(
                f"{terminal.os_name} {terminal.version} #1 SMP "
                f"{time.strftime('%a %b %d %H:%M:%S %Y')} {terminal.machine} Personal Website Terminal"
            )]
        return [ResultRecord.success(terminal.os_name)]

    def cmd_echo(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Echo arguments."""
        return [ResultRecord.success(' '.join(cmd.args))]

    def cmd_man(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display a manual page."""
        if not cmd.args:
            raise MissingOperandError(text('err_man_missing', session.locale), command='man')

        page = manual_page(cmd.args[0].lower(), session.locale)
        if page is None:
            raise InvalidArgumentError(
                text('err_man_unknown', session.locale, cmd.args[0]),
                command='man'
            )
        return page

    def cmd_sudo(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Ask for the secret, then run the command with privilege."""
        if not cmd.args:
            raise MissingOperandError(text('err_sudo_missing', session.locale), command='sudo')

        self._shell.authenticator.begin(session, ' '.join(cmd.args))
        return [ResultRecord.system(text('sudo_prompt', session.locale, session.actor))]

    def _cwd_directory(self, session: Session) -> ResolvedPath:
        resolved = self._shell.vfs.resolve(session.cwd)
        if resolved is None:
            raise PathNotFoundError(
                text('err_no_such_dir', session.locale, 'cwd', session.cwd),
                path=session.cwd
            )
        return resolved

    def cmd_touch(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Pretend to create a file."""
        if not cmd.operands:
            raise MissingOperandError(text('err_touch_missing', session.locale), command='touch')

        name = cmd.operands[0]
        self._require(self._cwd_directory(session), session, AccessKind.WRITE, 'touch', name)
        return [ResultRecord.success(text('touch_done', session.locale, name))]

    def cmd_mkdir(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Pretend to create a directory."""
        if not cmd.operands:
            raise MissingOperandError(text('err_mkdir_missing', session.locale), command='mkdir')

        name = cmd.operands[0]
        cwd = self._cwd_directory(session)
        if not PermissionEvaluator.check(cwd.node, session.as_actor(), AccessKind.WRITE):
            raise PermissionDeniedError(
                text('err_mkdir_denied', session.locale, name),
                path=cwd.path,
                operation='write',
                actor=session.actor
            )
        return [ResultRecord.success(text('mkdir_done', session.locale, name))]

    def cmd_chmod(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Validate a mode change without applying it."""
        if len(cmd.args) < 2:
            raise MissingOperandError(text('err_missing_operand', session.locale, 'chmod'), command='chmod')

        mode, target = cmd.args[0], cmd.args[1]

        if not (OCTAL_MODE.match(mode) or SYMBOLIC_MODE.match(mode)):
            raise InvalidArgumentError(text('err_chmod_mode', session.locale, mode), command='chmod')

        resolved = self._resolve(target, session)
        if resolved is None:
            raise PathNotFoundError(
                text('err_no_such_file', session.locale, 'chmod', target),
                path=target
            )

        if not session.is_privileged and resolved.node.owner != session.actor:
            raise PermissionDeniedError(
                text('err_perm_denied', session.locale, 'chmod', target),
                path=resolved.path,
                operation='chmod',
                actor=session.actor
            )

        return [ResultRecord.success(text('chmod_done', session.locale, target))]

    def cmd_chown(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Validate an ownership change without applying it."""
        if len(cmd.args) < 2:
            raise MissingOperandError(text('err_missing_operand', session.locale, 'chown'), command='chown')

        owner, target = cmd.args[0], cmd.args[1]

        # Only root may change ownership
        if not session.is_privileged:
            raise PermissionDeniedError(
                text('err_chown_root', session.locale),
                operation='chown',
                actor=session.actor
            )

        resolved = self._resolve(target, session)
        if resolved is None:
            raise PathNotFoundError(
                text('err_no_such_file', session.locale, 'chown', target),
                path=target
            )

        return [ResultRecord.success(text('chown_done', session.locale, target, owner))]

    def cmd_rm(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Refuse to delete anything."""
        if cmd.is_recursive_force:
            return self.decoy(cmd, session)

        if not cmd.args:
            raise MissingOperandError(text('err_missing_operand', session.locale, 'rm'), command='rm')

        raise PermissionDeniedError(text('err_rm_refused', session.locale), operation='rm', actor=session.actor)

    def decoy(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """
        Play out a fake recursive delete.

        Progress, errors and totals are appended to the entry over a few
        seconds, followed by a warning block and, later, a separate entry
        revealing that nothing was deleted. The tree is never touched.
        """
        hostname = self._shell.config.terminal.hostname
        actor = session.actor
        output = self._shell.output

        def say(*records: ResultRecord) -> Callable[[], List[ResultRecord]]:
            return lambda: list(records)

        def progress(index: int) -> Callable[[], List[ResultRecord]]:
            return lambda: [ResultRecord.system(
                text('decoy_progress', session.locale, index * 100 // len(DECOY_PATHS), DECOY_PATHS[index])
            )]

        def warnings() -> List[ResultRecord]:
            stamp = time.strftime('%Y-%m-%d %H:%M:%S', time.gmtime())
            locale = session.locale
            return [
                ResultRecord.system('-------------------------------'),
                ResultRecord.system(text('decoy_kernel_warning', locale, stamp)),
                ResultRecord.error(text('decoy_danger', locale)),
                ResultRecord.warning(text('decoy_guard', locale)),
                ResultRecord.system(text('decoy_restoring', locale, stamp)),
                ResultRecord.error(text('decoy_blocked', locale)),
                ResultRecord.system(text('decoy_loading_guard', locale)),
                ResultRecord.warning(text('decoy_rick_rolled', locale)),
            ]

        def reveal() -> None:
            locale = session.locale
            output.append_entry('', [
                ResultRecord.system(text('decoy_snapshot_restored', locale, actor, hostname)),
                ResultRecord.info(text('decoy_files_restored', locale, time.strftime('%Y-%m-%d %H:%M:%S'))),
                ResultRecord.warning(text('decoy_be_careful', locale)),
                ResultRecord.success(text('decoy_reveal', locale)),
            ])

        locale = session.locale
        chain = self._shell.chain('decoy')
        chain.then(1400, progress(0))
        for index in range(1, len(DECOY_PATHS)):
            chain.then(400, progress(index))
        chain.then(1400, say(
            ResultRecord.error(text('decoy_err_dpkg', locale)),
            ResultRecord.error(text('decoy_err_passwd', locale)),
            ResultRecord.error(text('decoy_err_boot', locale)),
        ))
        chain.then(1500, say(ResultRecord.system(text('decoy_files', locale))))
        chain.then(1500, say(ResultRecord.system(text('decoy_dirs', locale))))
        chain.then(1500, say(
            ResultRecord.success(text('decoy_completed', locale)),
            ResultRecord.system(text('decoy_skipped', locale)),
        ))
        chain.then(4000, warnings)
        chain.then(14000, reveal)

        self._logger.warning(
            "Recursive delete intercepted",
            context={'user': actor, 'line': cmd.line}
        )

        return [
            ResultRecord.system(f"[{actor}@{hostname} {session.cwd}]# rm -rf /*"),
            ResultRecord.success(text('decoy_deleting', locale)),
        ]

    def cmd_lang(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Show or change the content language."""
        if not cmd.args:
            return [
                ResultRecord.info(text('lang_current', session.locale)),
                ResultRecord.info(text('lang_usage', session.locale)),
            ]

        code = cmd.args[0].lower()
        locale = LANGUAGE_CODES.get(code)
        if locale is None or locale.value not in self._shell.config.locale.supported:
            raise InvalidOptionError(
                text('err_lang_invalid', session.locale, cmd.args[0]),
                command='lang',
                option=cmd.args[0],
                hints=[text('lang_usage', session.locale)]
            )

        session.locale = locale
        self._logger.debug("Locale changed", context={'locale': locale.value})
        return [ResultRecord.system(text('lang_changed', locale))]

    def cmd_deviser(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Start the deviser service, unlocking every command and directory."""
        if not cmd.args or cmd.args[0].lower() != 'start':
            raise InvalidArgumentError(text('err_deviser_usage', session.locale), command='deviser')

        if not session.unlock_full(self._shell.config.terminal.service_user):
            return [ResultRecord.info(text('service_already', session.locale))]

        self._logger.info(
            "Feature level unlocked",
            context={'user': session.actor, 'session': session.session_id}
        )

        terminal = self._shell.config.terminal
        output = self._shell.output
        locale = session.locale
        boot = [
            text('boot_kernel', locale, terminal.version),
            text('boot_modules', locale),
            text('boot_dependencies', locale),
            text('boot_profile', locale, terminal.service_user),
            text('boot_ready', locale),
        ]

        def ready() -> None:
            output.append_entry('', [ResultRecord.success(text('service_ready', locale))])

        chain = self._shell.chain('service-start')
        for message in boot:
            chain.then(600, lambda message=message: [ResultRecord.system(message)])
        chain.then(800, lambda: [ResultRecord.success(text('service_started', locale))])
        chain.then(1000, output.clear)
        chain.then(100, ready)

        return [ResultRecord.system(text('service_starting', locale))]

    def cmd_history(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display command history."""
        return [
            ResultRecord.success(f"{i:>5}  {line}")
            for i, line in enumerate(session.history, 1)
        ]

    def cmd_section(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Point the user at a portfolio section."""
        name = cmd.command
        title_key, example = SECTIONS[name]
        locale = session.locale

        if session.cwd != f"{ROOT}/{name}":
            return [
                ResultRecord.info(text('nav_switch_to_dir', locale, name)),
                ResultRecord.info(text('nav_use_cd', locale, name)),
            ]

        return [
            ResultRecord.info(text('nav_section_title', locale, text(title_key, locale))),
            ResultRecord.success(text('nav_use_ls', locale)),
            ResultRecord.success(text('nav_example', locale, example)),
        ]

    def cmd_github(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Display GitHub summary."""
        locale = session.locale
        lines = [
            'github_user', 'github_profile', 'github_repos', 'github_achievements',
            'github_projects', 'github_project_ai', 'github_project_crowdfunding',
            'github_project_sentiment', 'github_project_bot',
        ]
        return (
            [ResultRecord.info(text('github_title', locale))]
            + [ResultRecord.success(text(key, locale)) for key in lines]
            + [ResultRecord.system(text('github_more', locale))]
        )

    def cmd_find(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Search is not implemented."""
        if not cmd.args:
            raise MissingOperandError(text('err_find_missing', session.locale), command='find')
        raise UnsupportedCommandError(text('err_find_unsupported', session.locale), command='find')

    def cmd_clear(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """Clear the output history once this entry is recorded."""
        self._shell.after_entry(self._shell.output.clear)
        return []

    def cmd_exit(self, cmd: ParsedCommand, session: Session) -> List[ResultRecord]:
        """End the session."""
        return self._shell.logout_records(session)

    def reject_gated(self, cmd: ParsedCommand, session: Session) -> None:
        """Report a command unavailable at the restricted level as unknown."""
        raise CommandNotFoundError(
            text('err_cmd_not_found', session.locale, cmd.name),
            command=cmd.command,
            hints=[
                text('hint_restricted_start', session.locale),
                text('hint_restricted_help', session.locale),
            ]
        )
