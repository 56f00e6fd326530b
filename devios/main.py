#!/usr/bin/env python3
"""
DeviOS - A terminal-style personal website core

This is the console entry point for DeviOS. It stands in for the web
front end: lines typed at the prompt are dispatched to the shell and
every change to the output history is printed as it happens, including
output scheduled by the sequencer.

Author: Deviser
Version: 1.0.0
"""

import sys
import threading
from typing import Optional, List

from devios.core.config_loader import ConfigLoader, Config, DEFAULT_CONFIG_PATH
from devios.exceptions import ConfigurationError
from devios.logger import Logger, LogLevel, get_logger
from devios.shell.records import RecordKind, ResultRecord, OutputEntry, HistoryEvent
from devios.shell.shell import Shell


COLORS = {
    RecordKind.ERROR: '\033[31m',
    RecordKind.SUCCESS: '\033[32m',
    RecordKind.INFO: '\033[36m',
    RecordKind.WARNING: '\033[33m',
    RecordKind.SYSTEM: '\033[37m',
}
RESET = '\033[0m'


class ConsoleRenderer:
    """Prints output history events to stdout."""

    def __init__(self, use_colors: bool = True):
        self._use_colors = use_colors and sys.stdout.isatty()
        self._lock = threading.Lock()
        self.logged_out = threading.Event()

    def _print_records(self, records: List[ResultRecord]) -> None:
        for record in records:
            if record.kind == RecordKind.LOGOUT:
                self.logged_out.set()
                continue
            if self._use_colors:
                print(f"{COLORS[record.kind]}{record.text}{RESET}")
            else:
                print(record.text)

    def __call__(self, event: HistoryEvent, entry: Optional[OutputEntry], records: List[ResultRecord]) -> None:
        with self._lock:
            if event == HistoryEvent.CLEARED:
                if self._use_colors:
                    print('\033[2J\033[H', end='')
                return
            self._print_records(records)
            sys.stdout.flush()


def load_config(path: str) -> Config:
    """Load configuration, falling back to defaults if the file is missing."""
    loader = ConfigLoader()
    try:
        return loader.load(path)
    except ConfigurationError as e:
        print(f"Warning: {e.message}; using default configuration", file=sys.stderr)
        return loader.config


def init_logging(config: Config) -> None:
    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file or None,
        use_colors=True,
        console_output=config.logging.console_output
    )


def main() -> int:
    """
    Main entry point for DeviOS.

    Startup sequence:
    1. Load configuration
    2. Initialize logging
    3. Create the shell and start the sequencer
    4. Read lines until logout
    5. Stop the sequencer
    """
    config_path = sys.argv[1] if len(sys.argv) > 1 else str(DEFAULT_CONFIG_PATH)
    config = load_config(config_path)
    init_logging(config)
    logger = get_logger('main')

    renderer = ConsoleRenderer()
    shell = Shell(config=config)

    # The welcome entry was appended before the renderer was attached
    for entry in shell.output.snapshot():
        renderer(HistoryEvent.APPENDED, entry, entry.records)
    shell.output.add_listener(renderer)

    shell.sequencer.start()
    logger.info("Terminal started", context={'session': shell.session.session_id})

    try:
        while True:
            if renderer.logged_out.is_set():
                # Logging out starts a fresh session, like reloading the page
                renderer.logged_out.clear()
                shell.reset()

            try:
                line = input(f"{shell.prompt()} ")
            except EOFError:
                print()
                shell.end_of_input('')
                break
            except KeyboardInterrupt:
                print()
                shell.interrupt('')
                continue

            shell.execute(line)
    finally:
        shell.sequencer.stop()
        logger.info("Terminal stopped")

    return 0


def run_script(lines: List[str], config: Optional[Config] = None) -> List[OutputEntry]:
    """
    Run lines non-interactively, firing all scheduled output immediately.

    Args:
        lines: Lines to submit in order
        config: Configuration, defaults to the loaded one

    Returns:
        Final output history
    """
    shell = Shell(config=config)
    for line in lines:
        shell.execute(line)
        shell.sequencer.run_until_idle()
    return shell.output.snapshot()


if __name__ == '__main__':
    sys.exit(main())
