"""
DeviOS - A terminal-style personal website core

This package provides the command dispatcher, in-memory portfolio file
system, sudo challenge and scripted output sequencer behind a
terminal-style website, implemented in Python 3.10+ using only the
standard library.
"""

__version__ = "1.0.0"
__author__ = "Deviser"

# Import main components for convenience
from .shell.shell import Shell, create_shell
from .shell.records import ResultRecord, RecordKind, OutputHistory
from .core.sequencer import Sequencer

__all__ = [
    'Shell',
    'create_shell',
    'ResultRecord',
    'RecordKind',
    'OutputHistory',
    'Sequencer',
]
