"""
Result Records

Typed command output and the shared output history it is written to.

The dispatcher returns records synchronously; scheduled sequencer steps
keep appending to, replacing or clearing the history afterwards, so every
mutation of the history happens under one lock.

Author: Deviser
Version: 1.0.0
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, List, Union


class RecordKind(Enum):
    """Display class of a record."""
    ERROR = "error"
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    SYSTEM = "system"
    LOGOUT = "logout"  # Terminal marker: the session ends


@dataclass(frozen=True)
class ListingEntry:
    """One row of a directory listing."""
    name: str
    is_directory: bool
    permissions: str
    owner: str
    group: str

    @property
    def display_name(self) -> str:
        return f"{self.name}/" if self.is_directory else self.name

    def long_line(self) -> str:
        return f"{self.permissions} {self.owner} {self.group} {self.display_name}"


@dataclass(frozen=True)
class Listing:
    """Structured payload of ``ls``."""
    entries: tuple[ListingEntry, ...] = ()
    long_format: bool = False

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def render(self) -> str:
        """Plain-text rendering for consoles."""
        if self.long_format:
            return '\n'.join(entry.long_line() for entry in self.entries)
        return '  '.join(entry.display_name for entry in self.entries)

    def __str__(self) -> str:
        return self.render()


Payload = Union[str, Listing]


@dataclass(frozen=True)
class ResultRecord:
    """One typed unit of command output."""
    kind: RecordKind
    payload: Payload = ""

    @property
    def text(self) -> str:
        return str(self.payload)

    @classmethod
    def error(cls, payload: Payload) -> 'ResultRecord':
        return cls(RecordKind.ERROR, payload)

    @classmethod
    def success(cls, payload: Payload) -> 'ResultRecord':
        return cls(RecordKind.SUCCESS, payload)

    @classmethod
    def info(cls, payload: Payload) -> 'ResultRecord':
        return cls(RecordKind.INFO, payload)

    @classmethod
    def warning(cls, payload: Payload) -> 'ResultRecord':
        return cls(RecordKind.WARNING, payload)

    @classmethod
    def system(cls, payload: Payload) -> 'ResultRecord':
        return cls(RecordKind.SYSTEM, payload)

    @classmethod
    def logout(cls) -> 'ResultRecord':
        return cls(RecordKind.LOGOUT, "")


@dataclass
class OutputEntry:
    """A submitted line and everything printed for it."""
    command: str
    records: List[ResultRecord] = field(default_factory=list)


class HistoryEvent(Enum):
    """What changed in the output history."""
    APPENDED = "appended"
    EXTENDED = "extended"
    REPLACED = "replaced"
    CLEARED = "cleared"


HistoryListener = Callable[[HistoryEvent, Optional[OutputEntry], List[ResultRecord]], None]


class OutputHistory:
    """
    Ordered list of output entries shared by the dispatcher and the
    sequencer.

    Listeners are called after each mutation, still holding the lock, with
    the event, the affected entry and the records involved.
    """

    def __init__(self):
        self._entries: List[OutputEntry] = []
        self._lock = threading.RLock()
        self._listeners: List[HistoryListener] = []

    def add_listener(self, listener: HistoryListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: HistoryListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _notify(self, event: HistoryEvent, entry: Optional[OutputEntry], records: List[ResultRecord]) -> None:
        for listener in list(self._listeners):
            listener(event, entry, records)

    def append_entry(self, command: str, records: Optional[List[ResultRecord]] = None) -> OutputEntry:
        """Open a new entry."""
        with self._lock:
            entry = OutputEntry(command, list(records or []))
            self._entries.append(entry)
            self._notify(HistoryEvent.APPENDED, entry, list(entry.records))
            return entry

    def extend_last(self, records: List[ResultRecord]) -> None:
        """
        Append records to the newest entry.

        Opens an untitled entry first if the history is empty, e.g. right
        after a clear.
        """
        with self._lock:
            if not self._entries:
                self._entries.append(OutputEntry(''))
            entry = self._entries[-1]
            entry.records.extend(records)
            self._notify(HistoryEvent.EXTENDED, entry, list(records))

    def replace_last(self, records: List[ResultRecord]) -> None:
        """Overwrite the records of the newest entry."""
        with self._lock:
            if not self._entries:
                self._entries.append(OutputEntry(''))
            entry = self._entries[-1]
            entry.records = list(records)
            self._notify(HistoryEvent.REPLACED, entry, list(records))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._notify(HistoryEvent.CLEARED, None, [])

    def snapshot(self) -> List[OutputEntry]:
        """Copy of all entries, safe to read while steps keep firing."""
        with self._lock:
            return [OutputEntry(entry.command, list(entry.records)) for entry in self._entries]

    @property
    def last(self) -> Optional[OutputEntry]:
        with self._lock:
            if not self._entries:
                return None
            entry = self._entries[-1]
            return OutputEntry(entry.command, list(entry.records))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
