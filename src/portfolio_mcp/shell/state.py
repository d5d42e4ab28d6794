"""Shell session state.

State is an immutable value: every command produces a new `ShellState`
rather than editing the old one, so a caller can always compare the state
before and after a transition.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, Tuple


class ShellMode(str, Enum):
    NORMAL = "normal"
    AWAITING_SEARCH_QUERY = "awaiting_search_query"


class EntryKind(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    SYSTEM = "system"


@dataclass(frozen=True)
class HistoryEntry:
    """One line (or block) of terminal history."""

    kind: EntryKind
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class ShellState:
    """Snapshot of one terminal session.

    Attributes:
        path: Directory names from the root to the working directory
        history: Entries in display order
        mode: Whether the next submitted line is a search query
        input_buffer: Pending input line (used by completion)
    """

    path: Tuple[str, ...] = ()
    history: Tuple[HistoryEntry, ...] = ()
    mode: ShellMode = ShellMode.NORMAL
    input_buffer: str = ""

    @classmethod
    def initial(cls, welcome: str) -> ShellState:
        return cls(history=(HistoryEntry(EntryKind.SYSTEM, welcome),))

    @property
    def cwd(self) -> str:
        return "/" + "/".join(self.path)

    def with_entries(self, entries: Iterable[HistoryEntry]) -> ShellState:
        return replace(self, history=self.history + tuple(entries))

    def evolve(self, **changes: Any) -> ShellState:
        return replace(self, **changes)


@dataclass(frozen=True)
class EnvironmentRequest:
    """Side effect requested by a command, dispatched after the state commits.

    Attributes:
        action: "navigate" (in-page anchor) or "open" (external URL)
        target: Anchor such as "#projects", or a URL
    """

    action: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"action": self.action, "target": self.target}


@dataclass(frozen=True)
class Transition:
    """Result of executing one line.

    `entries` are the history entries this line appended; when the line was
    `clear` the new state's history is empty and `cleared` is set.
    """

    state: ShellState
    entries: Tuple[HistoryEntry, ...] = ()
    requests: Tuple[EnvironmentRequest, ...] = ()
    cleared: bool = False
