"""Navigation state and browsing history."""

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    """Where the page view is in its load cycle."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class HistoryEntry:
    """A page that was successfully visited by a user-initiated navigation."""

    url: str
    title: str | None = None


@dataclass
class NavigationState:
    """What the page view currently shows."""

    current_url: str = ""
    rendered_markup: str | None = None
    error: str | None = None
    page_title: str | None = None
    is_loading: bool = False

    @property
    def phase(self) -> Phase:
        if self.is_loading:
            return Phase.LOADING
        if self.error is not None:
            return Phase.FAILED
        if self.rendered_markup is not None:
            return Phase.LOADED
        return Phase.IDLE


def normalize_url(raw: str) -> str:
    """Normalize user input into a fetchable URL.

    Returns an empty string for blank input. Input without an http(s)
    scheme gets https:// prepended.
    """
    trimmed = raw.strip()
    if not trimmed:
        return ""
    if trimmed.startswith(("http://", "https://")):
        return trimmed
    return "https://" + trimmed


class HistoryStack:
    """Linear browsing history with a cursor.

    The cursor is -1 while the stack is empty and always points at a valid
    entry otherwise. Pushing from the middle of the stack discards every
    entry after the cursor.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []
        self._cursor = -1

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> HistoryEntry | None:
        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    @property
    def can_go_back(self) -> bool:
        return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self._cursor < len(self._entries) - 1

    @property
    def position(self) -> str:
        """Human-readable cursor position, e.g. '2/3'."""
        return f"{self._cursor + 1}/{len(self._entries)}"

    def push(self, entry: HistoryEntry) -> None:
        """Append an entry after the cursor, truncating forward history."""
        del self._entries[self._cursor + 1 :]
        self._entries.append(entry)
        self._cursor = len(self._entries) - 1

    def back(self) -> HistoryEntry | None:
        """Move the cursor back one entry and return it, or None at the start."""
        if not self.can_go_back:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def forward(self) -> HistoryEntry | None:
        """Move the cursor forward one entry and return it, or None at the end."""
        if not self.can_go_forward:
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def is_empty(self) -> bool:
        return len(self._entries) == 0

    def __len__(self) -> int:
        return len(self._entries)
