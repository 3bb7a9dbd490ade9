"""
Navigation state management.

`NavigationState` plays the part of the host's session history: it owns the
stack of history entries and the cursor into it, and it is the only place
the current path lives.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from loguru import logger

from ..errors import RouteConfigError


@dataclass(frozen=True)
class HistoryEntry:
    """One opaque entry on the history stack."""
    path: str
    serial: int


PopListener = Callable[[HistoryEntry], None]


@dataclass
class NavigationState:
    """Session history with back/forward traversal and a pop signal."""

    initial_path: str = "/"
    max_history: int = 50

    # Navigation history
    history: List[HistoryEntry] = field(init=False, default_factory=list)
    index: int = field(init=False, default=0)

    _serial: int = field(init=False, default=0, repr=False)
    _listeners: List[PopListener] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.max_history, bool) or not isinstance(self.max_history, int) or self.max_history < 1:
            raise RouteConfigError(f"max_history must be a positive integer, got {self.max_history!r}")
        self.history.append(self._new_entry(self.initial_path))

    def _new_entry(self, path: str) -> HistoryEntry:
        entry = HistoryEntry(path=path, serial=self._serial)
        self._serial += 1
        return entry

    @property
    def current_entry(self) -> HistoryEntry:
        return self.history[self.index]

    @property
    def current_path(self) -> str:
        """The live path. Never cached anywhere else."""
        return self.current_entry.path

    @property
    def can_go_back(self) -> bool:
        return self.index > 0

    @property
    def can_go_forward(self) -> bool:
        return self.index < len(self.history) - 1

    def push(self, path: str) -> HistoryEntry:
        """
        Append a new entry for `path` and make it current.

        Entries ahead of the cursor are discarded. Pushing never fires the
        pop signal.
        """
        del self.history[self.index + 1:]
        entry = self._new_entry(path)
        self.history.append(entry)

        # Maintain history
        if len(self.history) > self.max_history:
            overflow = len(self.history) - self.max_history
            del self.history[:overflow]
        self.index = len(self.history) - 1

        logger.debug(f"History push: {path} (entries={len(self.history)})")
        return entry

    def go(self, delta: int) -> Optional[HistoryEntry]:
        """
        Move the cursor by `delta` entries and fire the pop signal.

        Returns the new current entry, or None when the move would leave the
        stack (nothing is fired in that case).
        """
        target = self.index + delta
        if delta == 0 or target < 0 or target >= len(self.history):
            logger.debug(f"History traversal by {delta} ignored at index {self.index}")
            return None

        self.index = target
        entry = self.current_entry
        logger.debug(f"History pop: {entry.path} (index={self.index})")
        for listener in list(self._listeners):
            listener(entry)
        return entry

    def back(self) -> Optional[HistoryEntry]:
        return self.go(-1)

    def forward(self) -> Optional[HistoryEntry]:
        return self.go(1)

    def subscribe(self, listener: PopListener) -> Callable[[], None]:
        """Register a pop listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def paths(self) -> List[str]:
        """Paths of all entries, oldest first."""
        return [entry.path for entry in self.history]
