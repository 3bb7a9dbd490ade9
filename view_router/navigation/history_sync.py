"""Keeps the rendered view in step with back/forward traversal."""

from typing import Callable, Optional

from loguru import logger

from ..state.navigation_state import HistoryEntry, NavigationState
from .navigation_manager import NavigationController


class HistorySynchronizer:
    """
    Re-resolves on every history pop.

    `NavigationState.push` does not fire the pop signal, so navigations made
    through the controller never come back through here.
    """

    def __init__(self, state: NavigationState, controller: NavigationController):
        self.state = state
        self.controller = controller
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self) -> None:
        if self._unsubscribe is not None:
            return
        self._unsubscribe = self.state.subscribe(self._on_pop)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_pop(self, entry: HistoryEntry) -> None:
        logger.debug(f"History moved to {entry.path}, re-resolving")
        self.controller.resolve()
