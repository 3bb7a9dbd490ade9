"""
Navigation controller for path-based view routing.
"""

from enum import Enum
from typing import Callable, List, Optional

from loguru import logger

from ..errors import RouteConfigError
from ..state.navigation_state import NavigationState
from .renderer import ViewRenderer
from .route_table import RouteEntry, RouteTable


class FallbackPolicy(str, Enum):
    """What to do when the current path has no route."""
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"


RouteListener = Callable[[str, Optional[RouteEntry]], None]


class NavigationController:
    """
    Decides what is rendered for the current path.

    `navigate()` is the only way the controller changes the path; it pushes a
    history entry and then resolves. `resolve()` only renders.
    """

    def __init__(
        self,
        route_table: RouteTable,
        renderer: ViewRenderer,
        state: NavigationState,
        default_path: str,
        fallback: FallbackPolicy = FallbackPolicy.REDIRECT,
        not_found_view: Optional[str] = None,
    ):
        self.route_table = route_table
        self.renderer = renderer
        self.state = state
        self.default_path = default_path
        self.fallback = FallbackPolicy(fallback)
        self.not_found_view = not_found_view
        self._listeners: List[RouteListener] = []

        if self.fallback is FallbackPolicy.REDIRECT and default_path not in route_table:
            raise RouteConfigError(f"Default path has no route: {default_path}", path=default_path)
        if self.fallback is FallbackPolicy.NOT_FOUND and not not_found_view:
            raise RouteConfigError("The not_found fallback needs a not_found_view")

    @property
    def current_path(self) -> str:
        return self.state.current_path

    @property
    def current_route(self) -> Optional[RouteEntry]:
        return self.route_table.resolve(self.state.current_path)

    def start(self) -> None:
        """Initial resolution of whatever path the session starts on."""
        logger.info(f"Starting navigation at {self.state.current_path}")
        self.resolve()

    def resolve(self) -> None:
        """Render the view for the current path, or fall back."""
        path = self.state.current_path
        entry = self.route_table.resolve(path)
        if entry is None:
            self._fall_back(path)
            return

        self.renderer.render(entry.view_id)
        self._notify(path, entry)

    def navigate(self, path: str) -> None:
        """
        Push a history entry for `path` and render it.

        Args:
            path: Target path, e.g. "/dashboard"
        """
        logger.info(f"Navigating to {path}")
        self.state.push(path)
        self.resolve()

    def back(self) -> bool:
        """Step back through history. Rendering follows from the pop signal."""
        return self.state.back() is not None

    def forward(self) -> bool:
        return self.state.forward() is not None

    def add_listener(self, listener: RouteListener) -> None:
        """Call `listener(path, entry)` after every render. `entry` is None for the not-found view."""
        self._listeners.append(listener)

    def remove_listener(self, listener: RouteListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _fall_back(self, path: str) -> None:
        if self.fallback is FallbackPolicy.NOT_FOUND:
            logger.warning(f"Unknown path {path}, rendering {self.not_found_view}")
            self.renderer.render(self.not_found_view)
            self._notify(path, None)
            return

        # The default path is checked at construction and the table is fixed.
        logger.warning(f"Unknown path {path}, redirecting to {self.default_path}")
        self.navigate(self.default_path)

    def _notify(self, path: str, entry: Optional[RouteEntry]) -> None:
        for listener in list(self._listeners):
            listener(path, entry)
