"""
Router assembly.

A `Router` is the explicit context object that owns one of each routing
component. Routers share nothing, so several can coexist in one process.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from loguru import logger

from ..errors import RouteConfigError
from ..state.navigation_state import NavigationState
from .history_sync import HistorySynchronizer
from .link_interceptor import LinkInterceptor
from .navigation_manager import FallbackPolicy, NavigationController
from .renderer import MountPoint, ViewRenderer
from .route_table import RouteTable
from .view_registry import ViewDefinition, ViewRegistry


class Router:
    """Wires registry, route table, renderer, controller and history together."""

    def __init__(
        self,
        routes: Union[RouteTable, Mapping[str, Any]],
        views: Union[ViewRegistry, Iterable[ViewDefinition]],
        mount_point: MountPoint,
        default_path: str,
        *,
        start_path: Optional[str] = None,
        state: Optional[NavigationState] = None,
        fallback: Union[FallbackPolicy, str] = FallbackPolicy.REDIRECT,
        not_found_view: Optional[str] = None,
        strict: bool = True,
        max_history: int = 50,
        open_external: Optional[Callable[[str], None]] = None,
    ):
        self.route_table = routes if isinstance(routes, RouteTable) else RouteTable.from_mapping(routes)
        self.registry = views if isinstance(views, ViewRegistry) else ViewRegistry(views)

        try:
            policy = FallbackPolicy(fallback)
        except ValueError:
            raise RouteConfigError(f"Unknown fallback policy: {fallback!r}") from None

        if strict:
            self.route_table.validate(self.registry)
            if policy is FallbackPolicy.NOT_FOUND and not_found_view not in self.registry:
                raise RouteConfigError(f"Not-found view is not registered: {not_found_view}")

        self.state = state or NavigationState(initial_path=start_path or default_path, max_history=max_history)
        self.renderer = ViewRenderer(self.registry, mount_point)
        self.controller = NavigationController(
            self.route_table,
            self.renderer,
            self.state,
            default_path,
            fallback=policy,
            not_found_view=not_found_view,
        )
        self.synchronizer = HistorySynchronizer(self.state, self.controller)
        self.links = LinkInterceptor(self.controller, open_external=open_external)

        logger.info(
            f"Router assembled: {len(self.route_table)} routes, {len(self.registry)} views, "
            f"default={default_path}, fallback={policy.value}"
        )

    @classmethod
    def from_config(
        cls,
        config: Mapping[str, Any],
        mount_point: MountPoint,
        *,
        start_path: Optional[str] = None,
        open_external: Optional[Callable[[str], None]] = None,
    ) -> "Router":
        """Build a router from a loaded configuration dictionary."""
        settings = config.get("router", {})
        default_path = settings.get("default_path", "/")
        strict = settings.get("strict_routes", True)
        if not isinstance(strict, bool):
            raise RouteConfigError(f"strict_routes must be true or false, got {strict!r}")
        return cls(
            RouteTable.from_mapping(config.get("routes", {})),
            ViewRegistry.from_mapping(config.get("views", {})),
            mount_point,
            default_path,
            start_path=start_path or settings.get("start_path") or None,
            fallback=settings.get("fallback", FallbackPolicy.REDIRECT.value),
            not_found_view=settings.get("not_found_view") or None,
            strict=strict,
            max_history=settings.get("max_history", 50),
            open_external=open_external,
        )

    @property
    def mount_point(self) -> MountPoint:
        return self.renderer.mount_point

    @property
    def current_path(self) -> str:
        return self.state.current_path

    def start(self) -> None:
        """Subscribe to history pops and render the starting path."""
        self.synchronizer.attach()
        self.controller.start()

    def navigate(self, path: str) -> None:
        self.controller.navigate(path)

    def close(self) -> None:
        self.synchronizer.detach()

    def navigation_items(self) -> List[Tuple[str, str]]:
        """`(path, label)` pairs for every route that carries a title."""
        items = []
        for entry in self.route_table.entries():
            title = entry.title
            if title is None and entry.view_id in self.registry:
                title = self.registry.get(entry.view_id).title
            if title:
                items.append((entry.path, title))
        return items
