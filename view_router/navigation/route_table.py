"""Static path to view mapping."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from ..errors import RouteConfigError
from .view_registry import ViewRegistry


@dataclass(frozen=True)
class RouteEntry:
    path: str
    view_id: str
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def title(self) -> Optional[str]:
        return self.metadata.get("title")


class RouteTable:
    """Exact-match route lookup. Fixed once constructed."""

    def __init__(self, entries: Iterable[RouteEntry] = ()):
        self._routes: Dict[str, RouteEntry] = {}
        for entry in entries:
            if not entry.path.startswith("/"):
                raise RouteConfigError(f"Route path must start with '/': {entry.path!r}", path=entry.path)
            if entry.path in self._routes:
                raise RouteConfigError(f"Duplicate route path: {entry.path}", path=entry.path)
            self._routes[entry.path] = entry

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RouteTable":
        """
        Build a table from `{path: view_id}`.

        A value may also be a table `{view = "...", title = "..."}`; every key
        other than `view` is kept as route metadata.
        """
        entries = []
        for path, value in data.items():
            if isinstance(value, str):
                entries.append(RouteEntry(path=path, view_id=value))
            elif isinstance(value, Mapping) and isinstance(value.get("view"), str):
                metadata = {k: v for k, v in value.items() if k != "view"}
                entries.append(RouteEntry(path=path, view_id=value["view"], metadata=MappingProxyType(metadata)))
            else:
                raise RouteConfigError(f"Route {path!r} must name a view", path=path)
        return cls(entries)

    def resolve(self, path: str) -> Optional[RouteEntry]:
        entry = self._routes.get(path)
        if entry is None:
            logger.debug(f"No route for path: {path}")
        return entry

    def validate(self, registry: ViewRegistry) -> None:
        """Check that every route points at a registered view."""
        missing = [entry for entry in self._routes.values() if entry.view_id not in registry]
        if missing:
            details = ", ".join(f"{entry.path} -> {entry.view_id}" for entry in missing)
            raise RouteConfigError(f"Routes reference unknown views: {details}", path=missing[0].path)

    def paths(self) -> List[str]:
        return list(self._routes)

    def entries(self) -> List[RouteEntry]:
        return list(self._routes.values())

    def __contains__(self, path: object) -> bool:
        return path in self._routes

    def __len__(self) -> int:
        return len(self._routes)
