"""
Registry of all declared views.

A view definition is an inert blueprint: a tree of frozen `ViewNode`s. The
registry hands out fresh, mutable `ViewInstance` copies on demand.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from loguru import logger

from ..errors import NotFoundError, RouteConfigError

NODE_KINDS = frozenset({
    "static",
    "label",
    "markdown",
    "link",
    "container",
    "horizontal",
    "vertical",
})


def _split_classes(value: Any) -> Tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class ViewNode:
    """One immutable node of a view definition."""
    kind: str = "container"
    text: str = ""
    id: Optional[str] = None
    classes: Tuple[str, ...] = ()
    href: Optional[str] = None
    children: Tuple["ViewNode", ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in NODE_KINDS:
            raise RouteConfigError(f"Unknown view node kind: {self.kind!r}")
        if self.kind == "link" and not self.href:
            raise RouteConfigError(f"Link node {self.id or self.text!r} has no href")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ViewNode":
        """Build a node tree from a TOML table."""
        children = tuple(cls.from_mapping(child) for child in data.get("children", ()))
        return cls(
            kind=data.get("kind", "container"),
            text=str(data.get("text", "")),
            id=data.get("id"),
            classes=_split_classes(data.get("classes")),
            href=data.get("href"),
            children=children,
        )


@dataclass
class InstanceNode:
    """Mutable counterpart of `ViewNode`, owned by a single view instance."""
    kind: str
    text: str = ""
    id: Optional[str] = None
    classes: List[str] = field(default_factory=list)
    href: Optional[str] = None
    children: List["InstanceNode"] = field(default_factory=list)

    @classmethod
    def copy_of(cls, node: ViewNode) -> "InstanceNode":
        return cls(
            kind=node.kind,
            text=node.text,
            id=node.id,
            classes=list(node.classes),
            href=node.href,
            children=[cls.copy_of(child) for child in node.children],
        )

    def walk(self) -> Iterator["InstanceNode"]:
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class ViewDefinition:
    """A named, read-only view blueprint."""
    id: str
    content: ViewNode
    title: Optional[str] = None


@dataclass
class ViewInstance:
    """A fresh copy of a view definition, safe to mutate and attach."""
    view_id: str
    root: InstanceNode
    serial: int

    def find(self, node_id: str) -> Optional[InstanceNode]:
        for node in self.root.walk():
            if node.id == node_id:
                return node
        return None

    def links(self) -> List[str]:
        """Targets of every link node in the instance, in document order."""
        return [node.href for node in self.root.walk() if node.kind == "link" and node.href]


class ViewRegistry:
    """Central registry for all view definitions."""

    def __init__(self, definitions: Iterable[ViewDefinition] = ()):
        self._views: Dict[str, ViewDefinition] = {}
        self._serials = itertools.count(1)
        for definition in definitions:
            self.register(definition)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> "ViewRegistry":
        """
        Build a registry from the `[views]` configuration tables.

        Each table has an optional `title` and a `body` list of node tables,
        which becomes the children of the view's root container.
        """
        definitions = []
        for view_id, table in data.items():
            if not isinstance(table, Mapping):
                raise RouteConfigError(f"View '{view_id}' must be a table, got {type(table).__name__}")
            body = tuple(ViewNode.from_mapping(node) for node in table.get("body", ()))
            root = ViewNode(kind="container", classes=_split_classes(table.get("classes")), children=body)
            definitions.append(ViewDefinition(id=view_id, content=root, title=table.get("title")))
        return cls(definitions)

    def register(self, definition: ViewDefinition) -> None:
        if definition.id in self._views:
            raise RouteConfigError(f"Duplicate view id: {definition.id}")
        self._views[definition.id] = definition
        logger.debug(f"Registered view: {definition.id}")

    def get(self, view_id: str) -> ViewDefinition:
        try:
            return self._views[view_id]
        except KeyError:
            raise NotFoundError(view_id) from None

    def instantiate(self, view_id: str) -> ViewInstance:
        """Return a new, independent instance of the view `view_id`."""
        definition = self.get(view_id)
        return ViewInstance(
            view_id=definition.id,
            root=InstanceNode.copy_of(definition.content),
            serial=next(self._serials),
        )

    def list_views(self) -> List[str]:
        return list(self._views)

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views

    def __len__(self) -> int:
        return len(self._views)
