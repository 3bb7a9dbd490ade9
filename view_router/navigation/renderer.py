"""
View rendering into the single mount point.
"""

from typing import List, Optional, Protocol

from loguru import logger

from ..errors import NotFoundError
from .view_registry import ViewInstance, ViewRegistry


class MountPoint(Protocol):
    """The one surface a router renders into."""

    @property
    def current(self) -> Optional[ViewInstance]:
        ...

    def attach(self, instance: ViewInstance) -> None:
        """Clear the surface and attach `instance` as its only content."""
        ...


class MemoryMountPoint:
    """Headless mount point. Keeps attached instances in `children`."""

    def __init__(self) -> None:
        self.children: List[ViewInstance] = []
        self.attach_count = 0

    @property
    def current(self) -> Optional[ViewInstance]:
        return self.children[-1] if self.children else None

    def attach(self, instance: ViewInstance) -> None:
        self.children.clear()
        self.children.append(instance)
        self.attach_count += 1


class ViewRenderer:
    """Sole writer of the mount point."""

    def __init__(self, registry: ViewRegistry, mount_point: MountPoint):
        self.registry = registry
        self.mount_point = mount_point

    def render(self, view_id: str) -> ViewInstance:
        """
        Instantiate `view_id` and make it the mount point's only content.

        Raises:
            NotFoundError: if the view is not registered. The mount point is
                left untouched.
        """
        try:
            instance = self.registry.instantiate(view_id)
        except NotFoundError:
            logger.error(f"Cannot render unknown view: {view_id}")
            raise

        self.mount_point.attach(instance)
        logger.debug(f"Rendered view {view_id} (instance #{instance.serial})")
        return instance
