"""The Textual mount point: one container that shows exactly one view instance."""

from typing import Optional

from loguru import logger

from textual import on
from textual.containers import Container, Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Label, Markdown, Static

from ...navigation.link_interceptor import LinkInterceptor
from ...navigation.view_registry import InstanceNode, ViewInstance
from .main_navigation import RouteLink

_CONTAINERS = {
    "container": Container,
    "horizontal": Horizontal,
    "vertical": Vertical,
}


def build_widget(node: InstanceNode) -> Widget:
    """Create the Textual widget tree for one instance node."""
    classes = " ".join(node.classes) or None
    if node.kind in _CONTAINERS:
        children = [build_widget(child) for child in node.children]
        return _CONTAINERS[node.kind](*children, id=node.id, classes=classes)
    if node.kind == "link":
        return RouteLink(node.text, node.href, id=node.id, classes=classes)
    if node.kind == "markdown":
        return Markdown(node.text, id=node.id, classes=classes)
    if node.kind == "label":
        return Label(node.text, markup=False, id=node.id, classes=classes)
    return Static(node.text, markup=False, id=node.id, classes=classes)


class RenderedView(Vertical):
    """Widget tree of a single view instance."""

    DEFAULT_CSS = """
    RenderedView {
        height: auto;
    }
    """

    def __init__(self, instance: ViewInstance):
        super().__init__(
            *(build_widget(child) for child in instance.root.children),
            classes=" ".join(["rendered-view", f"view-{instance.view_id}", *instance.root.classes]),
        )
        self.instance = instance


class ViewOutlet(Container):
    """
    Mount point for the router.

    Link activations from any rendered instance bubble here and are handed to
    the interceptor, so nothing has to be rebound when the view changes.
    """

    DEFAULT_CSS = """
    ViewOutlet {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }
    """

    def __init__(self, interceptor: Optional[LinkInterceptor] = None, **kwargs):
        super().__init__(**kwargs)
        self.interceptor = interceptor
        self._instance: Optional[ViewInstance] = None

    @property
    def current(self) -> Optional[ViewInstance]:
        return self._instance

    def attach(self, instance: ViewInstance) -> None:
        """Remove the previous view and mount `instance` in its place."""
        self.remove_children()
        self._instance = instance
        self.mount(RenderedView(instance))
        logger.debug(f"Outlet attached {instance.view_id} (instance #{instance.serial})")

    @on(RouteLink.Activated)
    def intercept_link(self, event: RouteLink.Activated) -> None:
        if self.interceptor is None:
            return
        event.stop()
        event.prevent_default()
        self.interceptor.handle(event.href)
