"""Route links and the main navigation bar."""

import re
from typing import List, Optional, Tuple

from loguru import logger

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.events import Click
from textual.message import Message
from textual.widgets import Static


def path_slug(path: str) -> str:
    """Widget-id friendly form of a path: "/" -> "root", "/a/b" -> "a-b"."""
    slug = re.sub(r"[^A-Za-z0-9_-]+", "-", path).strip("-")
    return slug or "root"


class RouteLink(Static, can_focus=True):
    """
    A clickable link to a path.

    The link never navigates by itself: it posts `RouteLink.Activated`, which
    bubbles until a link interceptor handles it.
    """

    DEFAULT_CSS = """
    RouteLink {
        width: auto;
        color: $accent;
        text-style: underline;
    }

    RouteLink:hover, RouteLink:focus {
        text-style: bold underline;
    }

    RouteLink.-active {
        color: $warning;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("enter", "follow", "Open link", show=False),
    ]

    class Activated(Message):
        """Posted when a route link is clicked or followed with the keyboard."""

        def __init__(self, link: "RouteLink", href: str):
            super().__init__()
            self.link = link
            self.href = href

        @property
        def control(self) -> "RouteLink":
            return self.link

    def __init__(self, label: str, href: str, **kwargs):
        super().__init__(label, markup=False, **kwargs)
        self.href = href

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_follow()

    def action_follow(self) -> None:
        self.post_message(self.Activated(self, self.href))


class MainNavigationBar(Container):
    """
    Main navigation bar for the application.
    One link per titled route; the link for the current path is marked active.
    """

    DEFAULT_CSS = """
    MainNavigationBar {
        height: 1;
        width: 100%;
        background: $panel;
    }

    .main-nav {
        height: 1;
        width: auto;
        padding: 0 1;
    }

    .nav-separator {
        width: auto;
        color: $text-muted;
    }
    """

    def __init__(self, nav_items: List[Tuple[str, str]], active: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.nav_items = nav_items
        self.active_path = active

    def compose(self) -> ComposeResult:
        with Horizontal(classes="main-nav"):
            for i, (path, label) in enumerate(self.nav_items):
                if i > 0:
                    yield Static(" | ", classes="nav-separator")
                link = RouteLink(label, path, id=f"nav-{path_slug(path)}", classes="nav-link")
                if path == self.active_path:
                    link.add_class("-active")
                yield link

    def set_active(self, path: str) -> None:
        """Mark the link for `path` active. Paths without a link clear the marker."""
        self.active_path = path
        for link in self.query(RouteLink):
            link.set_class(link.href == path, "-active")
        logger.debug(f"Navigation bar active path: {path}")
