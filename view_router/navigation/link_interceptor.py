"""Turns link activations into in-app navigations."""

from typing import Callable, Optional

from loguru import logger

from .navigation_manager import NavigationController


def is_internal_href(href: str) -> bool:
    """Absolute in-app paths are internal. Scheme URLs and `//host` are not."""
    return href.startswith("/") and not href.startswith("//")


class LinkInterceptor:
    """
    Handles every link activation for a router.

    Internal targets are navigated to without the host's default behaviour.
    External targets go to `open_external`, which stands in for that default.
    """

    def __init__(
        self,
        controller: NavigationController,
        open_external: Optional[Callable[[str], None]] = None,
    ):
        self.controller = controller
        self.open_external = open_external

    def handle(self, href: Optional[str]) -> bool:
        """
        Process one activation.

        Returns:
            True if the activation was intercepted and navigated in-app
        """
        if not href:
            logger.debug("Ignoring link activation without a target")
            return False

        if not is_internal_href(href):
            logger.info(f"Opening external link: {href}")
            if self.open_external is not None:
                self.open_external(href)
            return False

        self.controller.navigate(href)
        return True
