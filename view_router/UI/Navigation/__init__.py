"""Navigation components for path-based view routing."""

from .main_navigation import MainNavigationBar, RouteLink, path_slug
from .view_outlet import RenderedView, ViewOutlet, build_widget

__all__ = [
    'MainNavigationBar',
    'RenderedView',
    'RouteLink',
    'ViewOutlet',
    'build_widget',
    'path_slug',
]
