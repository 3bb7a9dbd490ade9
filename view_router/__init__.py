# view_router/__init__.py
# Description: Single-outlet view router for Textual applications.
#
from .errors import NotFoundError, RouteConfigError, RouterError
from .navigation import (
    FallbackPolicy,
    MemoryMountPoint,
    RouteEntry,
    RouteTable,
    Router,
    ViewDefinition,
    ViewInstance,
    ViewNode,
    ViewRegistry,
)
from .state import HistoryEntry, NavigationState

__version__ = "0.1.0"

__all__ = [
    'FallbackPolicy',
    'HistoryEntry',
    'MemoryMountPoint',
    'NavigationState',
    'NotFoundError',
    'RouteConfigError',
    'RouteEntry',
    'RouteTable',
    'Router',
    'RouterError',
    'ViewDefinition',
    'ViewInstance',
    'ViewNode',
    'ViewRegistry',
]
