"""
Navigation management module.
"""

from .history_sync import HistorySynchronizer
from .link_interceptor import LinkInterceptor, is_internal_href
from .navigation_manager import FallbackPolicy, NavigationController
from .renderer import MemoryMountPoint, MountPoint, ViewRenderer
from .route_table import RouteEntry, RouteTable
from .router import Router
from .view_registry import InstanceNode, ViewDefinition, ViewInstance, ViewNode, ViewRegistry

__all__ = [
    'FallbackPolicy',
    'HistorySynchronizer',
    'InstanceNode',
    'LinkInterceptor',
    'MemoryMountPoint',
    'MountPoint',
    'NavigationController',
    'RouteEntry',
    'RouteTable',
    'Router',
    'ViewDefinition',
    'ViewInstance',
    'ViewNode',
    'ViewRegistry',
    'ViewRenderer',
    'is_internal_href',
]
