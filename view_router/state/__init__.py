"""
State management module for view_router.
"""

from .navigation_state import HistoryEntry, NavigationState

__all__ = [
    'HistoryEntry',
    'NavigationState',
]
