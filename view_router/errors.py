# errors.py
# Description: Exception hierarchy for the view router
#
"""
Router exceptions.

An unresolved path is not an error: the navigation controller recovers from it
with its fallback policy. The exceptions below indicate configuration defects
and are meant to propagate.
"""

from typing import Optional


class RouterError(Exception):
    """Base exception for view router errors."""
    pass


class NotFoundError(RouterError, LookupError):
    """Raised when no view definition is registered under a view id."""

    def __init__(self, view_id: str, message: Optional[str] = None):
        super().__init__(message or f"No view definition registered for '{view_id}'")
        self.view_id = view_id


class RouteConfigError(RouterError, ValueError):
    """Malformed route table or view configuration."""

    def __init__(self, message: str = "Invalid router configuration.", path: Optional[str] = None):
        super().__init__(message)
        self.path = path
