"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import copy
import sys
from pathlib import Path

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from view_router.navigation import (
    MemoryMountPoint,
    Router,
    ViewDefinition,
    ViewNode,
    ViewRegistry,
)


# ========== View and Route Fixtures ==========

def make_view(view_id, *links, title=None):
    """A view with a heading and one link node per `(node_id, href)` pair."""
    children = [ViewNode(kind="static", text=view_id.title(), id=f"{view_id}-heading")]
    for node_id, href in links:
        children.append(ViewNode(kind="link", text=href, id=node_id, href=href))
    return ViewDefinition(id=view_id, content=ViewNode(children=tuple(children)), title=title)


@pytest.fixture
def sample_views():
    return [
        make_view("login", ("login-link", "/dashboard"), title="Login"),
        make_view("dashboard", ("logout-link", "/login"), title="Dashboard"),
        make_view("not_found", ("home-link", "/login")),
    ]


@pytest.fixture
def sample_routes():
    return {"/login": "login", "/dashboard": "dashboard"}


@pytest.fixture
def registry(sample_views):
    return ViewRegistry(sample_views)


@pytest.fixture
def mount_point():
    return MemoryMountPoint()


@pytest.fixture
def make_router(sample_routes, sample_views, mount_point):
    """Factory for routers over the sample routes rendering into `mount_point`."""
    def _make_router(start_path="/login", **kwargs):
        kwargs.setdefault("default_path", "/login")
        return Router(sample_routes, sample_views, mount_point, start_path=start_path, **kwargs)
    return _make_router


# ========== Config Fixtures ==========

@pytest.fixture
def app_config():
    """Default configuration with file logging and last-path restore switched off."""
    from view_router.config import DEFAULT_CONFIG_FROM_TOML

    config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    config["logging"]["log_file"] = ""
    config["router"]["restore_last_path"] = False
    return config


@pytest.fixture
def isolated_config_path(tmp_path):
    """A config path inside a temporary directory that does not exist yet."""
    return tmp_path / "view_router" / "config.toml"
