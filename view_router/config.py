# view_router/config.py
# Description: Configuration management for the view_router application.
#
# Imports
import copy
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the user's configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "view_router" / "config.toml"

# Sections a user file replaces wholesale instead of merging into the defaults,
# so that a user route table can drop the sample routes.
REPLACED_SECTIONS = ("routes", "views")

CONFIG_TOML_CONTENT = """
# Configuration for the view_router TUI app
# Located at: ~/.config/view_router/config.toml
[router]
# Path rendered when the current path has no route (redirect fallback).
default_path = "/login"
# Path the session starts on. Empty means default_path.
start_path = ""
# "redirect" sends unknown paths to default_path.
# "not_found" renders not_found_view and leaves the unknown path current.
fallback = "redirect"
not_found_view = "not_found"
# Check at startup that every route points at a declared view.
strict_routes = true
max_history = 50
# Reopen the last visited path on the next start.
restore_last_path = false
last_path = ""

[logging]
level = "INFO"
log_file = "~/.local/share/view_router/view_router.log"
rotation = "10 MB"
retention = "7 days"

[routes]
"/login" = { view = "login", title = "Login" }
"/dashboard" = { view = "dashboard", title = "Dashboard" }
"/about" = { view = "about", title = "About" }

[views.login]
title = "Login"

[[views.login.body]]
kind = "markdown"
text = "# Sign in"

[[views.login.body]]
kind = "static"
text = "You are signed out."

[[views.login.body]]
kind = "link"
id = "login-link"
text = "Sign in and open the dashboard"
href = "/dashboard"

[views.dashboard]
title = "Dashboard"

[[views.dashboard.body]]
kind = "markdown"
text = "# Dashboard"

[[views.dashboard.body]]
kind = "horizontal"
classes = "link-row"

[[views.dashboard.body.children]]
kind = "link"
id = "about-link"
text = "About"
href = "/about"

[[views.dashboard.body.children]]
kind = "link"
id = "logout-link"
text = "Log out"
href = "/login"

[views.about]
title = "About"

[[views.about.body]]
kind = "markdown"
text = "# About\\n\\nA single-outlet view router for Textual."

[[views.about.body]]
kind = "link"
id = "docs-link"
text = "Textual documentation"
href = "https://textual.textualize.io/"

[views.not_found]
title = "Not found"

[[views.not_found.body]]
kind = "markdown"
text = "# Page not found"

[[views.not_found.body]]
kind = "link"
id = "home-link"
text = "Back to sign in"
href = "/login"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_user_config(base: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a user file over the defaults, replacing the route and view sections."""
    merged = deep_merge_dicts(base, {k: v for k, v in user.items() if k not in REPLACED_SECTIONS})
    for section in REPLACED_SECTIONS:
        if section in user:
            merged[section] = copy.deepcopy(user[section])
    return merged


_CONFIG_CACHE: Optional[Dict[str, Any]] = None
_CONFIG_CACHE_PATH: Optional[Path] = None


def load_cli_config_and_ensure_existence(
    force_reload: bool = False,
    config_path: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Loads settings from the user's TOML config, creating it on first run.

    Uses the programmatic defaults from CONFIG_TOML_CONTENT as a base. A file
    that cannot be read or decoded is logged and the defaults are used.
    Callers get their own copy; changing it leaves the cache alone.
    """
    global _CONFIG_CACHE, _CONFIG_CACHE_PATH
    path = Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH
    if _CONFIG_CACHE is not None and _CONFIG_CACHE_PATH == path and not force_reload:
        return copy.deepcopy(_CONFIG_CACHE)

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not path.exists():
        logger.info(f"Config file not found at {path}. Creating it with default values.")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(CONFIG_TOML_CONTENT)
            logger.info(f"Created default config file at {path}")
            loaded_config["_first_run"] = True
        except OSError as e:
            logger.error(f"Could not create default config file {path}: {e}. Using internal defaults.")
    else:
        logger.info(f"Attempting to load config from: {path}")
        try:
            with open(path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = merge_user_config(loaded_config, user_config_from_file)
            logger.info(f"Successfully loaded and merged config from {path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    _CONFIG_CACHE_PATH = path
    logger.debug(f"Config loaded with top-level keys: {list(loaded_config.keys())}")
    return copy.deepcopy(_CONFIG_CACHE)


def save_setting_to_cli_config(
    section: str,
    key: str,
    value: Any,
    config_path: Optional[Path] = None,
) -> bool:
    """
    Saves one setting to the user's TOML config and reloads the cache.

    Nested sections are addressed with dots, e.g. "router.extra".
    """
    path = Path(config_path).expanduser() if config_path else DEFAULT_CONFIG_PATH
    config_data: Dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "rb") as f:
                config_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Unexpected error reading {path}: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Configuration structure conflict. Could not set '{key}' in section '{section}' "
            f"because a part of the path is not a table."
        )
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Failed to write updated config to {path}: {e}")
        return False

    logger.success(f"Saved {section}.{key} to {path}")
    load_cli_config_and_ensure_existence(force_reload=True, config_path=path)
    return True


# --- CLI Setting Getter ---
def get_cli_setting(section: str, key: str, default: Any = None, config: Optional[Dict[str, Any]] = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    if config is None:
        config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def resolve_start_path(config: Dict[str, Any], cli_start_path: Optional[str] = None) -> Optional[str]:
    """
    Pick the path a session starts on.

    An explicit command-line path wins, then the remembered last path (when
    restore_last_path is on), then router.start_path.
    """
    if cli_start_path:
        return cli_start_path
    if get_cli_setting("router", "restore_last_path", False, config=config):
        last_path = get_cli_setting("router", "last_path", "", config=config)
        if last_path:
            return last_path
    return get_cli_setting("router", "start_path", "", config=config) or None

#
# End of config.py
#######################################################################################################################
