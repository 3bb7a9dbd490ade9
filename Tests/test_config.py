"""Tests for configuration loading and saving."""

import tomllib

import pytest

from view_router import config as config_module
from view_router.config import (
    DEFAULT_CONFIG_FROM_TOML,
    deep_merge_dicts,
    get_cli_setting,
    load_cli_config_and_ensure_existence,
    merge_user_config,
    resolve_start_path,
    save_setting_to_cli_config,
)


@pytest.fixture(autouse=True)
def reset_config_cache():
    config_module._CONFIG_CACHE = None
    config_module._CONFIG_CACHE_PATH = None
    yield
    config_module._CONFIG_CACHE = None
    config_module._CONFIG_CACHE_PATH = None


def test_default_content_parses():
    assert DEFAULT_CONFIG_FROM_TOML["router"]["default_path"] == "/login"
    assert DEFAULT_CONFIG_FROM_TOML["routes"]["/dashboard"] == {"view": "dashboard", "title": "Dashboard"}
    body = DEFAULT_CONFIG_FROM_TOML["views"]["dashboard"]["body"]
    assert [child["href"] for child in body[1]["children"]] == ["/about", "/login"]


def test_first_run_creates_file(isolated_config_path):
    config = load_cli_config_and_ensure_existence(config_path=isolated_config_path)

    assert isolated_config_path.exists()
    assert config["_first_run"] is True
    assert config["router"]["fallback"] == "redirect"


def test_user_file_merges_settings_and_replaces_routes(isolated_config_path):
    isolated_config_path.parent.mkdir(parents=True)
    isolated_config_path.write_text(
        '[router]\n'
        'default_path = "/home"\n'
        '[routes]\n'
        '"/home" = "home"\n'
        '[views.home]\n'
        'title = "Home"\n',
        encoding="utf-8",
    )

    config = load_cli_config_and_ensure_existence(config_path=isolated_config_path)

    assert config["router"]["default_path"] == "/home"
    assert config["router"]["fallback"] == "redirect"
    assert config["routes"] == {"/home": "home"}
    assert list(config["views"]) == ["home"]


def test_broken_file_falls_back_to_defaults(isolated_config_path):
    isolated_config_path.parent.mkdir(parents=True)
    isolated_config_path.write_text("[router\n", encoding="utf-8")

    config = load_cli_config_and_ensure_existence(config_path=isolated_config_path)

    assert config["routes"] == DEFAULT_CONFIG_FROM_TOML["routes"]


def test_cache_and_force_reload(isolated_config_path):
    first = load_cli_config_and_ensure_existence(config_path=isolated_config_path)
    assert load_cli_config_and_ensure_existence(config_path=isolated_config_path) == first
    reloaded = load_cli_config_and_ensure_existence(force_reload=True, config_path=isolated_config_path)
    assert "_first_run" in first
    assert "_first_run" not in reloaded
    assert reloaded["routes"] == first["routes"]


def test_loaded_config_is_a_private_copy(isolated_config_path):
    first = load_cli_config_and_ensure_existence(config_path=isolated_config_path)
    first["router"]["default_path"] = "/changed"
    first["routes"].clear()

    second = load_cli_config_and_ensure_existence(config_path=isolated_config_path)
    assert second is not first
    assert second["router"]["default_path"] == "/login"
    assert "/login" in second["routes"]
    assert config_module._CONFIG_CACHE["router"]["default_path"] == "/login"


def test_save_setting_round_trips_through_file(isolated_config_path):
    assert save_setting_to_cli_config("router", "last_path", "/about", config_path=isolated_config_path)

    with open(isolated_config_path, "rb") as f:
        assert tomllib.load(f)["router"]["last_path"] == "/about"
    config = load_cli_config_and_ensure_existence(config_path=isolated_config_path)
    assert get_cli_setting("router", "last_path", config=config) == "/about"


def test_save_setting_refuses_non_table_path(isolated_config_path):
    save_setting_to_cli_config("router", "last_path", "/about", config_path=isolated_config_path)
    assert save_setting_to_cli_config("router.last_path", "x", 1, config_path=isolated_config_path) is False


def test_get_cli_setting_defaults():
    config = {"router": {"fallback": "redirect"}, "flat": 3}
    assert get_cli_setting("router", "fallback", config=config) == "redirect"
    assert get_cli_setting("router", "missing", "d", config=config) == "d"
    assert get_cli_setting("flat", "x", "d", config=config) == "d"


def test_deep_merge_does_not_mutate_base():
    base = {"a": {"b": 1, "c": 2}}
    merged = deep_merge_dicts(base, {"a": {"b": 5}})
    assert merged == {"a": {"b": 5, "c": 2}}
    assert base == {"a": {"b": 1, "c": 2}}


def test_merge_user_config_keeps_defaults_without_routes():
    merged = merge_user_config(DEFAULT_CONFIG_FROM_TOML, {"logging": {"level": "DEBUG"}})
    assert merged["routes"] == DEFAULT_CONFIG_FROM_TOML["routes"]
    assert merged["logging"]["level"] == "DEBUG"


@pytest.mark.parametrize("cli,restore,last,start,expected", [
    ("/cli", True, "/last", "/start", "/cli"),
    (None, True, "/last", "/start", "/last"),
    (None, False, "/last", "/start", "/start"),
    (None, True, "", "", None),
])
def test_resolve_start_path(cli, restore, last, start, expected):
    config = {"router": {"restore_last_path": restore, "last_path": last, "start_path": start}}
    assert resolve_start_path(config, cli) == expected
