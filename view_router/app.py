# view_router - Single-outlet view router for Textual
# Description: The Textual application hosting the router, and the command-line entry point.
#
# Imports
import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
#
# 3rd-Party Libraries
from loguru import logger
from rich.console import Console
from rich.table import Table
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header
#
# Local Imports
from .config import (
    get_cli_setting,
    load_cli_config_and_ensure_existence,
    resolve_start_path,
    save_setting_to_cli_config,
)
from .errors import RouterError
from .Logging_Config import configure_from_settings
from .navigation import MemoryMountPoint, RouteEntry, Router
from .UI.Navigation import MainNavigationBar, RouteLink, ViewOutlet
#
#######################################################################################################################
#
# Classes:


class ViewRouterApp(App):
    """Hosts one router: a navigation bar, the outlet, and back/forward bindings."""

    TITLE = "view_router"

    BINDINGS = [
        Binding("alt+left", "back", "Back"),
        Binding("alt+right", "forward", "Forward"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        start_path: Optional[str] = None,
        config_path: Optional[Path] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.config_path = config_path
        self.app_config = config if config is not None else load_cli_config_and_ensure_existence(
            config_path=config_path
        )
        self.outlet = ViewOutlet(id="view-outlet")
        # Configuration errors surface here, before the terminal is taken over.
        self.router = Router.from_config(
            self.app_config,
            self.outlet,
            start_path=resolve_start_path(self.app_config, start_path),
            open_external=self._open_external,
        )
        self.outlet.interceptor = self.router.links
        self.router.controller.add_listener(self._on_route_changed)

    def compose(self) -> ComposeResult:
        yield Header()
        yield MainNavigationBar(self.router.navigation_items(), id="main-nav")
        yield self.outlet
        yield Footer()

    def on_mount(self) -> None:
        self.router.start()

    def on_unmount(self) -> None:
        self.router.close()
        if get_cli_setting("router", "restore_last_path", False, config=self.app_config):
            save_setting_to_cli_config("router", "last_path", self.router.current_path,
                                       config_path=self.config_path)

    @on(RouteLink.Activated)
    def handle_route_link(self, event: RouteLink.Activated) -> None:
        """Links outside the outlet (the navigation bar) end up here."""
        event.stop()
        self.router.links.handle(event.href)

    def action_back(self) -> None:
        if not self.router.controller.back():
            self.bell()

    def action_forward(self) -> None:
        if not self.router.controller.forward():
            self.bell()

    def _open_external(self, url: str) -> None:
        self.open_url(url)

    def _on_route_changed(self, path: str, entry: Optional[RouteEntry]) -> None:
        if entry is None:
            self.sub_title = f"{path} (not found)"
        else:
            definition = self.router.registry.get(entry.view_id)
            self.sub_title = entry.title or definition.title or path
        self.query_one(MainNavigationBar).set_active(path)

#
# Functions:


def print_routes(router: Router, console: Optional[Console] = None) -> None:
    """Print the route table as a rich table."""
    console = console or Console()
    table = Table(title="Routes")
    table.add_column("Path", style="cyan")
    table.add_column("View")
    table.add_column("Title")
    for entry in router.route_table.entries():
        title = entry.title
        if title is None and entry.view_id in router.registry:
            title = router.registry.get(entry.view_id).title
        table.add_row(entry.path, entry.view_id, title or "")
    console.print(table)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="view_router - a single-outlet view router for Textual",
        prog="view-router",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a TOML config file (default: ~/.config/view_router/config.toml)",
    )
    parser.add_argument(
        "--start-path",
        type=str,
        help="Path to open at startup",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--list-routes",
        action="store_true",
        help="Print the route table and exit",
    )
    return parser


def main_cli_runner(argv: Optional[List[str]] = None) -> int:
    """Entry point for the view-router command."""
    args = build_arg_parser().parse_args(argv)

    config = load_cli_config_and_ensure_existence(config_path=args.config)
    configure_from_settings(config.get("logging", {}), level_override=args.log_level,
                            console=args.list_routes)

    if args.list_routes:
        try:
            router = Router.from_config(config, MemoryMountPoint())
        except RouterError as e:
            logger.error(f"Invalid router configuration: {e}")
            return 1
        print_routes(router)
        return 0

    try:
        app = ViewRouterApp(config=config, start_path=args.start_path, config_path=args.config)
    except RouterError as e:
        logger.exception("Invalid router configuration")
        print(f"view-router: {e}", file=sys.stderr)
        return 1

    app.run()
    return 0

#
# End of app.py
#######################################################################################################################
