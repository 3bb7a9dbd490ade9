# Logging_Config.py
# Description: loguru setup for the view_router application
#
"""
Logging configuration.

Called once at startup. While the TUI owns the terminal only the file sink is
active; the console sink is for headless commands such as `--list-routes`.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_application_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    console: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> Optional[Path]:
    """
    Replace loguru's default handler with the application sinks.

    Returns:
        The resolved log file path, or None when file logging is off
    """
    level = level.upper()
    logger.remove()

    if console:
        logger.add(sys.stderr, level=level, colorize=True)

    log_path = None
    if log_file:
        log_path = Path(log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.add(sys.stderr, level="WARNING")
            logger.warning(f"Cannot create log directory {log_path.parent}: {e}. File logging disabled.")
            return None
        logger.add(
            str(log_path),
            level=level,
            format=LOG_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )

    logger.info(f"Logging configured: level={level}, file={log_path}, console={console}")
    return log_path


def configure_from_settings(settings: Dict[str, Any], level_override: Optional[str] = None,
                            console: bool = False) -> Optional[Path]:
    """Configure logging from the `[logging]` config section."""
    return configure_application_logging(
        level=level_override or settings.get("level", DEFAULT_LOG_LEVEL),
        log_file=settings.get("log_file") or None,
        console=console,
        rotation=settings.get("rotation", "10 MB"),
        retention=settings.get("retention", "7 days"),
    )
