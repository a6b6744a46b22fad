"""
Logging configuration for focusgrid.

Call ``configure_logging()`` once at startup. Library code only uses the
loguru logger and never adds sinks on its own.
"""

import os
import sys
from typing import Any, Dict, Optional

from loguru import logger

from ..config import get_setting, load_settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} | {message}"


def _patch_module(record: Dict[str, Any]) -> None:
    record["extra"].setdefault("module", record["name"])


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
    settings: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Configure loguru sinks.

    Args:
        level: Minimum level, defaults to FOCUSGRID_LOG_LEVEL or [logging].level.
        log_file: Optional rotating log file, defaults to [logging].log_file.
        console: Also log to stderr.
        settings: Settings dict, loaded from the config file when omitted.
    """
    settings = settings if settings is not None else load_settings()
    level = (level or os.environ.get("FOCUSGRID_LOG_LEVEL")
             or get_setting("logging", "level", "INFO", settings)).upper()
    log_file = log_file if log_file is not None else get_setting("logging", "log_file", "", settings)

    logger.remove()  # Remove default handler
    logger.configure(patcher=_patch_module)

    if log_file:
        logger.add(
            sink=log_file,
            level=level,
            format=LOG_FORMAT,
            rotation=get_setting("logging", "rotation", "10 MB", settings),
            retention=get_setting("logging", "retention", "7 days", settings),
        )

    # A TUI owns the terminal, so the demo app turns this off
    if console:
        logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT, colorize=True)

    logger.info(f"focusgrid logging configured: level={level}, file={log_file or None}, console={console}")
