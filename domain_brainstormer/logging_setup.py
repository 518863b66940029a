"""Logging setup: rich console output plus an optional rotating log file."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingSettings

LOGGER_NAME = "domain_brainstormer"

# Noisy third-party loggers
QUIET_LOGGERS = ("whois", "httpx", "httpcore")


def setup_logging(settings: Optional[LoggingSettings] = None, console: Optional[Console] = None) -> logging.Logger:
    """Configure the package logger once and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    settings = settings or LoggingSettings()
    level = getattr(logging, settings.level.upper(), logging.INFO)
    logger.setLevel(level)
    logger.propagate = False

    rich_handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(rich_handler)

    if settings.file:
        log_dir = os.path.dirname(settings.file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            settings.file,
            maxBytes=settings.rotate_max_mb * 1024 * 1024,
            backupCount=settings.rotate_backups,
        )
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.CRITICAL if name == "whois" else logging.WARNING)

    return logger
