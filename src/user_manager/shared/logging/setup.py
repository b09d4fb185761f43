"""Logging configuration."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from user_manager.shared.config.settings import LoggingSettings

ROOT_LOGGER = "user_manager"


def setup_logging(settings: LoggingSettings, console: Console | None = None) -> logging.Logger:
    """Configure the package logger from settings.

    Handlers previously installed by this function are replaced, so calling
    it twice does not duplicate output.

    Args:
        settings: Logging settings
        console: Optional rich console for the colored handler

    Returns:
        The configured ``user_manager`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings.console_enabled:
        if settings.console_colored:
            console_handler: logging.Handler = RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
            console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
        else:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(console_handler)

    if settings.file_enabled:
        log_path = Path(settings.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(settings.format))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger
