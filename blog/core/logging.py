"""Logging configuration for the application."""

import logging
import sys

from blog.core import config


def setup_logging(level_name: str | None = None) -> None:
    """Configure application logging.

    Args:
        level_name: Log level name, defaults to the LOG_LEVEL setting
    """
    level = logging.getLevelName((level_name or config.LOG_LEVEL).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Third-party loggers stay quiet unless something goes wrong
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger("blog").setLevel(level)
    logging.getLogger(__name__).info(
        f"Logging configured: environment={config.APP_ENV}, level={logging.getLevelName(level)}"
    )
