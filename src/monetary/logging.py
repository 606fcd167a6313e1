"""
logging.py — Loguru setup driven by Settings

The monetary core never logs; this is for the services that embed it.

    from monetary.config import get_settings
    from monetary.logging import setup_logging

    log = setup_logging(get_settings())
    log.info("ledger loaded")
"""

from __future__ import annotations
import sys
from typing import TYPE_CHECKING, Final, Optional

from loguru import logger

from .config import Settings, get_settings

if TYPE_CHECKING:
    from loguru import Logger


TEXT_LOG_FORMAT: Final[str] = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)

_LEVEL_ALIASES: Final[dict] = {"WARN": "WARNING"}


def resolve_level(settings: Settings) -> str:
    """
    Configured level, or DEBUG in development and INFO elsewhere when unset.
    """
    if settings.logging_level:
        return _LEVEL_ALIASES.get(settings.logging_level, settings.logging_level)
    return "DEBUG" if settings.is_development else "INFO"


def resolve_format(settings: Settings) -> str:
    """
    Configured output type, or text in development and json elsewhere when unset.
    """
    if settings.logging_type:
        return settings.logging_type
    return "text" if settings.is_development else "json"


def setup_logging(settings: Optional[Settings] = None) -> "Logger":
    """
    Replace every loguru sink with a single one configured from settings.

    Returns the global loguru logger for convenience.
    """
    settings = settings or get_settings()
    sink = sys.stderr if settings.logging_stderr else sys.stdout
    level = resolve_level(settings)
    log_format = resolve_format(settings)

    logger.remove()
    if log_format == "json":
        logger.add(sink, level=level, serialize=True, backtrace=False, diagnose=False)
    else:
        logger.add(
            sink,
            level=level,
            format=TEXT_LOG_FORMAT,
            colorize=False,
            diagnose=settings.is_development,
        )

    logger.debug(
        "Logging configured (level={}, type={}, environment={})",
        level,
        log_format,
        settings.environment,
    )
    return logger
