"""Logging setup shared by the API process and scripts."""

import logging
import sys
from logging.config import dictConfig
from pathlib import Path
from typing import Optional

from ledger_balances.config import Settings


def build_logging_config(level: str = "INFO", log_file: Optional[str] = None) -> dict:
    """dictConfig for the app loggers and the ASGI server, with an optional file handler."""

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    handlers: dict = {
        "stdout": {
            "class": "logging.StreamHandler",
            "stream": sys.stdout,
            "formatter": "plain",
        }
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "encoding": "utf-8",
            "formatter": "plain",
        }

    names = list(handlers)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            }
        },
        "handlers": handlers,
        "loggers": {
            "ledger_balances": {"handlers": names, "level": level, "propagate": False},
            "uvicorn.error": {"handlers": names, "level": level, "propagate": False},
            "httpx": {"handlers": names, "level": "WARNING", "propagate": False},
        },
        "root": {"handlers": ["stdout"], "level": "WARNING"},
    }


def configure_logging(settings: Settings) -> None:
    """Apply logging configuration derived from settings."""

    level = "DEBUG" if settings.debug else settings.log_level
    dictConfig(build_logging_config(level=level, log_file=settings.log_file))
    logging.getLogger(__name__).debug("Logging configured at %s", level)
