"""Central logging configuration utilities."""
from __future__ import annotations

import logging
from logging.config import dictConfig


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure console logging for the tool pipeline."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "level": level,
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "chat_tools": {
                    "handlers": ["console"],
                    "level": level,
                }
            },
        }
    )
