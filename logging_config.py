"""
Logging configuration for the complaint portal.
Console output only; plain text by default, JSON lines when LOG_FORMAT=json.
"""

import logging.config
from typing import Any, Dict

from config import Settings


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    formatter = "json" if settings.log_format == "json" else "standard"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "level": settings.log_level,
                "class": "logging.StreamHandler",
                "formatter": formatter,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": settings.log_level,
        },
    }


def setup_logging(settings: Settings) -> None:
    logging.config.dictConfig(build_logging_config(settings))
