# ============================================================================
# FILE: streamify/core/logging.py
# ============================================================================
import logging
import logging.config
from streamify.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging():
    """Configure root logging once for the whole application"""
    level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            # SQL echo is only useful while debugging queries
            "sqlalchemy.engine": {"level": "INFO" if settings.DEBUG else "WARNING"},
            "passlib": {"level": "ERROR"},
        },
    })
