"""Module in charge of logger initialization and settings."""
import logging.config
from typing import Optional

from boolfold.util.options import Options

DEFAULT_FORMAT = "[%(filename)s:%(lineno)s %(funcName)s()] %(levelname)s - %(message)s"
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": True,
    "formatters": {
        "standard": {"format": DEFAULT_FORMAT},
    },
    "handlers": {
        "default": {
            "level": "DEBUG",
            "formatter": "standard",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "": {"handlers": ["default"], "level": "WARNING", "propagate": False},  # root logger
    },
}


def configure_logging(level: Optional[str] = None, options: Optional[Options] = None):
    """Configure the root logger, the level defaults to the logging.log_level option."""
    if level is not None:
        log_level = level
    else:
        all_options = options if options is not None else Options.from_user_config()
        log_level = all_options.getstring("logging.log_level", fallback="WARNING")
    LOGGING_CONFIG["loggers"][""]["level"] = log_level
    logging.config.dictConfig(LOGGING_CONFIG)
