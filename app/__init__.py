"""Employee domain model with opt-in logging configuration.

Importing the package leaves logging untouched. Applications that want
the package's log format call configure_logging() once at startup.
"""
import logging


def configure_logging(settings=None) -> logging.LoggerAdapter:
    """Configure the root logger from application settings.

    DEBUG in settings forces the DEBUG level. An unknown LOG_LEVEL falls
    back to INFO; outside production it is only reported by the config
    module on import.

    Args:
        settings: Settings to apply, defaults to app.core.config.settings

    Returns:
        Package logger carrying the environment as context
    """
    from app.core.config import settings as default_settings
    from app.core.logging import get_logger, setup_logging

    settings = settings or default_settings
    level = "DEBUG" if settings.debug else settings.log_level
    try:
        root = setup_logging(level=level, json_format=settings.log_json)
    except ValueError:
        root = setup_logging(level="INFO", json_format=settings.log_json)

    logger = get_logger(__name__, {"environment": settings.environment})
    logger.debug("Logging configured at %s", logging.getLevelName(root.level))
    return logger


__all__ = ["configure_logging"]
