# inventory_intake/core/logging.py
"""structlog on top of stdlib logging, configured once at startup."""

import logging
import sys

import structlog

from inventory_intake.core.settings import Settings, settings as default_settings

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_log_level(cfg: Settings = default_settings) -> str:
    if cfg.LOG_LEVEL:
        return cfg.LOG_LEVEL.upper()
    return _LEVELS_BY_ENV.get(cfg.ENVIRONMENT.lower(), "INFO")


def use_json(cfg: Settings = default_settings) -> bool:
    if cfg.LOG_JSON is not None:
        return cfg.LOG_JSON
    return cfg.ENVIRONMENT.lower() in ("production", "staging")


def configure_logging(cfg: Settings = default_settings) -> None:
    level = get_log_level(cfg)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = []
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    root.addHandler(handler)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if use_json(cfg):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
