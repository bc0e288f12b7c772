"""Structured logging.

Modules log through ``get_logger``, which never configures anything: records
go wherever the host application has pointed structlog. Applications that
want fp_utils' own output call ``configure_logging`` once at startup.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "fp_utils"

_configured = False
_handlers: list[logging.Handler] = []


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
    *,
    force: bool = False,
) -> None:
    """Configure structlog and attach handlers to the ``fp_utils`` logger.

    Arguments left as None fall back to settings. The root logger is left
    untouched.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path, written in addition to stdout
        force: Replace handlers installed by an earlier call
    """
    global _configured
    if _configured and not force:
        return

    from fp_utils.shared.config import get_settings

    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format
    log_file = log_file or settings.log_file

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    _handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        _handlers.append(logging.FileHandler(log_file))

    for handler in _handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazily bound structured logger
    """
    return structlog.get_logger(name)
