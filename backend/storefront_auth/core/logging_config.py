"""
Structured logging configuration.

Usage:
    from storefront_auth.core.logging_config import setup_logging

    # In the FastAPI lifespan
    setup_logging()

Modules keep using ``logging.getLogger(__name__)``. In development the root
handler renders those records with structlog's console renderer; in production
they are written as JSON by python-json-logger.
"""

import logging
import sys

import structlog
from pythonjsonlogger import jsonlogger

from storefront_auth.config import settings


def setup_logging() -> None:
    """
    Configure stdlib logging and structlog for the application.

    JSON output is used when LOG_FORMAT=json or in production.
    """
    use_json = settings.LOG_FORMAT == "json" or settings.ENVIRONMENT == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_json:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Rendering happens in the root handler's ProcessorFormatter
        processors = shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if use_json:
        _install_json_handler()
    else:
        _install_console_handler(shared_processors)

    # Outbound request logs would otherwise include upstream URLs on every call
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _install_console_handler(pre_chain: list) -> None:
    """Render stdlib and structlog records on the root logger with the console renderer."""
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)


def _install_json_handler() -> None:
    """Route the root and uvicorn loggers through a JSON formatter."""
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={"asctime": "timestamp", "levelname": "level"},
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    for logger_name in ["", "uvicorn", "uvicorn.access", "uvicorn.error"]:
        logger = logging.getLogger(logger_name)
        logger.handlers.clear()
        logger.addHandler(handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
