"""
Structured logging configuration for the SkillHive API.

Sets up structlog with trace IDs, timestamps, and the deployment environment
on every entry.
"""

import logging
import sys
from typing import Any
import structlog
from pythonjsonlogger import jsonlogger
from structlog.types import EventDict, Processor

from skillhive.core.config import Config, get_config


def _app_context_processor(environment: str):
    def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        """Add application context to all log entries."""
        event_dict["app"] = "skillhive"
        event_dict["environment"] = environment
        return event_dict

    return add_app_context


def _console_handler(enable_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if enable_json:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s", timestamp=True
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: Config | None = None) -> None:
    """
    Configure structured logging for the service.

    Args:
        config: Application settings; log level and JSON output come from
            ``config.logging`` and the environment tag from ``config.environment``.
            Standard-library records go through a python-json-logger formatter
            when JSON output is enabled.
    """
    config = config or get_config()
    log_level = config.logging.level

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _app_context_processor(config.environment.value),
    ]

    if config.logging.enable_json:
        processors.extend(
            [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
        )
    else:
        processors.extend([structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer()])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Standard-library loggers (uvicorn, asyncio) share the output format
    root_logger = logging.getLogger()
    root_logger.handlers = []
    if config.logging.enable_console:
        root_logger.addHandler(_console_handler(config.logging.enable_json))
    root_logger.setLevel(getattr(logging, log_level))


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_request_context(**kwargs: Any) -> None:
    """
    Bind request-specific context to all subsequent log entries.

    Example:
        bind_request_context(trace_id="abc123", user_id="user456")
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_request_context() -> None:
    """Clear request-specific context."""
    structlog.contextvars.clear_contextvars()
