"""
Structured loggers for the matching core

Output is configured by the service (backend.core.logging.configure_logging);
the core only binds key/value events.
"""

from typing import Any
import structlog


def get_logger(name: str) -> Any:
    """
    Get a structured logger

    Args:
        name: Logger name (usually __name__)

    Usage:
        logger = get_logger(__name__)
        logger.info("teammates_matched", user_id="u1", count=4)
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """
    Adds a structured logger to a class

    Usage:
        class TeammateMatcher(LoggerMixin):
            def match(self, ...):
                self.logger.debug("match_started", candidates=10)
    """

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__module__ + "." + self.__class__.__name__)
        return self._logger
