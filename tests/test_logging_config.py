"""
Tests for core structured loggers.
"""

from skillhive.core.logging_config import LoggerMixin, get_logger
from skillhive.core.teammate_matcher import TeammateMatcher


def test_logger_mixin_caches_logger():
    matcher = TeammateMatcher()
    assert isinstance(matcher, LoggerMixin)
    assert matcher.logger is matcher.logger


def test_get_logger_logs_without_error():
    get_logger(__name__).info("test_event", key="value")
