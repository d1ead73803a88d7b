"""Middleware package initialization."""

from backend.middleware.error_handler import (
    TRACE_HEADER,
    app_exception_response,
    error_handler_middleware,
)
from backend.middleware.logging import bind_user_context, logging_middleware

__all__ = [
    "TRACE_HEADER",
    "app_exception_response",
    "bind_user_context",
    "error_handler_middleware",
    "logging_middleware",
]
