"""
Request logging middleware for the SkillHive API.

Logs each request with its trace ID, the acting user when known, the status
code and the processing time.
"""
import time
from typing import Any, Callable, Dict
import structlog
from fastapi import Request, Response
from backend.core.logging import get_logger, bind_request_context, clear_request_context

logger = get_logger(__name__)


def bind_user_context(request: Request, user_id: str) -> None:
    """
    Record the acting user once a route has parsed it from the path or body.

    Later log entries of the route and the middleware's completion entry
    carry the user ID.
    """
    request.state.user_id = user_id
    structlog.contextvars.bind_contextvars(user_id=user_id)


def _acting_user(request: Request, query_user_id: str | None) -> Dict[str, Any]:
    user_id = getattr(request.state, "user_id", None) or query_user_id
    return {"user_id": user_id} if user_id else {}


async def logging_middleware(request: Request, call_next: Callable) -> Response:
    """Log request start and completion with timing."""
    trace_id = getattr(request.state, "trace_id", None) or request.headers.get(
        "X-Trace-Id", "unknown"
    )
    context = {
        "trace_id": trace_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }
    query_user_id = request.query_params.get("user_id")
    if query_user_id:
        context["user_id"] = query_user_id
    bind_request_context(**context)

    logger.info("Request started", query_params=dict(request.query_params))

    start_time = time.perf_counter()
    try:
        response = await call_next(request)
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            **_acting_user(request, query_user_id),
        )
        return response

    except Exception as exc:
        logger.error(
            "Request failed",
            error_type=type(exc).__name__,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            **_acting_user(request, query_user_id),
        )
        raise

    finally:
        clear_request_context()
