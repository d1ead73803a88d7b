"""
Error handling middleware for the SkillHive API.

Assigns a trace ID to every request and converts escaped exceptions into the
standard ``{"error": {...}}`` body.
"""

import uuid
from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from skillhive.core.errors import DataInvalidError, SkillhiveError
from backend.core.exceptions import AppException, InternalServerException
from backend.core.logging import get_logger

logger = get_logger(__name__)

TRACE_HEADER = "X-Trace-Id"


def _error_body(code: str, message: str, details: dict, trace_id: str) -> dict:
    return {"error": {"code": code, "message": message, "details": details, "trace_id": trace_id}}


def app_exception_response(exc: AppException, trace_id: str) -> JSONResponse:
    """Render an AppException with its trace ID."""
    body = exc.to_dict()
    body["error"]["trace_id"] = trace_id
    return JSONResponse(status_code=exc.status_code, content=body, headers={TRACE_HEADER: trace_id})


def skillhive_error_response(exc: SkillhiveError, trace_id: str) -> JSONResponse:
    """Render a core error: invalid data is 422, retryable failures are 503."""
    if isinstance(exc, DataInvalidError):
        status_code = 422
    elif exc.retryable:
        status_code = 503
    else:
        status_code = 500
    details = dict(exc.context)
    details["retryable"] = exc.retryable
    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.code.name, exc.message, details, trace_id),
        headers={TRACE_HEADER: trace_id},
    )


async def error_handler_middleware(request: Request, call_next: Callable) -> Response:
    """
    Handle exceptions raised by routes.

    Every response carries the request's trace ID in the ``X-Trace-Id`` header.
    """
    trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
    request.state.trace_id = trace_id

    try:
        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response

    except AppException as exc:
        logger.warning(
            "Application exception occurred",
            error_code=exc.error_code,
            error_message=exc.message,
            status_code=exc.status_code,
            trace_id=trace_id,
            path=request.url.path,
            details=exc.details,
        )
        return app_exception_response(exc, trace_id)

    except SkillhiveError as exc:
        logger.warning(
            "Core error reached the API",
            error_code=exc.code.value,
            error_message=exc.message,
            retryable=exc.retryable,
            trace_id=trace_id,
            path=request.url.path,
        )
        return skillhive_error_response(exc, trace_id)

    except Exception as exc:
        logger.error(
            "Unexpected exception occurred",
            error_type=type(exc).__name__,
            error_message=str(exc),
            trace_id=trace_id,
            path=request.url.path,
            method=request.method,
            exc_info=True,
        )
        return app_exception_response(InternalServerException(), trace_id)
