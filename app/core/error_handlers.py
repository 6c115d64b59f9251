"""
Exception handlers that render every failure as a StandardErrorResponse.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Any, Dict, Optional

from app.core.exceptions import SimileBoardException, StorageError, ErrorCode
from app.models.api_models import StandardErrorResponse

logger = logging.getLogger(__name__)

# Framework-level HTTP errors that have a domain error code
_HTTP_ERROR_CODES = {
    404: ErrorCode.NOT_FOUND.value,
    405: "METHOD_NOT_ALLOWED",
    422: ErrorCode.VALIDATION_ERROR.value,
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    request_id = _request_id(request)
    body = StandardErrorResponse(
        error=message,
        error_code=error_code,
        details=details,
        request_id=request_id,
    )
    # Responses for unhandled errors are built outside RequestContextMiddleware
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers={"X-Request-ID": request_id},
    )


async def handle_domain_error(request: Request, exc: SimileBoardException) -> JSONResponse:
    """Service errors carry their own status, code and client-safe message."""
    level = logging.ERROR if isinstance(exc, StorageError) else logging.INFO
    logger.log(
        level,
        f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
        extra={"request_id": _request_id(request), "error_code": exc.error_code.value},
    )
    return error_response(
        request, exc.status_code, exc.error_code.value, exc.message, exc.details or None
    )


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path, query or body: 422 with one entry per offending field."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.info(
        f"Rejected request to {request.url.path}: {len(errors)} invalid field(s)",
        extra={"request_id": _request_id(request)},
    )
    return error_response(
        request,
        422,
        ErrorCode.VALIDATION_ERROR.value,
        "Request validation failed",
        {"validation_errors": errors},
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error_code = _HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR.value)
    return error_response(request, exc.status_code, error_code, str(exc.detail))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # The traceback goes to the log only
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"request_id": _request_id(request)},
    )
    return error_response(
        request, 500, ErrorCode.INTERNAL_SERVER_ERROR.value, "An internal server error occurred"
    )


def setup_error_handlers(app):
    """Register the envelope handlers on ``app``."""
    app.add_exception_handler(SimileBoardException, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
