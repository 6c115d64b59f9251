from starlette.middleware.base import BaseHTTPMiddleware
import uuid, time, logging

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, logs the request line with timing and echoes the id."""

    async def dispatch(self, request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.time()
        # Unhandled exceptions propagate out of call_next and become a 500 further out
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration_ms = (time.time() - start) * 1000
            logger.info(
                f"{request.method} {request.url.path} {status_code} {duration_ms:.2f}ms",
                extra={
                    "request_id": request_id,
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                },
            )
        response.headers["X-Request-ID"] = request_id
        return response
