"""
HTTP middleware: request tracing, access logs and error rendering
"""
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
import structlog

from jia.core.exceptions import JiaException

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"

# Probes are not worth an access log line
QUIET_PATHS = {"/health"}


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id, method and path to every log line of the request"""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per request; client and server errors at warning level"""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("request_failed", error=str(e), duration_ms=_elapsed_ms(started))
            raise

        duration_ms = _elapsed_ms(started)
        log = logger.warning if response.status_code >= 400 else logger.info
        log("request_completed", status_code=response.status_code, duration_ms=duration_ms)

        response.headers["X-Process-Time"] = f"{duration_ms / 1000:.4f}"
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Render errors that escape the route handlers as {"error": {...}}"""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except JiaException as e:
            return JSONResponse(status_code=e.status_code, content=e.to_dict())
        except Exception as e:
            logger.exception("unhandled_exception", error=str(e))
            # Never leak internals of unexpected failures
            opaque = JiaException("Internal server error")
            return JSONResponse(status_code=opaque.status_code, content=opaque.to_dict())
