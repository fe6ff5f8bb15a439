"""Request correlation and access logging for the catalog API.

Unhandled exceptions are rendered by the application's exception
handlers in ``app.main``; this module only tags and logs requests.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def log_request(request: Request, status_code: int, started: float) -> None:
    """Log one finished request, as a warning for server errors."""
    log = logger.warning if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.info
    log(
        "Request completed",
        method=request.method,
        path=request.url.path,
        query=request.url.query or None,
        status_code=status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome.

    The ID is taken from the ``X-Request-ID`` header or generated, stored
    on ``request.state``, bound into the structlog context for the
    duration of the request and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                log_request(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started)
                raise
            log_request(request, response.status_code, started)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install request correlation on the application."""
    app.add_middleware(RequestIdMiddleware)
