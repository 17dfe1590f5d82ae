"""Request context middleware for the catalog API.

Every request gets a correlation ID that is echoed in the
``X-Request-ID`` header, bound into the structlog context and copied
into error envelopes. The completion log names the matched route
template and its path parameters, so lookups by term and updates by id
can be told apart without parsing URLs.

Unhandled exceptions are not caught here; the ``Exception`` handler
registered in ``app.main`` turns them into the 500 envelope.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def route_context(request: Request) -> dict:
    """Describe the route a request was dispatched to.

    Only meaningful once routing has run. Unmatched requests report the
    raw path as their route.

    Args:
        request: Routed request.

    Returns:
        Route template plus any path parameters (``term``, ``product_id``).
    """
    route = request.scope.get("route")
    context = {"route": getattr(route, "path", request.url.path)}
    context.update(request.path_params)
    return context


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlate a request with its logs and response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(
            request_id=request_id, method=request.method
        )

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Request completed",
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                **route_context(request),
            )
            structlog.contextvars.unbind_contextvars("request_id", "method")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install the request context middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestContextMiddleware)
