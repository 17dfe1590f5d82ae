"""Product Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.health import router as health_router
from app.api.middleware import route_context, setup_middleware
from app.api.products import router as products_router
from app.api.seed import router as seed_router
from app.domain.exceptions import (
    CatalogInternalError,
    DomainError,
    ProductConflictError,
    ProductNotFoundError,
)
from app.infrastructure.config import settings
from app.infrastructure.database import engine
from app.infrastructure.logging import configure_logging

configure_logging(settings)

logger = structlog.get_logger()

# Domain error -> (HTTP status, error code)
DOMAIN_ERROR_STATUS: dict[type[DomainError], tuple[int, str]] = {
    ProductNotFoundError: (404, "PRODUCT_NOT_FOUND"),
    ProductConflictError: (400, "PRODUCT_CONFLICT"),
    CatalogInternalError: (500, "INTERNAL_ERROR"),
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    logger.info(
        "Starting Product Catalog API",
        version=settings.api_version,
        debug=settings.debug,
        api_prefix=settings.api_prefix,
    )

    yield

    # Shutdown
    logger.info("Shutting down Product Catalog API")
    await engine.dispose()


app = FastAPI(
    title="Product Catalog API",
    description="CRUD backend for a product catalog",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request ID correlation and request logging
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router, prefix=settings.api_prefix)
app.include_router(seed_router, prefix=settings.api_prefix)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list | None = None,
) -> JSONResponse:
    """Build an error response in the common envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


async def domain_exception_handler(request: Request, exc: DomainError):
    """Map domain errors to HTTP responses."""
    status_code, error_code = 400, "DOMAIN_ERROR"
    for error_type, mapping in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            status_code, error_code = mapping
            break

    if status_code < 500:
        logger.info(
            "Domain error",
            path=request.url.path,
            error_code=error_code,
            message=exc.message,
        )

    return error_response(request, status_code, error_code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return error_response(request, exc.status_code, error_code, message, details)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors with consistent format."""
    details = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return error_response(
        request, 422, "VALIDATION_ERROR", "Request validation failed", details
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        method=request.method,
        request_id=getattr(request.state, "request_id", None),
        error=str(exc),
        **route_context(request),
    )

    return error_response(
        request, 500, "INTERNAL_ERROR", "An internal error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-envelope handlers on an application.

    The ``Exception`` handler runs outside all middleware, so it is the
    single place where unexpected failures become a 500.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


register_exception_handlers(app)
