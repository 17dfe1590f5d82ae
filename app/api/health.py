"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database import get_session

router = APIRouter()

logger = structlog.get_logger()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    from app.infrastructure.config import settings

    return HealthResponse(
        status="healthy",
        service="product-catalog-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> JSONResponse:
    """Check if service is ready to accept requests.

    Args:
        session: Database session used for a connectivity probe.

    Returns:
        Readiness status; 503 when the database is unreachable.
    """
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database not ready", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return JSONResponse(content={"status": "ready"})
