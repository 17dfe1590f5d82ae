"""Seed API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.api.schemas import SeedResponse
from app.infrastructure.database import get_session_factory
from app.seed.service import SeedService

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.get(
    "",
    response_model=SeedResponse,
    summary="Reseed catalog",
    description="Delete every product and insert the built-in dataset.",
)
async def run_seed(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> SeedResponse:
    """Reset the catalog to the seed dataset.

    Args:
        session_factory: Factory for per-creation sessions.

    Returns:
        Counts of deleted and created products.
    """
    result = await SeedService(session_factory).run_seed()
    return SeedResponse(**result)
