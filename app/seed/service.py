"""Seed service.

Clears the catalog and repopulates it from the fixed seed dataset.
"""

import asyncio
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.catalog.schemas import ProductCreate, ProductResponse
from app.catalog.service import CatalogService
from app.seed.data import SEED_PRODUCTS

logger = structlog.get_logger()


class SeedService:
    """Service that resets the catalog to the seed dataset.

    Creations run concurrently, one session each, since an AsyncSession
    cannot be shared between concurrent operations. Every creation is
    allowed to settle; then the first failure, if any, fails the whole
    seed. Rows committed by the other creations are kept.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        products: list[ProductCreate] | None = None,
    ) -> None:
        """Initialize seed service.

        Args:
            session_factory: Factory for per-operation sessions.
            products: Records to insert (defaults to the built-in dataset).
        """
        self.session_factory = session_factory
        self.products = SEED_PRODUCTS if products is None else products

    async def run_seed(self) -> dict[str, Any]:
        """Clear the catalog and insert every seed record.

        Returns:
            Seeding result with counts.
        """
        async with self.session_factory() as session:
            deleted = await CatalogService(session).delete_all_products()

        results = await asyncio.gather(
            *(self._create(product) for product in self.products),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.error(
                "Seed failed",
                deleted=deleted,
                failed=len(failures),
                created=len(results) - len(failures),
            )
            raise failures[0]

        created = results
        logger.info("Seed executed", deleted=deleted, created=len(created))
        return {
            "message": "Seed executed",
            "deleted": deleted,
            "created": len(created),
        }

    async def _create(self, product: ProductCreate) -> ProductResponse:
        async with self.session_factory() as session:
            return await CatalogService(session).create(product)
