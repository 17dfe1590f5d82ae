"""Tests for the seed loader."""

import pytest

from app.catalog.schemas import ProductCreate
from app.catalog.service import CatalogService, PaginationParams
from app.domain.exceptions import ProductConflictError
from app.seed.data import SEED_PRODUCTS
from app.seed.service import SeedService


class TestSeedData:
    """Sanity checks on the built-in dataset."""

    def test_titles_unique(self) -> None:
        titles = [p.title for p in SEED_PRODUCTS]
        assert len(titles) == len(set(titles))

    def test_every_product_has_images(self) -> None:
        assert all(p.images for p in SEED_PRODUCTS)


class TestSeedService:
    """Tests for SeedService.run_seed."""

    @pytest.mark.asyncio
    async def test_replaces_existing_catalog(self, session_factory) -> None:
        """Existing products are removed and the dataset inserted."""
        async with session_factory() as session:
            await CatalogService(session).create(ProductCreate(title="Old Product"))

        products = [
            ProductCreate(title="Seed Tee", images=["tee.jpg"]),
            ProductCreate(title="Seed Hat", images=["hat-1.jpg", "hat-2.jpg"]),
            ProductCreate(title="Seed Hoodie"),
        ]
        result = await SeedService(session_factory, products).run_seed()

        assert result["deleted"] == 1
        assert result["created"] == 3

        async with session_factory() as session:
            service = CatalogService(session)
            stored = await service.find_all(PaginationParams(limit=10))
            hat = await service.find_one_plain("seed-hat")

        assert {p.title for p in stored} == {"Seed Tee", "Seed Hat", "Seed Hoodie"}
        assert hat.images == ["hat-1.jpg", "hat-2.jpg"]

    @pytest.mark.asyncio
    async def test_default_dataset(self, session_factory) -> None:
        result = await SeedService(session_factory).run_seed()

        assert result["created"] == len(SEED_PRODUCTS)

        async with session_factory() as session:
            stored = await CatalogService(session).find_all(
                PaginationParams(limit=len(SEED_PRODUCTS) + 1)
            )
        assert len(stored) == len(SEED_PRODUCTS)

    @pytest.mark.asyncio
    async def test_one_failure_fails_the_seed(self, session_factory) -> None:
        """A conflicting record fails the batch; other rows stay committed."""
        products = [
            ProductCreate(title="Unique Tee"),
            ProductCreate(title="Twin", slug="twin-a"),
            ProductCreate(title="Twin", slug="twin-b"),
        ]

        with pytest.raises(ProductConflictError):
            await SeedService(session_factory, products).run_seed()

        async with session_factory() as session:
            service = CatalogService(session)
            tee = await service.find_one_plain("unique-tee")
        assert tee.title == "Unique Tee"
