"""Tests for the seed endpoint."""

import pytest

from app.infrastructure.config import settings
from app.seed.data import SEED_PRODUCTS


@pytest.mark.asyncio
async def test_seed_endpoint(client, products_url) -> None:
    """Seeding twice yields the same catalog size."""
    await client.post(products_url, json={"title": "Leftover"})

    first = await client.get(f"{settings.api_prefix}/seed")
    second = await client.get(f"{settings.api_prefix}/seed")

    assert first.status_code == 200
    assert first.json()["deleted"] == 1
    assert first.json()["created"] == len(SEED_PRODUCTS)
    assert second.json()["deleted"] == len(SEED_PRODUCTS)

    listed = await client.get(products_url, params={"limit": 100})
    assert len(listed.json()) == len(SEED_PRODUCTS)
