"""Catalog seeding.

Resets the catalog to a fixed dataset for development and demos.
"""

from app.seed.data import SEED_PRODUCTS
from app.seed.service import SeedService

__all__ = [
    "SEED_PRODUCTS",
    "SeedService",
]
