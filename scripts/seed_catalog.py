#!/usr/bin/env python3
"""Seed product catalog script.

Clears the catalog and inserts the built-in seed dataset.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-create-tables
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.catalog import models  # noqa: F401  registers tables on Base.metadata
from app.infrastructure.config import settings
from app.infrastructure.database import Base, async_session_factory, engine
from app.infrastructure.logging import configure_logging
from app.seed.service import SeedService


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Reset the product catalog to the seed dataset",
    )
    parser.add_argument(
        "--no-create-tables",
        action="store_true",
        help="Don't create missing tables before seeding (use after migrations)",
    )

    args = parser.parse_args()
    configure_logging(settings)

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)

    if not args.no_create_tables:
        print("Creating database tables...")
        await create_tables()
        print("Tables ready.")
        print()

    try:
        result = await SeedService(async_session_factory).run_seed()
    except Exception as e:
        print(f"  ✗ Error: {e}")
        raise
    finally:
        await engine.dispose()

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Created: {result['created']} products")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
