#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and loads the demo categories and products.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --no-clear
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.catalog.seed import seed_catalog
from app.infrastructure.database import async_session_factory, create_tables


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the demo product catalog",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing categories and products before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    async with async_session_factory() as session:
        result = await seed_catalog(session, clear_existing=not args.no_clear)

    print(f"  ✓ Deleted: {result['deleted']} existing products")
    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
