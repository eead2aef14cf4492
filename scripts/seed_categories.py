#!/usr/bin/env python
"""Seed the default supplier categories."""

import asyncio
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from supplier_api.config import get_settings
from supplier_api.database import async_session_maker, engine
from supplier_api.services.category_service import CategoryService


async def seed_categories(names: list[str]) -> bool:
    """Create the given categories when the table is still empty."""
    async with async_session_maker() as session:
        result = await CategoryService(session).seed_defaults(names)
    await engine.dispose()
    print(f"{result.message} ({result.count})")
    return result.seeded


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Seed the default supplier categories")
    parser.add_argument(
        "--name",
        action="append",
        dest="names",
        help="Category name (repeatable, defaults to the configured list)",
    )
    args = parser.parse_args()

    names = args.names or get_settings().default_categories
    asyncio.run(seed_categories(names))
