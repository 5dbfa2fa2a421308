"""Seed the database with reference data and a demo listing.

The schema must already exist (``alembic upgrade head``). Safe to re-run:
rows that are already present are left alone.

Run:
    python -m scripts.seed_data
"""

import asyncio
import logging

from staydb.config import settings
from staydb.database import engine, session_scope
from staydb.seed import seed_demo_listing, seed_reference_data

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def seed() -> None:
    """Populate the lookup tables, then a demo host, listing, booking, and payment."""
    logger.info("Seeding %s v%s (%s)", settings.app_name, settings.app_version, settings.environment)
    try:
        async with session_scope() as session:
            inserted = await seed_reference_data(session)
            for table, count in inserted.items():
                print(f"  {table:<22} +{count}")

            listing = await seed_demo_listing(session)
            print(f"  demo listing           {listing.name} ({listing.id})")
    finally:
        await engine.dispose()
    print("Seeding complete.")


if __name__ == "__main__":
    asyncio.run(seed())
