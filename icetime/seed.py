"""Seed the facility directory.

Usage:
    python -m icetime.seed
"""
import asyncio
import logging

from icetime.core.database import AsyncSessionLocal, engine, init_db
from icetime.schemas.facility import FacilityCreate
from icetime.services.facility_directory import facility_directory

logger = logging.getLogger(__name__)

DEFAULT_FACILITIES = [
    FacilityCreate(
        facility_id="minto-barrhaven",
        name="Minto Recreation Complex - Barrhaven",
        address="3500 Cambrian Rd",
        city="Nepean",
        province="ON",
        postal_code="K2J 0V1",
        phone="(613) 580-2424",
    ),
    FacilityCreate(
        facility_id="bell-sensplex",
        name="Bell Sensplex",
        address="1565 Maple Grove Rd",
        city="Nepean",
        province="ON",
        postal_code="K2V 1A3",
        phone="(613) 599-0680",
    ),
    FacilityCreate(
        facility_id="walter-baker",
        name="Walter Baker Sports Centre",
        address="100 Malvern Dr",
        city="Nepean",
        province="ON",
        postal_code="K2J 2G5",
        phone="(613) 580-2424",
    ),
    FacilityCreate(
        facility_id="jim-durrell",
        name="Jim Durrell Recreation Centre",
        address="1265 Walkley Rd",
        city="Ottawa",
        province="ON",
        postal_code="K1V 2P4",
        phone="(613) 247-4846",
    ),
]


async def seed():
    """Create tables and upsert the default facilities."""
    await init_db()

    async with AsyncSessionLocal() as db:
        for data in DEFAULT_FACILITIES:
            facility = await facility_directory.upsert(db, data)
            logger.info(f"  - {facility.name}")

        facilities = await facility_directory.list_active(db)
        logger.info(f"Active facilities in database: {len(facilities)}")

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    asyncio.run(seed())
