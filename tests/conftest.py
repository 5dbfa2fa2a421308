"""Shared test configuration and fixtures.

Every test gets a brand-new schema on its own engine, so constraint
violations and commits never leak between tests. The target database is
``settings.test_database_url`` (in-memory SQLite by default; point
TEST_DATABASE_URL at a throwaway PostgreSQL database to run against it).
"""

import uuid
from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import staydb.models  # noqa: F401  (registers every table on Base.metadata)
from staydb.config import settings
from staydb.database import Base, make_engine
from staydb.models.location import City
from staydb.models.lookup import Amenity, PropertyCategory, PropertyType
from staydb.models.property import Property
from staydb.models.user import User
from staydb.schemas.property import PropertyCreate
from staydb.seed import seed_reference_data
from staydb.services.property_service import create_property
from staydb.services.reference_service import (
    get_lookup,
    get_or_create_city,
    get_or_create_country,
    get_or_create_state,
)

# ---------------------------------------------------------------------------
# Per-test: fresh schema on a fresh engine
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create all tables on a new engine and drop them afterwards."""
    engine = make_engine(settings.test_database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session bound to the per-test engine."""
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Convenience fixtures: reference data, users, location, listing
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def reference_data(db_session: AsyncSession) -> dict[str, int]:
    """Load the standard lookup rows and commit them."""
    inserted = await seed_reference_data(db_session)
    await db_session.commit()
    return inserted


async def _create_user(db_session: AsyncSession, role: str) -> User:
    unique = uuid.uuid4().hex[:8]
    user = User(
        email=f"{role}-{unique}@test.com",
        first_name=role.title(),
        last_name="Tester",
        role=role,
    )
    db_session.add(user)
    await db_session.commit()
    return user


@pytest_asyncio.fixture
async def host(db_session: AsyncSession) -> User:
    """A committed host user."""
    return await _create_user(db_session, "host")


@pytest_asyncio.fixture
async def guest(db_session: AsyncSession) -> User:
    """A committed guest user."""
    return await _create_user(db_session, "guest")


@pytest_asyncio.fixture
async def city(db_session: AsyncSession, reference_data: dict) -> City:
    """San Francisco, California, United States."""
    country = await get_or_create_country(db_session, "United States", "US")
    state = await get_or_create_state(db_session, country, "California")
    sf = await get_or_create_city(db_session, state, "San Francisco")
    await db_session.commit()
    return sf


@pytest_asyncio.fixture
async def listing(db_session: AsyncSession, host: User, city: City) -> Property:
    """A committed apartment in San Francisco with WiFi and a pool."""
    apartment = await get_lookup(db_session, PropertyType, "Apartment")
    entire_place = await get_lookup(db_session, PropertyCategory, "Entire Place")
    wifi = await get_lookup(db_session, Amenity, "WiFi")
    pool = await get_lookup(db_session, Amenity, "Pool")

    prop = await create_property(
        db_session,
        PropertyCreate(
            host_id=host.id,
            property_type_id=apartment.id,
            property_category_id=entire_place.id,
            city_id=city.id,
            name="Mission Loft",
            address_line1="500 Valencia St",
            postal_code="94110",
            price_per_night=Decimal("180.00"),
            max_guests=4,
            bedrooms=2,
            bathrooms=1,
            amenity_ids=[wifi.id, pool.id],
        ),
    )
    await db_session.commit()
    return prop
