"""Reference data and the loaders that put it in the database.

The lookup tables ship with a small standard set of rows. ``seed_reference_data``
inserts whatever is missing (matched by each table's unique name column), so it
can run against an empty or an already-seeded database.

``seed_demo_listing`` adds one host, guest, listing, booking, and payment on
top of the reference data, for local development.
"""

import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.models.booking import Booking
from staydb.models.location import Country
from staydb.models.lookup import Amenity, PaymentStatus, PropertyCategory, PropertyType
from staydb.models.property import Property
from staydb.models.user import User
from staydb.schemas.payment import PaymentCreate
from staydb.schemas.property import PropertyCreate
from staydb.services.payment_service import record_payment
from staydb.services.property_service import create_property
from staydb.services.reference_service import (
    get_lookup,
    get_or_create_city,
    get_or_create_country,
    get_or_create_state,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

COUNTRIES = [
    {"country_name": "United States", "country_code": "US"},
    {"country_name": "Canada", "country_code": "CA"},
    {"country_name": "United Kingdom", "country_code": "UK"},
]

PROPERTY_TYPES = [
    {"type_name": "Apartment", "description": "A self-contained unit in a multi-unit building"},
    {"type_name": "House", "description": "A standalone residential building"},
    {"type_name": "Villa", "description": "A large detached house, often with grounds"},
    {"type_name": "Cabin", "description": "A small house in a rural or wooded setting"},
    {"type_name": "Condo", "description": "An individually owned unit in a shared building"},
]

PROPERTY_CATEGORIES = [
    {"category_name": "Entire Place", "description": "Guests have the whole property to themselves"},
    {"category_name": "Private Room", "description": "A private bedroom with shared common areas"},
    {"category_name": "Shared Room", "description": "A sleeping space shared with others"},
]

AMENITIES = [
    {"amenity_name": "WiFi", "amenity_category": "basic"},
    {"amenity_name": "Kitchen", "amenity_category": "basic"},
    {"amenity_name": "Air Conditioning", "amenity_category": "basic"},
    {"amenity_name": "Pool", "amenity_category": "luxury"},
    {"amenity_name": "Hot Tub", "amenity_category": "luxury"},
    {"amenity_name": "Smoke Detector", "amenity_category": "safety"},
    {"amenity_name": "First Aid Kit", "amenity_category": "safety"},
    {"amenity_name": "Wheelchair Accessible", "amenity_category": "accessibility"},
    {"amenity_name": "Elevator", "amenity_category": "accessibility"},
]

PAYMENT_STATUSES = [
    {"status_name": "pending"},
    {"status_name": "completed"},
    {"status_name": "failed"},
    {"status_name": "refunded"},
]

# (model, unique name attribute, rows)
REFERENCE_DATA = [
    (Country, "country_name", COUNTRIES),
    (PropertyType, "type_name", PROPERTY_TYPES),
    (PropertyCategory, "category_name", PROPERTY_CATEGORIES),
    (Amenity, "amenity_name", AMENITIES),
    (PaymentStatus, "status_name", PAYMENT_STATUSES),
]

DEMO_HOST = {"email": "host@staydb.dev", "first_name": "Harper", "last_name": "Lane", "role": "host"}
DEMO_GUEST = {"email": "guest@staydb.dev", "first_name": "Rowan", "last_name": "Blake", "role": "guest"}


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


async def seed_reference_data(session: AsyncSession) -> dict[str, int]:
    """Insert missing lookup rows and return the number inserted per table."""
    inserted: dict[str, int] = {}
    for model, name_attr, rows in REFERENCE_DATA:
        column = getattr(model, name_attr)
        result = await session.execute(select(column))
        existing = set(result.scalars().all())

        missing = [row for row in rows if row[name_attr] not in existing]
        session.add_all(model(**row) for row in missing)
        inserted[model.__tablename__] = len(missing)
        if missing:
            logger.info("Seeding %d row(s) into %s", len(missing), model.__tablename__)

    await session.flush()
    return inserted


async def _get_or_create_user(session: AsyncSession, fields: dict) -> User:
    result = await session.execute(select(User).where(User.email == fields["email"]))
    user = result.scalar_one_or_none()
    if user is None:
        user = User(**fields)
        session.add(user)
        await session.flush()
    return user


async def seed_demo_listing(session: AsyncSession) -> Property:
    """Create a demo host, listing, booking, and completed payment.

    Requires the reference data. Returns the existing listing when the demo
    host already has one.
    """
    host = await _get_or_create_user(session, DEMO_HOST)
    guest = await _get_or_create_user(session, DEMO_GUEST)

    result = await session.execute(select(Property).where(Property.host_id == host.id))
    existing = result.scalars().first()
    if existing is not None:
        logger.info("Demo listing already present: %s", existing.id)
        return existing

    country = await get_or_create_country(session, "United States", "US")
    state = await get_or_create_state(session, country, "California")
    city = await get_or_create_city(session, state, "San Francisco")

    villa = await get_lookup(session, PropertyType, "Villa")
    entire_place = await get_lookup(session, PropertyCategory, "Entire Place")
    amenity_ids = [(await get_lookup(session, Amenity, name)).id for name in ("WiFi", "Pool", "Smoke Detector")]

    listing = await create_property(
        session,
        PropertyCreate(
            host_id=host.id,
            property_type_id=villa.id,
            property_category_id=entire_place.id,
            city_id=city.id,
            name="Bayview Villa",
            description="Three bedrooms above the bay with a heated pool.",
            address_line1="100 Embarcadero",
            postal_code="94105",
            latitude=Decimal("37.793600"),
            longitude=Decimal("-122.395100"),
            price_per_night=Decimal("325.00"),
            max_guests=6,
            bedrooms=3,
            bathrooms=2,
            amenity_ids=amenity_ids,
        ),
    )

    booking = Booking(property_id=listing.id, guest_id=guest.id)
    session.add(booking)
    await session.flush()

    await record_payment(
        session,
        PaymentCreate(
            booking_id=booking.id,
            amount=Decimal("975.00"),
            payment_method="credit_card",
            status="completed",
            transaction_id=f"demo-{booking.id.hex[:12]}",
        ),
    )
    logger.info("Created demo listing %s with booking %s", listing.id, booking.id)
    return listing
