"""Property service — create, update, and delete listings and their amenity links."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.exceptions import NotFoundError, flush_or_raise
from staydb.models.lookup import Amenity
from staydb.models.property import Property
from staydb.schemas.property import PropertyCreate, PropertySummary, PropertyUpdate

logger = logging.getLogger(__name__)


async def _load_amenities(db: AsyncSession, amenity_ids: list[uuid.UUID]) -> list[Amenity]:
    """Fetch amenities by id, raising ``NotFoundError`` for the first unknown id."""
    if not amenity_ids:
        return []
    wanted = list(dict.fromkeys(amenity_ids))
    result = await db.execute(select(Amenity).where(Amenity.id.in_(wanted)))
    found = {amenity.id: amenity for amenity in result.scalars().all()}
    for amenity_id in wanted:
        if amenity_id not in found:
            raise NotFoundError("Amenity", amenity_id)
    return [found[amenity_id] for amenity_id in wanted]


async def _reload(db: AsyncSession, property_id: uuid.UUID) -> Property:
    """Re-read a property with its columns and eager relationships overwritten from the database."""
    result = await db.execute(
        select(Property).where(Property.id == property_id).execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def get_property(db: AsyncSession, property_id: uuid.UUID) -> Property:
    """Return the property with this id or raise ``NotFoundError``."""
    prop = await db.get(Property, property_id)
    if prop is None:
        raise NotFoundError("Property", property_id)
    return prop


async def create_property(db: AsyncSession, data: PropertyCreate) -> Property:
    """Insert a listing and link its amenities.

    Unknown host, type, category, or city ids surface as
    ``ReferenceViolationError`` from the database foreign keys.
    """
    amenities = await _load_amenities(db, data.amenity_ids)

    prop = Property(**data.model_dump(exclude={"amenity_ids"}))
    prop.amenities = amenities
    db.add(prop)
    await flush_or_raise(db)
    prop = await _reload(db, prop.id)

    logger.info("Created property %s (%r) with %d amenities", prop.id, prop.name, len(amenities))
    return prop


async def update_property(db: AsyncSession, prop: Property, data: PropertyUpdate) -> Property:
    """Apply the fields set on ``data``; ``updated_at`` refreshes on flush."""
    changes = data.model_dump(exclude_unset=True)
    if not changes:
        return prop

    for field, value in changes.items():
        setattr(prop, field, value)
    await flush_or_raise(db)
    prop = await _reload(db, prop.id)

    logger.info("Updated property %s: %s", prop.id, ", ".join(sorted(changes)))
    return prop


async def set_amenities(db: AsyncSession, prop: Property, amenity_ids: list[uuid.UUID]) -> Property:
    """Replace the property's amenity links with exactly ``amenity_ids``."""
    amenities = await _load_amenities(db, amenity_ids)
    prop = await _reload(db, prop.id)
    prop.amenities = amenities
    await flush_or_raise(db)
    prop = await _reload(db, prop.id)

    logger.info("Property %s now has %d amenities", prop.id, len(amenities))
    return prop


async def delete_property(db: AsyncSession, property_id: uuid.UUID) -> None:
    """Delete a listing. Its amenity links go with it; the amenities stay.

    A property that still has bookings cannot be deleted and raises
    ``ReferenceViolationError``.
    """
    prop = await get_property(db, property_id)
    await db.delete(prop)
    await flush_or_raise(db)
    logger.info("Deleted property %s", property_id)


async def list_properties_in_city(db: AsyncSession, city_id: uuid.UUID) -> list[Property]:
    """Return the listings located in a city, ordered by name."""
    result = await db.execute(
        select(Property).where(Property.city_id == city_id).order_by(Property.name)
    )
    return list(result.scalars().all())


def summarize(prop: Property) -> PropertySummary:
    """Flatten a loaded property into a ``PropertySummary``."""
    return PropertySummary(
        id=prop.id,
        name=prop.name,
        price_per_night=prop.price_per_night,
        max_guests=prop.max_guests,
        property_type=prop.property_type.type_name,
        property_category=prop.property_category.category_name,
        city=prop.city.city_name,
        amenities=[amenity.amenity_name for amenity in prop.amenities],
    )
