"""Tests for the property service (pure DB)."""

import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.exceptions import NotFoundError, ReferenceViolationError
from staydb.models.booking import Booking
from staydb.models.location import City, State
from staydb.models.lookup import Amenity, PropertyCategory, PropertyType
from staydb.models.property import Property, PropertyAmenity
from staydb.models.user import User
from staydb.schemas.property import PropertyCreate, PropertyUpdate
from staydb.services.property_service import (
    create_property,
    delete_property,
    get_property,
    list_properties_in_city,
    set_amenities,
    summarize,
    update_property,
)
from staydb.services.reference_service import get_lookup, get_or_create_city

pytestmark = pytest.mark.asyncio


async def _create_payload(db_session: AsyncSession, host: User, city: City, **overrides) -> PropertyCreate:
    house = await get_lookup(db_session, PropertyType, "House")
    private_room = await get_lookup(db_session, PropertyCategory, "Private Room")
    fields = {
        "host_id": host.id,
        "property_type_id": house.id,
        "property_category_id": private_room.id,
        "city_id": city.id,
        "name": "Garden Room",
        "address_line1": "22 Oak Ave",
        "price_per_night": Decimal("75.50"),
    }
    fields.update(overrides)
    return PropertyCreate(**fields)


class TestCreateProperty:
    """create_property inserts the listing and its amenity links."""

    async def test_create_with_amenities(self, db_session: AsyncSession, host: User, city: City) -> None:
        kitchen = await get_lookup(db_session, Amenity, "Kitchen")
        elevator = await get_lookup(db_session, Amenity, "Elevator")

        prop = await create_property(
            db_session,
            await _create_payload(db_session, host, city, amenity_ids=[kitchen.id, elevator.id]),
        )
        await db_session.commit()

        assert prop.host_id == host.id
        assert prop.price_per_night == Decimal("75.50")
        assert prop.created_at is not None
        assert [a.amenity_name for a in prop.amenities] == ["Elevator", "Kitchen"]

        links = await db_session.scalar(
            select(func.count()).select_from(PropertyAmenity).where(PropertyAmenity.property_id == prop.id)
        )
        assert links == 2

    async def test_duplicate_amenity_ids_linked_once(self, db_session: AsyncSession, host: User, city: City) -> None:
        wifi = await get_lookup(db_session, Amenity, "WiFi")

        prop = await create_property(
            db_session, await _create_payload(db_session, host, city, amenity_ids=[wifi.id, wifi.id])
        )

        assert [a.amenity_name for a in prop.amenities] == ["WiFi"]

    async def test_unknown_amenity_raises_not_found(self, db_session: AsyncSession, host: User, city: City) -> None:
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError) as exc_info:
            await create_property(db_session, await _create_payload(db_session, host, city, amenity_ids=[missing]))
        assert exc_info.value.key == missing

    async def test_unknown_city_raises_reference_violation(
        self, db_session: AsyncSession, host: User, city: City
    ) -> None:
        payload = await _create_payload(db_session, host, city, city_id=uuid.uuid4())
        with pytest.raises(ReferenceViolationError):
            await create_property(db_session, payload)
        await db_session.rollback()

    async def test_negative_price_rejected_by_schema(self, db_session: AsyncSession, host: User, city: City) -> None:
        with pytest.raises(ValidationError):
            await _create_payload(db_session, host, city, price_per_night=Decimal("-10"))

    async def test_price_is_never_rounded_on_write(self, db_session: AsyncSession, host: User, city: City) -> None:
        with pytest.raises(ValidationError):
            await _create_payload(
                db_session, host, city, price_per_night=Decimal("99.999"), latitude=Decimal("12.12345678")
            )
        assert await db_session.scalar(select(func.count()).select_from(Property)) == 0

    async def test_summary(self, db_session: AsyncSession, listing: Property) -> None:
        summary = summarize(listing)

        assert summary.name == "Mission Loft"
        assert summary.property_type == "Apartment"
        assert summary.property_category == "Entire Place"
        assert summary.city == "San Francisco"
        assert summary.amenities == ["Pool", "WiFi"]


class TestUpdateProperty:
    async def test_partial_update(self, db_session: AsyncSession, listing: Property) -> None:
        updated = await update_property(
            db_session, listing, PropertyUpdate(price_per_night=Decimal("210.00"), max_guests=5)
        )
        await db_session.commit()

        assert updated.price_per_night == Decimal("210.00")
        assert updated.max_guests == 5
        assert updated.name == "Mission Loft"

    async def test_move_to_other_city(self, db_session: AsyncSession, listing: Property, city: City) -> None:
        state = await db_session.get(State, city.state_id)
        oakland = await get_or_create_city(db_session, state, "Oakland")

        updated = await update_property(db_session, listing, PropertyUpdate(city_id=oakland.id))

        assert updated.city.city_name == "Oakland"

    async def test_empty_update_is_noop(self, db_session: AsyncSession, listing: Property) -> None:
        updated = await update_property(db_session, listing, PropertyUpdate())
        assert updated is listing

    async def test_null_price_rejected_before_write(self, db_session: AsyncSession, listing: Property) -> None:
        with pytest.raises(ValidationError):
            await update_property(db_session, listing, PropertyUpdate(price_per_night=None))
        assert (await get_property(db_session, listing.id)).price_per_night == Decimal("180.00")

    async def test_unknown_type_raises_reference_violation(
        self, db_session: AsyncSession, listing: Property
    ) -> None:
        with pytest.raises(ReferenceViolationError):
            await update_property(db_session, listing, PropertyUpdate(property_type_id=uuid.uuid4()))
        await db_session.rollback()


class TestSetAmenities:
    async def test_replace_links(self, db_session: AsyncSession, listing: Property) -> None:
        hot_tub = await get_lookup(db_session, Amenity, "Hot Tub")
        first_aid = await get_lookup(db_session, Amenity, "First Aid Kit")

        prop = await set_amenities(db_session, listing, [hot_tub.id, first_aid.id])
        await db_session.commit()

        assert [a.amenity_name for a in prop.amenities] == ["First Aid Kit", "Hot Tub"]
        links = await db_session.scalar(
            select(func.count()).select_from(PropertyAmenity).where(PropertyAmenity.property_id == listing.id)
        )
        assert links == 2

    async def test_clear_links(self, db_session: AsyncSession, listing: Property) -> None:
        prop = await set_amenities(db_session, listing, [])
        await db_session.commit()

        assert prop.amenities == []
        # The amenities themselves survive
        assert await db_session.scalar(select(func.count()).select_from(Amenity)) == 9


class TestDeleteProperty:
    async def test_delete_cascades_links_only(self, db_session: AsyncSession, listing: Property) -> None:
        listing_id = listing.id

        await delete_property(db_session, listing_id)
        await db_session.commit()

        assert await db_session.scalar(select(func.count()).select_from(Property)) == 0
        assert await db_session.scalar(select(func.count()).select_from(PropertyAmenity)) == 0
        assert await db_session.scalar(select(func.count()).select_from(Amenity)) == 9

    async def test_missing_raises_not_found(self, db_session: AsyncSession) -> None:
        with pytest.raises(NotFoundError):
            await delete_property(db_session, uuid.uuid4())

    async def test_booked_property_raises_reference_violation(
        self, db_session: AsyncSession, listing: Property, guest: User
    ) -> None:
        db_session.add(Booking(property_id=listing.id, guest_id=guest.id))
        await db_session.commit()

        with pytest.raises(ReferenceViolationError):
            await delete_property(db_session, listing.id)
        await db_session.rollback()


class TestQueries:
    async def test_get_property(self, db_session: AsyncSession, listing: Property) -> None:
        assert (await get_property(db_session, listing.id)).id == listing.id

    async def test_list_in_city(self, db_session: AsyncSession, listing: Property, host: User, city: City) -> None:
        await create_property(db_session, await _create_payload(db_session, host, city, name="Alamo Square Studio"))
        await db_session.commit()

        names = [p.name for p in await list_properties_in_city(db_session, city.id)]
        assert names == ["Alamo Square Studio", "Mission Loft"]
