"""Integrity tests for the lookup tables."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.exceptions import ConstraintViolationError, DuplicateError, translate_integrity_error
from staydb.models.lookup import AMENITY_CATEGORIES, Amenity, PaymentStatus, PropertyCategory, PropertyType

pytestmark = pytest.mark.asyncio


class TestAmenity:
    """Amenity categories are restricted; names are unique."""

    @pytest.mark.parametrize("category", AMENITY_CATEGORIES)
    async def test_valid_categories_accepted(self, db_session: AsyncSession, category: str) -> None:
        db_session.add(Amenity(amenity_name=f"Test {category}", amenity_category=category))
        await db_session.commit()

        stored = await db_session.scalar(select(Amenity.amenity_category))
        assert stored == category

    @pytest.mark.parametrize("category", ["premium", "BASIC", ""])
    async def test_unknown_category_rejected(self, db_session: AsyncSession, category: str) -> None:
        db_session.add(Amenity(amenity_name="Sauna", amenity_category=category))
        with pytest.raises(IntegrityError) as exc_info:
            await db_session.flush()
        assert isinstance(translate_integrity_error(exc_info.value), ConstraintViolationError)
        await db_session.rollback()

    async def test_duplicate_name_rejected(self, db_session: AsyncSession) -> None:
        db_session.add(Amenity(amenity_name="WiFi", amenity_category="basic"))
        await db_session.commit()

        db_session.add(Amenity(amenity_name="WiFi", amenity_category="luxury"))
        with pytest.raises(IntegrityError) as exc_info:
            await db_session.flush()
        assert isinstance(translate_integrity_error(exc_info.value), DuplicateError)
        await db_session.rollback()


class TestNamedLookups:
    """Property types, categories, and payment statuses are unique by name."""

    @pytest.mark.parametrize(
        "model, field",
        [
            (PropertyType, "type_name"),
            (PropertyCategory, "category_name"),
            (PaymentStatus, "status_name"),
        ],
    )
    async def test_duplicate_name_rejected(self, db_session: AsyncSession, model: type, field: str) -> None:
        db_session.add(model(**{field: "Duplicate"}))
        await db_session.commit()

        db_session.add(model(**{field: "Duplicate"}))
        with pytest.raises(IntegrityError):
            await db_session.flush()
        await db_session.rollback()

        count = await db_session.scalar(select(func.count()).select_from(model))
        assert count == 1

    async def test_distinct_names_coexist(self, db_session: AsyncSession) -> None:
        db_session.add_all([PropertyType(type_name="Apartment"), PropertyType(type_name="House")])
        await db_session.commit()

        names = (await db_session.scalars(select(PropertyType.type_name).order_by(PropertyType.type_name))).all()
        assert names == ["Apartment", "House"]
