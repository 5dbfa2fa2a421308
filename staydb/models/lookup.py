"""Lookup tables — standardized values referenced by foreign key instead of free text."""

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from staydb.database import Base, UUIDPrimaryKeyMixin

AMENITY_CATEGORIES = ("basic", "luxury", "safety", "accessibility")


def in_list_check(column: str, values: tuple[str, ...]) -> str:
    """Render a portable ``column IN ('a', 'b')`` CHECK expression."""
    return "{} IN ({})".format(column, ", ".join(f"'{v}'" for v in values))


class PropertyType(UUIDPrimaryKeyMixin, Base):
    """Listing classification by building kind (apartment, house, villa, ...)."""

    __tablename__ = "property_types"

    type_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)

    def __repr__(self) -> str:
        return f"<PropertyType(id={self.id}, name={self.type_name!r})>"


class PropertyCategory(UUIDPrimaryKeyMixin, Base):
    """Listing classification by what the guest gets (entire place, private room, ...)."""

    __tablename__ = "property_categories"

    category_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)

    def __repr__(self) -> str:
        return f"<PropertyCategory(id={self.id}, name={self.category_name!r})>"


class Amenity(UUIDPrimaryKeyMixin, Base):
    """A feature a property can offer, grouped into a fixed set of categories."""

    __tablename__ = "amenities"

    amenity_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    amenity_category: Mapped[str] = mapped_column(String(20), nullable=False)  # basic, luxury, safety, accessibility
    description: Mapped[str | None] = mapped_column(Text, default=None)

    __table_args__ = (
        CheckConstraint(in_list_check("amenity_category", AMENITY_CATEGORIES), name="amenity_category_valid"),
    )

    def __repr__(self) -> str:
        return f"<Amenity(id={self.id}, name={self.amenity_name!r}, category={self.amenity_category!r})>"


class PaymentStatus(UUIDPrimaryKeyMixin, Base):
    """A payment lifecycle state (pending, completed, failed, refunded)."""

    __tablename__ = "payment_statuses"

    status_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<PaymentStatus(id={self.id}, name={self.status_name!r})>"
