"""Property model — the central listing entity, and its amenity junction table."""

import uuid
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydb.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class PropertyAmenity(Base):
    """Junction Property *—* Amenity. Removing either parent removes the link rows only."""

    __tablename__ = "property_amenities"

    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        primary_key=True,
    )
    amenity_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("amenities.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<PropertyAmenity(property_id={self.property_id}, amenity_id={self.amenity_id})>"


class Property(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A rentable listing owned by a host user and located in a city."""

    __tablename__ = "properties"

    host_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    property_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("property_types.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    property_category_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("property_categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    city_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("cities.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(255), default=None)
    postal_code: Mapped[str | None] = mapped_column(String(20), default=None)
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6), default=None)
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6), default=None)

    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    max_guests: Mapped[int] = mapped_column(nullable=False, default=1, server_default="1")
    bedrooms: Mapped[int] = mapped_column(nullable=False, default=1, server_default="1")
    bathrooms: Mapped[int] = mapped_column(nullable=False, default=1, server_default="1")

    # Relationships
    host: Mapped["User"] = relationship(back_populates="properties", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    property_type: Mapped["PropertyType"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    property_category: Mapped["PropertyCategory"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    city: Mapped["City"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    amenities: Mapped[list["Amenity"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        secondary="property_amenities",
        lazy="selectin",
        passive_deletes=True,
        order_by="Amenity.amenity_name",
    )

    __table_args__ = (
        CheckConstraint("price_per_night >= 0", name="price_per_night_non_negative"),
        CheckConstraint("max_guests >= 0", name="max_guests_non_negative"),
        CheckConstraint("bedrooms >= 0", name="bedrooms_non_negative"),
        CheckConstraint("bathrooms >= 0", name="bathrooms_non_negative"),
        CheckConstraint("latitude IS NULL OR latitude BETWEEN -90 AND 90", name="latitude_range"),
        CheckConstraint("longitude IS NULL OR longitude BETWEEN -180 AND 180", name="longitude_range"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, name={self.name!r}, city_id={self.city_id})>"
