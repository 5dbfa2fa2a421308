"""Pydantic v2 input schemas for the property service."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

# Column precision: Numeric(10, 2) for money, Numeric(9, 6) for coordinates
_PRICE = {"max_digits": 10, "decimal_places": 2}
_COORDINATE = {"max_digits": 9, "decimal_places": 6}

# Columns an update may change but never clear
_REQUIRED_ON_UPDATE = frozenset(
    {
        "property_type_id",
        "property_category_id",
        "city_id",
        "name",
        "address_line1",
        "price_per_night",
        "max_guests",
        "bedrooms",
        "bathrooms",
    }
)

# ---------------------------------------------------------------------------
# Input schemas
# ---------------------------------------------------------------------------


class PropertyCreate(BaseModel):
    """Schema for creating a new property listing."""

    host_id: uuid.UUID
    property_type_id: uuid.UUID
    property_category_id: uuid.UUID
    city_id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    postal_code: str | None = Field(None, max_length=20)
    latitude: Decimal | None = Field(None, ge=-90, le=90, **_COORDINATE)
    longitude: Decimal | None = Field(None, ge=-180, le=180, **_COORDINATE)
    price_per_night: Decimal = Field(..., ge=0, **_PRICE)
    max_guests: int = Field(1, ge=0)
    bedrooms: int = Field(1, ge=0)
    bathrooms: int = Field(1, ge=0)
    amenity_ids: list[uuid.UUID] = Field(default_factory=list)


class PropertyUpdate(BaseModel):
    """Schema for partially updating a property. All fields optional.

    Omitting a field leaves the column unchanged. Only the nullable columns
    (description, address_line2, postal_code, latitude, longitude) may be
    cleared by passing ``None`` explicitly.
    """

    property_type_id: uuid.UUID | None = None
    property_category_id: uuid.UUID | None = None
    city_id: uuid.UUID | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    address_line1: str | None = Field(None, min_length=1, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    postal_code: str | None = Field(None, max_length=20)
    latitude: Decimal | None = Field(None, ge=-90, le=90, **_COORDINATE)
    longitude: Decimal | None = Field(None, ge=-180, le=180, **_COORDINATE)
    price_per_night: Decimal | None = Field(None, ge=0, **_PRICE)
    max_guests: int | None = Field(None, ge=0)
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "PropertyUpdate":
        """Refuse an explicit ``None`` for a column that is NOT NULL."""
        nulled = sorted(
            name
            for name in self.model_fields_set & _REQUIRED_ON_UPDATE
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"cannot be null: {', '.join(nulled)}")
        return self


# ---------------------------------------------------------------------------
# Read schemas
# ---------------------------------------------------------------------------


class PropertySummary(BaseModel):
    """Flattened view of a listing with its lookup values resolved."""

    id: uuid.UUID
    name: str
    price_per_night: Decimal
    max_guests: int
    property_type: str
    property_category: str
    city: str
    amenities: list[str]
