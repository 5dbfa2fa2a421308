"""normalized_marketplace_schema

Revision ID: 3f9c2b7d1e04
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2b7d1e04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Step 1: People
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("phone_number", sa.String(length=50), nullable=True),
        sa.Column("role", sa.String(length=20), server_default="guest", nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role IN ('guest', 'host', 'admin')", name="ck_users_role_valid"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Step 2: Location hierarchy
    countries = op.create_table(
        "countries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("country_name", sa.String(length=100), nullable=False),
        sa.Column("country_code", sa.String(length=2), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_countries"),
        sa.UniqueConstraint("country_name", name="uq_countries_country_name"),
        sa.UniqueConstraint("country_code", name="uq_countries_country_code"),
    )
    op.create_table(
        "states",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("country_id", sa.Uuid(), nullable=False),
        sa.Column("state_name", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(
            ["country_id"], ["countries.id"],
            name="fk_states_country_id_countries", ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_states"),
        sa.UniqueConstraint("country_id", "state_name", name="uq_states_country_id_state_name"),
    )
    op.create_index("ix_states_country_id", "states", ["country_id"])
    op.create_table(
        "cities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("state_id", sa.Uuid(), nullable=False),
        sa.Column("city_name", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(
            ["state_id"], ["states.id"],
            name="fk_cities_state_id_states", ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_cities"),
        sa.UniqueConstraint("state_id", "city_name", name="uq_cities_state_id_city_name"),
    )
    op.create_index("ix_cities_state_id", "cities", ["state_id"])

    # Step 3: Lookup tables
    property_types = op.create_table(
        "property_types",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("type_name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_property_types"),
        sa.UniqueConstraint("type_name", name="uq_property_types_type_name"),
    )
    property_categories = op.create_table(
        "property_categories",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("category_name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_property_categories"),
        sa.UniqueConstraint("category_name", name="uq_property_categories_category_name"),
    )
    amenities = op.create_table(
        "amenities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("amenity_name", sa.String(length=100), nullable=False),
        sa.Column("amenity_category", sa.String(length=20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "amenity_category IN ('basic', 'luxury', 'safety', 'accessibility')",
            name="ck_amenities_amenity_category_valid",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_amenities"),
        sa.UniqueConstraint("amenity_name", name="uq_amenities_amenity_name"),
    )
    payment_statuses = op.create_table(
        "payment_statuses",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("status_name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_payment_statuses"),
        sa.UniqueConstraint("status_name", name="uq_payment_statuses_status_name"),
    )

    # Step 4: Listings and their amenity links
    op.create_table(
        "properties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("host_id", sa.Uuid(), nullable=False),
        sa.Column("property_type_id", sa.Uuid(), nullable=False),
        sa.Column("property_category_id", sa.Uuid(), nullable=False),
        sa.Column("city_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("address_line1", sa.String(length=255), nullable=False),
        sa.Column("address_line2", sa.String(length=255), nullable=True),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
        sa.Column("latitude", sa.Numeric(precision=9, scale=6), nullable=True),
        sa.Column("longitude", sa.Numeric(precision=9, scale=6), nullable=True),
        sa.Column("price_per_night", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("max_guests", sa.Integer(), server_default="1", nullable=False),
        sa.Column("bedrooms", sa.Integer(), server_default="1", nullable=False),
        sa.Column("bathrooms", sa.Integer(), server_default="1", nullable=False),
        *_timestamps(),
        sa.CheckConstraint("price_per_night >= 0", name="ck_properties_price_per_night_non_negative"),
        sa.CheckConstraint("max_guests >= 0", name="ck_properties_max_guests_non_negative"),
        sa.CheckConstraint("bedrooms >= 0", name="ck_properties_bedrooms_non_negative"),
        sa.CheckConstraint("bathrooms >= 0", name="ck_properties_bathrooms_non_negative"),
        sa.CheckConstraint(
            "latitude IS NULL OR latitude BETWEEN -90 AND 90", name="ck_properties_latitude_range"
        ),
        sa.CheckConstraint(
            "longitude IS NULL OR longitude BETWEEN -180 AND 180", name="ck_properties_longitude_range"
        ),
        sa.ForeignKeyConstraint(
            ["host_id"], ["users.id"],
            name="fk_properties_host_id_users", ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["property_type_id"], ["property_types.id"],
            name="fk_properties_property_type_id_property_types", ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["property_category_id"], ["property_categories.id"],
            name="fk_properties_property_category_id_property_categories", ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["city_id"], ["cities.id"],
            name="fk_properties_city_id_cities", ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_properties"),
    )
    op.create_index("ix_properties_host_id", "properties", ["host_id"])
    op.create_index("ix_properties_property_type_id", "properties", ["property_type_id"])
    op.create_index("ix_properties_property_category_id", "properties", ["property_category_id"])
    op.create_index("ix_properties_city_id", "properties", ["city_id"])

    op.create_table(
        "property_amenities",
        sa.Column("property_id", sa.Uuid(), nullable=False),
        sa.Column("amenity_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["property_id"], ["properties.id"],
            name="fk_property_amenities_property_id_properties", ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["amenity_id"], ["amenities.id"],
            name="fk_property_amenities_amenity_id_amenities", ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("property_id", "amenity_id", name="pk_property_amenities"),
    )
    op.create_index("ix_property_amenities_amenity_id", "property_amenities", ["amenity_id"])

    # Step 5: Bookings and payments
    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("property_id", sa.Uuid(), nullable=False),
        sa.Column("guest_id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["property_id"], ["properties.id"],
            name="fk_bookings_property_id_properties", ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["guest_id"], ["users.id"],
            name="fk_bookings_guest_id_users", ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_bookings"),
    )
    op.create_index("ix_bookings_property_id", "bookings", ["property_id"])
    op.create_index("ix_bookings_guest_id", "bookings", ["guest_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("booking_id", sa.Uuid(), nullable=False),
        sa.Column("payment_status_id", sa.Uuid(), nullable=False),
        sa.Column("amount", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("payment_date", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.Column("transaction_id", sa.String(length=255), nullable=True),
        sa.CheckConstraint("amount >= 0", name="ck_payments_amount_non_negative"),
        sa.CheckConstraint(
            "payment_method IN ('credit_card', 'paypal', 'stripe')",
            name="ck_payments_payment_method_valid",
        ),
        sa.ForeignKeyConstraint(
            ["booking_id"], ["bookings.id"],
            name="fk_payments_booking_id_bookings", ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["payment_status_id"], ["payment_statuses.id"],
            name="fk_payments_payment_status_id_payment_statuses", ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_payments"),
        sa.UniqueConstraint("transaction_id", name="uq_payments_transaction_id"),
    )
    op.create_index("ix_payments_booking_id", "payments", ["booking_id"])
    op.create_index("ix_payments_payment_status_id", "payments", ["payment_status_id"])

    # Step 6: Reference data
    op.bulk_insert(countries, [
        {"id": uuid.uuid4(), "country_name": "United States", "country_code": "US"},
        {"id": uuid.uuid4(), "country_name": "Canada", "country_code": "CA"},
        {"id": uuid.uuid4(), "country_name": "United Kingdom", "country_code": "UK"},
    ])
    op.bulk_insert(property_types, [
        {"id": uuid.uuid4(), "type_name": "Apartment", "description": "A self-contained unit in a multi-unit building"},
        {"id": uuid.uuid4(), "type_name": "House", "description": "A standalone residential building"},
        {"id": uuid.uuid4(), "type_name": "Villa", "description": "A large detached house, often with grounds"},
        {"id": uuid.uuid4(), "type_name": "Cabin", "description": "A small house in a rural or wooded setting"},
        {"id": uuid.uuid4(), "type_name": "Condo", "description": "An individually owned unit in a shared building"},
    ])
    op.bulk_insert(property_categories, [
        {
            "id": uuid.uuid4(),
            "category_name": "Entire Place",
            "description": "Guests have the whole property to themselves",
        },
        {
            "id": uuid.uuid4(),
            "category_name": "Private Room",
            "description": "A private bedroom with shared common areas",
        },
        {"id": uuid.uuid4(), "category_name": "Shared Room", "description": "A sleeping space shared with others"},
    ])
    op.bulk_insert(amenities, [
        {"id": uuid.uuid4(), "amenity_name": "WiFi", "amenity_category": "basic"},
        {"id": uuid.uuid4(), "amenity_name": "Kitchen", "amenity_category": "basic"},
        {"id": uuid.uuid4(), "amenity_name": "Air Conditioning", "amenity_category": "basic"},
        {"id": uuid.uuid4(), "amenity_name": "Pool", "amenity_category": "luxury"},
        {"id": uuid.uuid4(), "amenity_name": "Hot Tub", "amenity_category": "luxury"},
        {"id": uuid.uuid4(), "amenity_name": "Smoke Detector", "amenity_category": "safety"},
        {"id": uuid.uuid4(), "amenity_name": "First Aid Kit", "amenity_category": "safety"},
        {"id": uuid.uuid4(), "amenity_name": "Wheelchair Accessible", "amenity_category": "accessibility"},
        {"id": uuid.uuid4(), "amenity_name": "Elevator", "amenity_category": "accessibility"},
    ])
    op.bulk_insert(payment_statuses, [
        {"id": uuid.uuid4(), "status_name": "pending"},
        {"id": uuid.uuid4(), "status_name": "completed"},
        {"id": uuid.uuid4(), "status_name": "failed"},
        {"id": uuid.uuid4(), "status_name": "refunded"},
    ])


def downgrade() -> None:
    op.drop_index("ix_payments_payment_status_id", table_name="payments")
    op.drop_index("ix_payments_booking_id", table_name="payments")
    op.drop_table("payments")
    op.drop_index("ix_bookings_guest_id", table_name="bookings")
    op.drop_index("ix_bookings_property_id", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_property_amenities_amenity_id", table_name="property_amenities")
    op.drop_table("property_amenities")
    op.drop_index("ix_properties_city_id", table_name="properties")
    op.drop_index("ix_properties_property_category_id", table_name="properties")
    op.drop_index("ix_properties_property_type_id", table_name="properties")
    op.drop_index("ix_properties_host_id", table_name="properties")
    op.drop_table("properties")
    op.drop_table("payment_statuses")
    op.drop_table("amenities")
    op.drop_table("property_categories")
    op.drop_table("property_types")
    op.drop_index("ix_cities_state_id", table_name="cities")
    op.drop_table("cities")
    op.drop_index("ix_states_country_id", table_name="states")
    op.drop_table("states")
    op.drop_table("countries")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
