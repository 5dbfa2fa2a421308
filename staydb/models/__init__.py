"""SQLAlchemy models for StayDB.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from staydb.models.booking import Booking
from staydb.models.location import City, Country, State
from staydb.models.lookup import AMENITY_CATEGORIES, Amenity, PaymentStatus, PropertyCategory, PropertyType
from staydb.models.payment import PAYMENT_METHODS, Payment
from staydb.models.property import Property, PropertyAmenity
from staydb.models.user import USER_ROLES, User

__all__ = [
    "AMENITY_CATEGORIES",
    "Amenity",
    "Booking",
    "City",
    "Country",
    "PAYMENT_METHODS",
    "Payment",
    "PaymentStatus",
    "Property",
    "PropertyAmenity",
    "PropertyCategory",
    "PropertyType",
    "State",
    "USER_ROLES",
    "User",
]
