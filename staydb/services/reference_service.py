"""Reference data service — location hierarchy and lookup tables."""

import logging
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.exceptions import DuplicateError, NotFoundError, flush_or_raise
from staydb.models.location import City, Country, State
from staydb.models.lookup import Amenity, PaymentStatus, PropertyCategory, PropertyType

logger = logging.getLogger(__name__)

LookupModel = TypeVar("LookupModel", PropertyType, PropertyCategory, Amenity, PaymentStatus)

# Each lookup table is keyed by its own unique name column.
_LOOKUP_NAME_COLUMNS = {
    PropertyType: PropertyType.type_name,
    PropertyCategory: PropertyCategory.category_name,
    Amenity: Amenity.amenity_name,
    PaymentStatus: PaymentStatus.status_name,
}


async def get_or_create_country(db: AsyncSession, name: str, code: str) -> Country:
    """Return the country with this name, creating it if missing.

    Raises ``DuplicateError`` if the country exists under a different code.
    """
    result = await db.execute(select(Country).where(Country.country_name == name))
    country = result.scalar_one_or_none()
    if country is not None:
        if country.country_code != code:
            raise DuplicateError(
                f"Country {name} already exists with code {country.country_code}, not {code}",
                "uq_countries_country_name",
            )
        return country

    country = Country(country_name=name, country_code=code)
    db.add(country)
    await flush_or_raise(db)
    logger.info("Created country %s (%s)", name, code)
    return country


async def get_or_create_state(db: AsyncSession, country: Country, name: str) -> State:
    """Return the state with this name under ``country``, creating it if missing."""
    result = await db.execute(
        select(State).where(State.country_id == country.id, State.state_name == name)
    )
    state = result.scalar_one_or_none()
    if state is not None:
        return state

    state = State(country_id=country.id, state_name=name)
    db.add(state)
    await flush_or_raise(db)
    logger.info("Created state %s in country %s", name, country.country_code)
    return state


async def get_or_create_city(db: AsyncSession, state: State, name: str) -> City:
    """Return the city with this name under ``state``, creating it if missing."""
    result = await db.execute(
        select(City).where(City.state_id == state.id, City.city_name == name)
    )
    city = result.scalar_one_or_none()
    if city is not None:
        return city

    city = City(state_id=state.id, city_name=name)
    db.add(city)
    await flush_or_raise(db)
    logger.info("Created city %s in state %s", name, state.state_name)
    return city


async def get_lookup(db: AsyncSession, model: type[LookupModel], name: str) -> LookupModel:
    """Fetch a lookup row by its unique name, raising ``NotFoundError`` if absent."""
    try:
        column = _LOOKUP_NAME_COLUMNS[model]
    except KeyError:
        raise TypeError(f"{model.__name__} is not a lookup table") from None

    result = await db.execute(select(model).where(column == name))
    row = result.scalar_one_or_none()
    if row is None:
        raise NotFoundError(model.__name__, name)
    return row


async def list_cities(db: AsyncSession, country_code: str) -> list[City]:
    """Return every city in the country, ordered by state name then city name."""
    result = await db.execute(
        select(City)
        .join(State, City.state_id == State.id)
        .join(Country, State.country_id == Country.id)
        .where(Country.country_code == country_code)
        .order_by(State.state_name, City.city_name)
    )
    return list(result.scalars().all())
