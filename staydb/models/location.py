"""Location hierarchy — Country 1—* State 1—* City."""

import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydb.database import Base, UUIDPrimaryKeyMixin


class Country(UUIDPrimaryKeyMixin, Base):
    """A country, unique by both name and ISO-style code."""

    __tablename__ = "countries"

    country_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    country_code: Mapped[str] = mapped_column(String(2), unique=True, nullable=False)

    # Children block deletion at the database level (RESTRICT); the ORM must not null them out.
    states: Mapped[list["State"]] = relationship(
        back_populates="country",
        lazy="selectin",
        passive_deletes="all",
        order_by="State.state_name",
    )

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, name={self.country_name!r}, code={self.country_code!r})>"


class State(UUIDPrimaryKeyMixin, Base):
    """A state or province; names are unique within a country."""

    __tablename__ = "states"

    country_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("countries.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    state_name: Mapped[str] = mapped_column(String(100), nullable=False)

    country: Mapped["Country"] = relationship(back_populates="states", lazy="selectin")
    cities: Mapped[list["City"]] = relationship(
        back_populates="state",
        lazy="selectin",
        passive_deletes="all",
        order_by="City.city_name",
    )

    __table_args__ = (UniqueConstraint("country_id", "state_name"),)

    def __repr__(self) -> str:
        return f"<State(id={self.id}, country_id={self.country_id}, name={self.state_name!r})>"


class City(UUIDPrimaryKeyMixin, Base):
    """A city; names are unique within a state."""

    __tablename__ = "cities"

    state_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("states.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    city_name: Mapped[str] = mapped_column(String(100), nullable=False)

    state: Mapped["State"] = relationship(back_populates="cities", lazy="selectin")

    __table_args__ = (UniqueConstraint("state_id", "city_name"),)

    def __repr__(self) -> str:
        return f"<City(id={self.id}, state_id={self.state_id}, name={self.city_name!r})>"
