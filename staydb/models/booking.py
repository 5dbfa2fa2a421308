"""Booking model — a guest's reservation of a property.

Only the keys are modelled here. The reservation details (dates, party size,
totals) belong to the original booking schema and are deliberately left out
rather than guessed.
"""

import uuid

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydb.database import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Booking(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A reservation linking a guest user to a property."""

    __tablename__ = "bookings"

    property_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("properties.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    guest_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    property: Mapped["Property"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    guest: Mapped["User"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    payments: Mapped[list["Payment"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="booking",
        lazy="selectin",
        passive_deletes="all",
        order_by="Payment.payment_date",
    )

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, property_id={self.property_id}, guest_id={self.guest_id})>"
