"""Payment model — one row per transaction against a booking."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staydb.database import Base, UUIDPrimaryKeyMixin
from staydb.models.lookup import in_list_check

PAYMENT_METHODS = ("credit_card", "paypal", "stripe")


class Payment(UUIDPrimaryKeyMixin, Base):
    """A single payment transaction; its lifecycle state lives in payment_statuses."""

    __tablename__ = "payments"

    booking_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("bookings.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    payment_status_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("payment_statuses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_date: Mapped[datetime] = mapped_column(server_default=func.now())
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)  # credit_card, paypal, stripe
    # External processor reference; NULLs never collide on a unique column
    transaction_id: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)

    # Relationships
    booking: Mapped["Booking"] = relationship(back_populates="payments", lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    payment_status: Mapped["PaymentStatus"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        CheckConstraint("amount >= 0", name="amount_non_negative"),
        CheckConstraint(in_list_check("payment_method", PAYMENT_METHODS), name="payment_method_valid"),
    )

    def __repr__(self) -> str:
        return (
            f"<Payment(id={self.id}, booking_id={self.booking_id}, "
            f"amount={self.amount}, method={self.payment_method!r})>"
        )
