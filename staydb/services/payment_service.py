"""Payment service — record transactions and move them through their lifecycle."""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staydb.exceptions import flush_or_raise
from staydb.models.lookup import PaymentStatus
from staydb.models.payment import Payment
from staydb.schemas.payment import PaymentCreate
from staydb.services.reference_service import get_lookup

logger = logging.getLogger(__name__)


async def _reload(db: AsyncSession, payment_id: uuid.UUID) -> Payment:
    """Re-read a payment so its status and booking reflect the database."""
    result = await db.execute(
        select(Payment).where(Payment.id == payment_id).execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def record_payment(db: AsyncSession, data: PaymentCreate) -> Payment:
    """Insert a payment for a booking in the named status (``pending`` by default)."""
    status = await get_lookup(db, PaymentStatus, data.status)

    payment = Payment(
        booking_id=data.booking_id,
        payment_status_id=status.id,
        amount=data.amount,
        payment_method=data.payment_method,
        transaction_id=data.transaction_id,
    )
    db.add(payment)
    await flush_or_raise(db)
    payment = await _reload(db, payment.id)

    logger.info(
        "Recorded %s payment %s of %s for booking %s",
        data.payment_method,
        payment.id,
        data.amount,
        data.booking_id,
    )
    return payment


async def update_payment_status(db: AsyncSession, payment: Payment, status_name: str) -> Payment:
    """Move a payment to another lifecycle state."""
    status = await get_lookup(db, PaymentStatus, status_name)
    payment.payment_status_id = status.id
    await flush_or_raise(db)
    payment = await _reload(db, payment.id)

    logger.info("Payment %s is now %s", payment.id, status_name)
    return payment


async def total_paid_for_booking(db: AsyncSession, booking_id: uuid.UUID) -> Decimal:
    """Sum the completed payments of a booking."""
    result = await db.execute(
        select(func.coalesce(func.sum(Payment.amount), 0))
        .select_from(Payment)
        .join(PaymentStatus, Payment.payment_status_id == PaymentStatus.id)
        .where(Payment.booking_id == booking_id, PaymentStatus.status_name == "completed")
    )
    return Decimal(str(result.scalar_one()))
