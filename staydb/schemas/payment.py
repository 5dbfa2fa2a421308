"""Pydantic v2 input schemas for the payment service."""

import uuid
from decimal import Decimal

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    """Schema for recording a payment against a booking."""

    booking_id: uuid.UUID
    amount: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    payment_method: str = Field(..., pattern="^(credit_card|paypal|stripe)$")
    status: str = Field("pending", min_length=1, max_length=50)
    transaction_id: str | None = Field(None, max_length=255)
