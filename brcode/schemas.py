"""Pydantic schemas for payment requests."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .normalizer import normalize_text


class PaymentRequest(BaseModel):
    """Static PIX charge: payee identity plus optional amount and txid."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="PIX key, encoded verbatim")
    merchant_name: str = Field(min_length=1)
    merchant_city: str = Field(min_length=1)
    amount: Decimal | None = None
    txid: str | None = None

    @field_validator("key")
    @classmethod
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("key must not be blank")
        return value

    @field_validator("merchant_name", "merchant_city")
    @classmethod
    def _has_encodable_text(cls, value: str) -> str:
        if not normalize_text(value).strip():
            raise ValueError("must contain at least one letter or digit")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _lenient_amount(cls, value: Any) -> Decimal | None:
        # Unusable amounts mean an open-amount charge, not an error.
        if value is None or isinstance(value, bool):
            return None
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        except InvalidOperation:
            return None
        if not amount.is_finite() or amount <= 0:
            return None
        return amount
