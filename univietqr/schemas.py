"""Pydantic models for the structured payment records of each scheme."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PaymentRecord(BaseModel):
    """Base record: snake_case attributes, camelCase aliases accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


class VietQRData(PaymentRecord):
    bank_id: str | None = None
    account_number: str | None = None
    account_name: str | None = None
    amount: Decimal | None = None
    message: str | None = None


class MoMoData(PaymentRecord):
    partner_code: str | None = None
    partner_ref_id: str | None = None
    amount: Decimal | None = None
    description: str | None = None


class ZaloPayData(PaymentRecord):
    app_id: str | None = None
    zp_trans_id: str | None = None
    amount: Decimal | None = None
    description: str | None = None
