"""Field tables for the VietQR, MoMo and ZaloPay rails."""
from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel

from .codec import FieldSpec, Scheme, fixed_two_decimals, parse_decimal, plain_number
from .errors import err_unknown_scheme
from .schemas import MoMoData, VietQRData, ZaloPayData

# NAPAS registered application identifier wrapped with the bank id in tag 26.
NAPAS_AID = "A000000727"


def _with_napas_aid(bank_id: str) -> str:
    return f"{NAPAS_AID}{bank_id}"


def _strip_napas_aid(value: str) -> str:
    return value[len(NAPAS_AID):]


VIETQR = Scheme(
    name="vietqr",
    record_type=VietQRData,
    fields=(
        FieldSpec("bank_id", "26", required=True, formatter=_with_napas_aid, parser=_strip_napas_aid),
        FieldSpec("account_number", "01", required=True),
        FieldSpec("account_name", "02"),
        FieldSpec("amount", "54", formatter=fixed_two_decimals, parser=parse_decimal),
        FieldSpec("message", "62"),
    ),
    required_message="bank_id and account_number are required fields.",
)

MOMO = Scheme(
    name="momo",
    record_type=MoMoData,
    fields=(
        FieldSpec("partner_code", "38", required=True),
        FieldSpec("partner_ref_id", "39", required=True),
        FieldSpec("amount", "54", required=True, formatter=plain_number, parser=parse_decimal),
        FieldSpec("description", "62"),
    ),
    required_message="partner_code, partner_ref_id, and amount are required fields.",
)

# ZaloPay decoding reports these values for any field the payload lacks.
ZALOPAY_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "app_id": "ZALO",
        "zp_trans_id": "123456789",
        "amount": Decimal("100000"),
        "description": "",
    }
)

ZALOPAY = Scheme(
    name="zalopay",
    record_type=ZaloPayData,
    fields=(
        FieldSpec("app_id", "38", required=True),
        FieldSpec("zp_trans_id", "39", required=True),
        FieldSpec("amount", "54", required=True, formatter=plain_number, parser=parse_decimal),
        FieldSpec("description", "62"),
    ),
    required_message="app_id, zp_trans_id, and amount are required fields.",
    decode_defaults=ZALOPAY_DEFAULTS,
)

SCHEMES: Mapping[str, Scheme] = MappingProxyType({scheme.name: scheme for scheme in (VIETQR, MOMO, ZALOPAY)})


def get_scheme(name: str) -> Scheme:
    """Look up a scheme by its key (``vietqr``, ``momo`` or ``zalopay``)."""

    try:
        return SCHEMES[name.lower()]
    except KeyError:
        raise err_unknown_scheme(name) from None


def generate_vietqr(record: Mapping[str, Any] | BaseModel | None = None, **fields: Any) -> str:
    """Build a VietQR bank-transfer payload from a record or keyword fields."""

    return VIETQR.encode(_merge(record, fields))


def decode_vietqr(payload: str) -> VietQRData:
    return VIETQR.decode(payload)


def generate_momo_qr(record: Mapping[str, Any] | BaseModel | None = None, **fields: Any) -> str:
    return MOMO.encode(_merge(record, fields))


def decode_momo_qr(payload: str) -> MoMoData:
    return MOMO.decode(payload)


def generate_zalopay_qr(record: Mapping[str, Any] | BaseModel | None = None, **fields: Any) -> str:
    return ZALOPAY.encode(_merge(record, fields))


def decode_zalopay_qr(payload: str) -> ZaloPayData:
    return ZALOPAY.decode(payload)


def _merge(record: Mapping[str, Any] | BaseModel | None, fields: dict[str, Any]) -> Mapping[str, Any] | BaseModel:
    if record is None:
        return fields
    if not fields:
        return record
    base = record.model_dump() if isinstance(record, BaseModel) else dict(record)
    return {**base, **fields}
