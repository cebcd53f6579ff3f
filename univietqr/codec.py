"""Generic scheme engine mapping payment records onto TLV payloads."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import cached_property
from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from .crc import crc16_ccitt
from .errors import err_bad_record, err_invalid_qr, err_missing_fields
from .schemas import PaymentRecord
from .tlv import TLVItem, build_tlv, scan_fields

logger = logging.getLogger("univietqr.codec")

CRC_TAG = "63"
CRC_HEADER = f"{CRC_TAG}04"

# Payload format indicator "01", point of initiation "11" (static QR).
DEFAULT_HEADER = (TLVItem(tag="00", value="01"), TLVItem(tag="01", value="11"))

_CENTS = Decimal("0.01")
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")


def is_present(value: Any) -> bool:
    """Return False for values that are left out of a payload: None, "", zero and NaN."""

    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float, Decimal)):
        return value == value and value != 0
    return bool(value)


def _to_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def fixed_two_decimals(value: Any) -> str:
    """``1000.5`` -> ``"1000.50"``.

    Rounds half up on the decimal text of the value, so ``1.005`` gives
    ``"1.01"`` rather than the ``"1.00"`` a binary double would round to.
    """

    number = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        return f"{number.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"


def plain_number(value: Any) -> str:
    """``50000`` -> ``"50000"``, ``1000.50`` -> ``"1000.5"``."""

    number = _to_decimal(value)
    if number == number.to_integral_value():
        return str(int(number))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(number.as_tuple().digits))
        return f"{number.normalize():f}"


def parse_decimal(text: str) -> Decimal | None:
    """Parse the leading numeric part of ``text``; None when there is none."""

    match = _NUMERIC_PREFIX.match(text.strip())
    if match is None:
        return None
    return Decimal(match.group())


@dataclass(frozen=True)
class FieldSpec:
    name: str
    tag: str
    required: bool = False
    formatter: Callable[[Any], str] = str
    parser: Callable[[str], Any] = str


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def append_crc(body: str) -> EncodedPayload:
    """Terminate ``body`` with the CRC segment (tag 63, length 04)."""

    crc = crc16_ccitt(f"{body}{CRC_HEADER}")
    return EncodedPayload(payload=f"{body}{CRC_HEADER}{crc}", crc=crc)


def verify_crc(payload: str) -> bool:
    """Check that ``payload`` ends with a CRC segment matching its content."""

    if len(payload) < len(CRC_HEADER) + 4 or payload[-8:-4] != CRC_HEADER:
        return False
    return crc16_ccitt(payload[:-4]) == payload[-4:]


@dataclass(frozen=True)
class Scheme:
    """One payment rail: its record model, field table and header segments."""

    name: str
    record_type: type[PaymentRecord]
    fields: tuple[FieldSpec, ...]
    required_message: str
    header: tuple[TLVItem, ...] = DEFAULT_HEADER
    decode_defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @cached_property
    def _by_tag(self) -> dict[str, FieldSpec]:
        return {spec.tag: spec for spec in self.fields}

    def _coerce(self, record: Mapping[str, Any] | BaseModel) -> PaymentRecord:
        if isinstance(record, self.record_type):
            return record
        if isinstance(record, BaseModel):
            record = record.model_dump()
        try:
            return self.record_type.model_validate(record)
        except ValidationError as exc:
            raise err_bad_record(f"Invalid {self.name} record: {exc.error_count()} validation error(s)") from exc

    def build(self, record: Mapping[str, Any] | BaseModel) -> EncodedPayload:
        """Validate ``record`` and assemble the payload together with its CRC."""

        data = self._coerce(record)
        missing = tuple(spec.name for spec in self.fields if spec.required and not is_present(getattr(data, spec.name)))
        if missing:
            logger.warning("required fields missing", extra={"scheme": self.name, "missing": list(missing)})
            raise err_missing_fields(self.required_message, missing)

        items = list(self.header)
        for spec in self.fields:
            value = getattr(data, spec.name)
            if is_present(value):
                items.append(TLVItem(tag=spec.tag, value=spec.formatter(value)))

        encoded = append_crc(build_tlv(items))
        logger.debug(
            "payload encoded",
            extra={"scheme": self.name, "tags": [item.tag for item in items], "crc": encoded.crc},
        )
        return encoded

    def encode(self, record: Mapping[str, Any] | BaseModel) -> str:
        return self.build(record).payload

    def decode(self, payload: Any) -> PaymentRecord:
        """Map the recognised tags of ``payload`` onto a record.

        Unknown tags are dropped and the CRC segment is not verified.
        """

        if not isinstance(payload, str) or not payload:
            raise err_invalid_qr()

        values: dict[str, Any] = dict(self.decode_defaults)
        for item in scan_fields(payload):
            spec = self._by_tag.get(item.tag)
            if spec is None:
                logger.debug("tag ignored", extra={"scheme": self.name, "tag": item.tag})
                continue
            parsed = spec.parser(item.value)
            if parsed is not None:
                values[spec.name] = parsed

        logger.debug("payload decoded", extra={"scheme": self.name, "fields": sorted(values)})
        return self.record_type.model_validate(values)
