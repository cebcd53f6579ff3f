from __future__ import annotations

from decimal import Decimal

import pytest

from univietqr import MOMO, decode_momo_qr, generate_momo_qr
from univietqr.codec import append_crc
from univietqr.crc import crc16_ccitt
from univietqr.errors import MissingFieldsError

from .conftest import CRC_SEGMENT


def test_encode_layout(momo_record):
    payload = MOMO.encode(momo_record)
    assert payload.startswith("000201010211" "3804MOMO" "3909123456789" "540550000" "6208Order123" "6304")
    assert CRC_SEGMENT.search(payload)
    assert payload[-4:] == crc16_ccitt(payload[:-4])


@pytest.mark.parametrize(
    "amount, expected",
    [(50000, "50000"), (50000.0, "50000"), (Decimal("1000.50"), "1000.5"), ("2500", "2500")],
)
def test_amount_uses_plain_number_text(amount, expected):
    payload = generate_momo_qr(partner_code="MOMO", partner_ref_id="1", amount=amount)
    assert f"54{len(expected):02d}{expected}6304" in payload


def test_round_trip(momo_record):
    record = decode_momo_qr(MOMO.encode(momo_record))
    assert record.partner_code == "MOMO"
    assert record.partner_ref_id == "123456789"
    assert record.amount == 50000
    assert record.description == "Order123"


def test_camel_case_record():
    payload = MOMO.encode({"partnerCode": "MOMO", "partnerRefId": "123456789", "amount": 50000})
    assert "3804MOMO" in payload


def test_literal_payload_description_cut_at_first_space():
    body = "000201010211" "3804MOMO" "3909123456789" "540550000" "6222Payment for order #123"
    record = decode_momo_qr(append_crc(body).payload)
    assert record.partner_code == "MOMO"
    assert record.partner_ref_id == "123456789"
    assert record.amount == Decimal("50000")
    assert record.description == "Payment"


def test_optional_description_absent():
    payload = generate_momo_qr(partner_code="MOMO", partner_ref_id="123456789", amount=50000)
    assert decode_momo_qr(payload).description is None


def test_unknown_tag_between_fields():
    body = "000201010211" "3804MOMO" "9904ABCD" "3909123456789" "540550000"
    record = decode_momo_qr(append_crc(body).payload)
    assert (record.partner_code, record.partner_ref_id, record.amount) == ("MOMO", "123456789", 50000)


@pytest.mark.parametrize(
    "overrides, missing",
    [
        ({"partner_code": None}, ("partner_code",)),
        ({"partner_ref_id": ""}, ("partner_ref_id",)),
        ({"amount": 0}, ("amount",)),
    ],
)
def test_missing_required_fields(momo_record, overrides, missing):
    with pytest.raises(MissingFieldsError, match="partner_code, partner_ref_id, and amount are required fields") as excinfo:
        MOMO.encode({**momo_record, **overrides})
    assert excinfo.value.missing == missing


def test_absent_fields_decode_as_none():
    record = decode_momo_qr("000201010211")
    assert record.partner_code is None
    assert record.amount is None
