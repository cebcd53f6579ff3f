from __future__ import annotations

from decimal import Decimal

import pytest

from univietqr import ZALOPAY, decode_zalopay_qr, generate_zalopay_qr
from univietqr.errors import InvalidPayloadError, MissingFieldsError
from univietqr.schemes import ZALOPAY_DEFAULTS

from .conftest import CRC_SEGMENT


def test_encode_layout(zalopay_record):
    payload = ZALOPAY.encode(zalopay_record)
    assert payload.startswith("000201010211" "38042553" "3912240101000001" "540575000" "6205Topup" "6304")
    assert CRC_SEGMENT.search(payload)


def test_round_trip(zalopay_record):
    record = decode_zalopay_qr(ZALOPAY.encode(zalopay_record))
    assert record.app_id == "2553"
    assert record.zp_trans_id == "240101000001"
    assert record.amount == 75000
    assert record.description == "Topup"


def test_camel_case_record():
    payload = ZALOPAY.encode({"appId": "2553", "zpTransId": "1", "amount": 10})
    assert "38042553" in payload


def test_omitted_description_decodes_to_default():
    payload = generate_zalopay_qr(app_id="2553", zp_trans_id="240101000001", amount=75000)
    assert decode_zalopay_qr(payload).description == ""


def test_payload_without_fields_decodes_to_defaults():
    record = decode_zalopay_qr("000201010211")
    assert record.app_id == "ZALO"
    assert record.zp_trans_id == "123456789"
    assert record.amount == Decimal("100000")
    assert record.description == ""


def test_defaults_are_read_only():
    with pytest.raises(TypeError):
        ZALOPAY_DEFAULTS["app_id"] = "OTHER"


def test_defaults_do_not_satisfy_encoding():
    with pytest.raises(MissingFieldsError, match="app_id, zp_trans_id, and amount are required fields") as excinfo:
        ZALOPAY.encode({"description": "Topup"})
    assert excinfo.value.missing == ("app_id", "zp_trans_id", "amount")


def test_invalid_input():
    with pytest.raises(InvalidPayloadError):
        ZALOPAY.decode("")
