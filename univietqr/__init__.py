"""Encode and decode VietQR, MoMo and ZaloPay payment QR payloads."""
from __future__ import annotations

from .codec import EncodedPayload, FieldSpec, Scheme, append_crc, is_present, verify_crc
from .crc import crc16_ccitt
from .errors import (
    FieldTooLongError,
    InvalidPayloadError,
    InvalidRecordError,
    MissingFieldsError,
    QRCodecError,
    UnknownSchemeError,
)
from .logging_conf import JsonFormatter, configure_logging
from .schemas import MoMoData, PaymentRecord, VietQRData, ZaloPayData
from .schemes import (
    MOMO,
    SCHEMES,
    VIETQR,
    ZALOPAY,
    decode_momo_qr,
    decode_vietqr,
    decode_zalopay_qr,
    generate_momo_qr,
    generate_vietqr,
    generate_zalopay_qr,
    get_scheme,
)
from .tlv import TLVItem, append_field, build_tlv, scan_fields

__all__ = [
    "EncodedPayload",
    "FieldSpec",
    "FieldTooLongError",
    "InvalidPayloadError",
    "InvalidRecordError",
    "JsonFormatter",
    "MOMO",
    "MissingFieldsError",
    "MoMoData",
    "PaymentRecord",
    "QRCodecError",
    "SCHEMES",
    "Scheme",
    "TLVItem",
    "UnknownSchemeError",
    "VIETQR",
    "VietQRData",
    "ZALOPAY",
    "ZaloPayData",
    "append_crc",
    "append_field",
    "build_tlv",
    "configure_logging",
    "crc16_ccitt",
    "decode_momo_qr",
    "decode_vietqr",
    "decode_zalopay_qr",
    "generate_momo_qr",
    "generate_vietqr",
    "generate_zalopay_qr",
    "get_scheme",
    "is_present",
    "scan_fields",
    "verify_crc",
]
