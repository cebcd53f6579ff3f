"""Codec error definitions."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class QRCodecError(Exception):
    code: str
    message: str

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


@dataclass(slots=True)
class MissingFieldsError(QRCodecError):
    missing: tuple[str, ...] = field(default=())


class InvalidRecordError(QRCodecError):
    pass


class FieldTooLongError(QRCodecError):
    pass


class InvalidPayloadError(QRCodecError):
    pass


class UnknownSchemeError(QRCodecError):
    pass


def err_missing_fields(message: str, missing: tuple[str, ...] = ()) -> MissingFieldsError:
    return MissingFieldsError(code="ERR_MISSING_FIELDS", message=message, missing=missing)


def err_bad_record(message: str | None = None) -> InvalidRecordError:
    return InvalidRecordError(code="ERR_BAD_RECORD", message=message or "Invalid payment record")


def err_field_too_long(tag: str, length: int) -> FieldTooLongError:
    return FieldTooLongError(
        code="ERR_FIELD_TOO_LONG",
        message=f"Value for tag {tag} is {length} characters long, at most 99 fit a TLV length",
    )


def err_invalid_qr(message: str | None = None) -> InvalidPayloadError:
    return InvalidPayloadError(code="ERR_INVALID_QR", message=message or "Invalid QR code string.")


def err_unknown_scheme(name: str) -> UnknownSchemeError:
    return UnknownSchemeError(code="ERR_UNKNOWN_SCHEME", message=f"Unknown payment scheme: {name}")
