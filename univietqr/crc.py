"""CRC16-CCITT implementation."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: str) -> str:
    """Compute CRC-16/CCITT-FALSE (0x1021, init 0xFFFF) over the characters of ``data``."""

    checksum = CRC16_INIT
    for code in map(ord, data):
        checksum ^= code << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
    return f"{checksum & 0xFFFF:04X}"
