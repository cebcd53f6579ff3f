"""Utility helpers to build and scan EMV-style TLV payloads."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .errors import err_field_too_long

MAX_VALUE_LENGTH = 99

# Tag, declared length, then a greedy run of candidate value characters.
_SEGMENT_RE = re.compile(r"(\d{2})(\d{2})([A-Za-z0-9.]+)")


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    @property
    def length(self) -> int:
        return len(self.value)

    def serialize(self) -> str:
        if self.length > MAX_VALUE_LENGTH:
            raise err_field_too_long(self.tag, self.length)
        return f"{self.tag}{self.length:02d}{self.value}"


def append_field(tag: str, value: str) -> str:
    """Render a single ``TT LL VALUE`` segment."""

    return TLVItem(tag=tag, value=value).serialize()


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)


def scan_fields(payload: str) -> list[TLVItem]:
    """Tokenize ``payload`` into TLV items, best effort.

    Each segment is located by searching for a two digit tag, a two digit
    length and a run of letters, digits or dots. The value is the first
    ``length`` characters of that run, so values holding spaces or other
    punctuation come back cut at the first such character. Scanning resumes
    right after the consumed value. Text that does not look like a segment is
    skipped silently.
    """

    items: list[TLVItem] = []
    pos = 0
    while True:
        match = _SEGMENT_RE.search(payload, pos)
        if match is None:
            break
        tag, declared, candidate = match.groups()
        value = candidate[: int(declared)]
        items.append(TLVItem(tag=tag, value=value))
        pos = match.start(3) + len(value)
    return items
