"""Utility helpers to build EMV-style TLV payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import err_field_too_long

MAX_VALUE_LENGTH = 99


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def __post_init__(self) -> None:
        if len(self.tag) != 2 or not self.tag.isascii() or not self.tag.isdigit():
            raise ValueError(f"TLV tag must be two digits, got {self.tag!r}")
        if len(self.value) > MAX_VALUE_LENGTH:
            raise err_field_too_long(f"Tag {self.tag} value has {len(self.value)} characters, limit is {MAX_VALUE_LENGTH}")

    def serialize(self) -> str:
        length = f"{len(self.value):02d}"
        return f"{self.tag}{length}{self.value}"


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)
