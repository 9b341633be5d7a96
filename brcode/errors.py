"""Shared error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BRCodeError(Exception):
    code: str
    message: str

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_invalid_request(message: str | None = None) -> BRCodeError:
    return BRCodeError(code="ERR_INVALID_REQUEST", message=message or "Invalid payment request")


def err_field_too_long(message: str | None = None) -> BRCodeError:
    return BRCodeError(code="ERR_FIELD_TOO_LONG", message=message or "Field value exceeds 99 characters")


def err_non_ascii(message: str | None = None) -> BRCodeError:
    return BRCodeError(code="ERR_NON_ASCII", message=message or "Payload contains non-ASCII characters")
