"""PIX BR Code payload encoder (static, merchant-presented mode)."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Iterable

from .crc import crc16_ccitt
from .errors import err_field_too_long
from .normalizer import normalize_text
from .schemas import PaymentRequest
from .tlv import MAX_VALUE_LENGTH, TLVItem, build_tlv

PIX_GUI = "br.gov.bcb.pix"
PAYLOAD_FORMAT_INDICATOR = "01"
MERCHANT_CATEGORY_CODE = "0000"
CURRENCY_BRL = "986"
COUNTRY_CODE = "BR"
TXID_PLACEHOLDER = "***"
CRC_FIELD_PREFIX = "6304"

MERCHANT_NAME_MAX = 25
MERCHANT_CITY_MAX = 15
TXID_MAX = 25

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class MerchantAccountInfo:
    key: str

    def to_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag="00", value=PIX_GUI)
        yield TLVItem(tag="01", value=self.key)


@dataclass(frozen=True)
class AdditionalData:
    txid: str

    def to_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag="05", value=self.txid)


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def format_amount(amount: Decimal | None) -> str | None:
    """Render amount with two decimals (round half to even), or None when not positive."""

    if amount is None:
        return None
    if amount.adjusted() >= MAX_VALUE_LENGTH:
        raise err_field_too_long(f"Amount {amount} cannot be rendered in a tagged field")
    # integer digits, two decimals and a possible rounding carry
    with localcontext() as ctx:
        ctx.prec = max(amount.adjusted(), 0) + 4
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_EVEN)
    if rounded <= 0:
        return None
    return f"{rounded:f}"


def resolve_txid(txid: str | None) -> str:
    """Truncate raw txid, normalize it and drop spaces; fall back to ``***``.

    Uppercasing can expand characters (``ß`` becomes ``SS``), so the result is
    cut to the limit again.
    """

    if not txid:
        return TXID_PLACEHOLDER
    final = normalize_text(txid[:TXID_MAX]).replace(" ", "")[:TXID_MAX]
    return final or TXID_PLACEHOLDER


def build_items(request: PaymentRequest) -> list[TLVItem]:
    """Top-level fields in emission order, without the CRC field."""

    items = [
        TLVItem(tag="00", value=PAYLOAD_FORMAT_INDICATOR),
        TLVItem(tag="26", value=build_tlv(MerchantAccountInfo(key=request.key).to_subitems())),
        TLVItem(tag="52", value=MERCHANT_CATEGORY_CODE),
        TLVItem(tag="53", value=CURRENCY_BRL),
    ]
    amount = format_amount(request.amount)
    if amount is not None:
        items.append(TLVItem(tag="54", value=amount))
    items.extend(
        [
            TLVItem(tag="58", value=COUNTRY_CODE),
            TLVItem(tag="59", value=normalize_text(request.merchant_name)[:MERCHANT_NAME_MAX]),
            TLVItem(tag="60", value=normalize_text(request.merchant_city)[:MERCHANT_CITY_MAX]),
            TLVItem(tag="62", value=build_tlv(AdditionalData(txid=resolve_txid(request.txid)).to_subitems())),
        ]
    )
    return items


def seal(payload_no_crc: str) -> EncodedPayload:
    """Append Tag 63 and its CRC16, computed over the payload including ``6304``."""

    crc_input = f"{payload_no_crc}{CRC_FIELD_PREFIX}"
    crc = crc16_ccitt(crc_input)
    return EncodedPayload(payload=f"{crc_input}{crc}", crc=crc)


def encode_payment(request: PaymentRequest) -> EncodedPayload:
    return seal(build_tlv(build_items(request)))
