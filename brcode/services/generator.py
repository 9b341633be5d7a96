"""Payload generation service."""
from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import ValidationError

from ..config import settings
from ..errors import BRCodeError, err_invalid_request
from ..pix_encoder import EncodedPayload, encode_payment, format_amount
from ..schemas import PaymentRequest

logger = logging.getLogger("brcode.generator")


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "request"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def generate_payload(
    *,
    key: str,
    merchant_name: str,
    merchant_city: str,
    amount: Decimal | float | int | str | None = None,
    txid: str | None = None,
) -> EncodedPayload:
    """Validate a static PIX charge and encode it as a sealed BR Code payload.

    Raises:
        BRCodeError: ``ERR_INVALID_REQUEST`` for missing payee data,
            ``ERR_FIELD_TOO_LONG`` when a field cannot be length-prefixed and
            ``ERR_NON_ASCII`` when the key carries non-ASCII text.
    """

    try:
        request = PaymentRequest(
            key=key,
            merchant_name=merchant_name,
            merchant_city=merchant_city,
            amount=amount,
            txid=txid,
        )
    except ValidationError as exc:
        error = err_invalid_request(_describe(exc))
        logger.warning("payment request rejected", extra={"code": error.code})
        raise error from exc

    try:
        encoded = encode_payment(request)
    except BRCodeError as exc:
        logger.warning("payment request rejected", extra={"code": exc.code})
        raise

    logger.info(
        "brcode payload generated",
        extra={
            "crc": encoded.crc,
            "payload_length": len(encoded.payload),
            "has_amount": format_amount(request.amount) is not None,
        },
    )
    if settings.log_payloads:
        logger.debug("brcode payload", extra={"payload": encoded.payload})
    return encoded
