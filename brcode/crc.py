"""CRC16/CCITT-FALSE implementation."""
from __future__ import annotations

from .errors import err_non_ascii

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: str) -> str:
    """Compute CRC16/CCITT-FALSE (0x1021, init 0xFFFF) for BR Code payload strings."""

    try:
        raw = data.encode("ascii")
    except UnicodeEncodeError as exc:
        raise err_non_ascii(f"Cannot checksum non-ASCII character {data[exc.start]!r} at position {exc.start}") from exc

    checksum = CRC16_INIT
    for ch in raw:
        checksum ^= ch << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return f"{checksum:04X}"
