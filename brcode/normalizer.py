"""Text normalization for merchant name, city and txid fields."""
from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_DISALLOWED = re.compile("[^A-Z0-9 ]")


def normalize_text(text: str | None) -> str:
    """Strip diacritics, uppercase and keep only ``[A-Z0-9 ]``.

    No truncation happens here; callers cut to the field limit themselves.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    without_marks = _COMBINING_MARKS.sub("", decomposed)
    return _DISALLOWED.sub("", without_marks.upper())
