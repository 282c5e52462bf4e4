"""Parse human-entered net weight strings from product labels."""

from __future__ import annotations

import re
from typing import Dict, Optional

_WEIGHT_RE = re.compile(
    r"(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d*\.\d+|\d+(?:,\d+)?)\s*"
    r"(kilograms?|kgs?|grams?|gms?|grs?|g|ounces?|oz|pounds?|lbs?)\b",
    re.IGNORECASE,
)
_THOUSANDS_RE = re.compile(r"\d{1,3}(?:,\d{3})+(?:\.\d+)?")

GRAMS_PER_UNIT: Dict[str, float] = {
    "g": 1.0,
    "kg": 1000.0,
    "oz": 28.35,
    "lb": 453.59,
}

_UNIT_ALIASES: Dict[str, str] = {
    "g": "g",
    "gram": "g",
    "grams": "g",
    "gm": "g",
    "gms": "g",
    "gr": "g",
    "grs": "g",
    "kg": "kg",
    "kgs": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
}


def parse_weight_grams(net_weight: str | None) -> Optional[float]:
    """Return the first weight found in ``net_weight`` converted to grams.

    Recognises ``g`` (``gm``, ``gr``), ``kg``, ``oz`` and ``lb`` (``lbs``), e.g. ``"150g"``,
    ``"0.15 kg"`` or ``"NET WT 5.3 oz (150 g)"``. Returns ``None`` when no
    usable weight is present, including zero weights, so callers can move on
    to the next source instead of treating the product as weightless.
    """

    if not net_weight:
        return None
    match = _WEIGHT_RE.search(net_weight)
    if match is None:
        return None

    amount_text = match.group(1)
    if _THOUSANDS_RE.fullmatch(amount_text):
        amount_text = amount_text.replace(",", "")
    amount = float(amount_text.replace(",", "."))
    unit = _UNIT_ALIASES[match.group(2).lower()]
    grams = amount * GRAMS_PER_UNIT[unit]
    if grams <= 0:
        return None
    return round(grams, 4)
