"""Canned HS candidates for reports that arrive without classification data."""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from landedcost.costing.models import HsCandidateModel

_SNIPPET = "Category-based fallback"

# category -> [(code, confidence 0-1, rationale)]
FALLBACK_HS_CANDIDATES: Mapping[str, Tuple[Tuple[str, float, str], ...]] = MappingProxyType(
    {
        "candy": (
            ("1704", 0.4, "Sugar confectionery - common fallback for candy"),
            ("2106", 0.3, "Prepared foods - alternative for candy products"),
        ),
        "beverage": (
            ("2202", 0.45, "Mineral water, aerated water, flavored - common beverage"),
            ("2009", 0.35, "Fruit juices and vegetable juices - alternative"),
        ),
        "electronics": (
            ("8471", 0.5, "Automatic data processing machines - common electronics"),
            ("8517", 0.4, "Electrical apparatus for telecommunications"),
        ),
        "apparel": (
            ("6204", 0.5, "Women's clothing articles - common apparel code"),
            ("6203", 0.45, "Men's clothing articles - alternative apparel"),
        ),
        "toy": (
            ("9503", 0.45, "Toys, puzzles and scale models - common toy code"),
        ),
        "food": (
            ("2106", 0.35, "Food preparations not elsewhere specified"),
            ("1905", 0.3, "Bakery and biscuit products - alternative"),
        ),
        "hybrid": (
            ("1704", 0.35, "Sugar confectionery - candy-first classification"),
            ("9503", 0.3, "Toys - toy-first classification with incidental candy"),
        ),
    }
)

UNKNOWN_CATEGORY_CANDIDATE = ("9999", 0.2, "Unknown category - recommend product classification")


def generate_fallback_hs_candidates(category: str | None) -> List[HsCandidateModel]:
    """Low-confidence placeholder candidates for ``category``; confidence is on a 0-100 scale."""

    entries = FALLBACK_HS_CANDIDATES.get((category or "").strip().lower(), (UNKNOWN_CATEGORY_CANDIDATE,))
    return [
        HsCandidateModel(
            code=code,
            confidence=round(confidence * 100, 2),
            rationale=rationale,
            evidence_snippet=_SNIPPET,
            source="FALLBACK",
        )
        for code, confidence, rationale in entries
    ]
