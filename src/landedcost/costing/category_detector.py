from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from landedcost.costing.category_taxonomy import CATEGORIES
from landedcost.costing.priors import DEFAULT_CATEGORY_KEY, CategoryKey

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s&/,\-]+")


def extract_chapter(hs_code: str | None) -> Optional[str]:
    """Return the 2-digit chapter of ``hs_code`` or ``None`` when malformed."""

    digits = re.sub(r"\D", "", hs_code or "")
    if len(digits) < 2:
        return None
    return digits[:2]


def _normalize_name(value: str) -> str:
    cleaned = _SEPARATORS.sub("_", value.strip().lower())
    return cleaned.replace("_and_", "_").strip("_")


_ALIASES: Dict[str, CategoryKey] = {}
for _key, _entry in CATEGORIES.items():
    for _alias in [_key.value, *_entry["aliases"]]:
        _ALIASES.setdefault(_normalize_name(_alias), _key)

_CHAPTER_HINTS: Dict[str, CategoryKey] = {}
for _key, _entry in CATEGORIES.items():
    for _chapter in _entry["chapters"]:
        _CHAPTER_HINTS.setdefault(f"{_chapter:02d}", _key)


def _by_category_name(category: str | None) -> Optional[CategoryKey]:
    if not category:
        return None
    return _ALIASES.get(_normalize_name(category))


def _keyword_hits(tokens: Iterable[str]) -> Dict[CategoryKey, int]:
    normalized = {token.strip().lower() for token in tokens if token and token.strip()}
    return {
        key: len(normalized.intersection(entry["keywords"]))
        for key, entry in CATEGORIES.items()
    }


def _best_scored(hits: Dict[CategoryKey, int]) -> Optional[CategoryKey]:
    if hits.get(CategoryKey.TOY) and hits.get(CategoryKey.FOOD):
        return CategoryKey.HYBRID
    best: Optional[CategoryKey] = None
    best_score = 0
    for key, score in hits.items():
        if score > best_score:
            best, best_score = key, score
    return best


def _by_keywords(keywords: Sequence[str] | None) -> Optional[CategoryKey]:
    if not keywords:
        return None
    return _best_scored(_keyword_hits(keywords))


def _by_hs_chapter(hs_code: str | None) -> Optional[CategoryKey]:
    chapter = extract_chapter(hs_code)
    if chapter is None:
        return None
    return _CHAPTER_HINTS.get(chapter)


def _by_text(product_name: str | None) -> Optional[CategoryKey]:
    if not product_name:
        return None
    lowered = product_name.lower()
    hits: Dict[CategoryKey, int] = {}
    for key, entry in CATEGORIES.items():
        hits[key] = sum(
            1 for keyword in entry["keywords"] if re.search(rf"\b{re.escape(keyword)}s?\b", lowered)
        )
    return _best_scored(hits)


def determine_category_key(
    *,
    category: str | None = None,
    keywords: Sequence[str] | None = None,
    hs_code: str | None = None,
    product_name: str | None = None,
) -> CategoryKey:
    """Pick the category whose priors drive the estimate.

    Tiers are tried in order and the first one that produces a key wins:
    exact category name, keyword intersection, HS chapter hint, then
    keyword matches in the product name. Falls back to
    ``DEFAULT_CATEGORY_KEY`` when nothing matches.
    """

    tiers: List[tuple[str, Callable[[], Optional[CategoryKey]]]] = [
        ("category_name", lambda: _by_category_name(category)),
        ("keywords", lambda: _by_keywords(keywords)),
        ("hs_chapter", lambda: _by_hs_chapter(hs_code)),
        ("product_name", lambda: _by_text(product_name)),
    ]
    for tier_name, tier in tiers:
        key = tier()
        if key is not None:
            logger.debug("Category %s resolved via %s", key.value, tier_name)
            return key
    logger.debug("No category signal matched; using %s", DEFAULT_CATEGORY_KEY.value)
    return DEFAULT_CATEGORY_KEY


def determine_category_key_for(classification: Any) -> CategoryKey:
    """Convenience wrapper reading the signals off a classification object."""

    return determine_category_key(
        category=getattr(classification, "category", None),
        keywords=getattr(classification, "keywords", None),
        hs_code=getattr(classification, "hs_code", None),
        product_name=getattr(classification, "product_name", None),
    )


def extract_hs2(classification: Any, market_estimate: Any = None) -> Optional[str]:
    """Return the HS chapter from the classification code, else the top market candidate."""

    chapter = extract_chapter(getattr(classification, "hs_code", None))
    if chapter is not None:
        return chapter

    candidates = getattr(market_estimate, "hs_code_candidates", None) or []
    if candidates:
        return extract_chapter(getattr(candidates[0], "code", None))
    return None
