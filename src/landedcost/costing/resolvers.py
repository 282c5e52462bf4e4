"""Per-field resolvers for the cost model.

Each resolver walks an ordered list of evidence tiers and returns the result
of the first tier that produces a usable value:

1. user override (confidence 100)
2. extracted evidence such as label text (80-90)
3. customs / HS chapter data (~80)
4. category prior (50-70)
5. hard assumption (<= 70)

A tier returns ``None`` when its evidence is missing or unusable, which
passes control to the next tier. Nothing here raises on bad evidence.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from landedcost.costing.inferred import InferredInput, ShippingMode
from landedcost.costing.priors import CategoryPrior, HS2DutyEntry
from landedcost.costing.ranges import USER_CONFIDENCE, RangeTriple, build_range
from landedcost.costing.weight_text import parse_weight_grams

logger = logging.getLogger(__name__)

T = TypeVar("T")
Tier = Tuple[str, Callable[[], Optional[InferredInput[T]]]]

VOLUME_FLOOR_M3 = 0.0001
DEFAULT_SHIPPING_MODE: ShippingMode = "ocean"
DEFAULT_CARTON_PACK = 1


def first_resolved(field_name: str, tiers: Sequence[Tier]) -> InferredInput:
    """Return the first non-empty tier result for ``field_name``."""

    for tier_name, tier in tiers:
        result = tier()
        if result is not None:
            logger.debug(
                "%s resolved by %s tier (source=%s, confidence=%s)",
                field_name, tier_name, result.source, result.confidence,
            )
            return result
    raise LookupError(f"No tier produced a value for {field_name}")


def _positive(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def _non_negative(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _user_tier(value: Optional[float], explanation: str, floor: float = 0.0) -> Optional[InferredInput[float]]:
    if value is None:
        return None
    return InferredInput(
        value=value,
        source="user",
        confidence=USER_CONFIDENCE,
        explanation=explanation,
        provenance="user",
        range=build_range(value, USER_CONFIDENCE, floor),
    )


def _category_tier(value: float, confidence: float, explanation: str, floor: float = 0.0) -> InferredInput[float]:
    return InferredInput(
        value=value,
        source="from_category",
        confidence=confidence,
        explanation=explanation,
        provenance="category_default",
        range=build_range(value, confidence, floor),
    )


def resolve_shipping_mode(user_mode: Optional[str] = None) -> InferredInput[ShippingMode]:
    def user() -> Optional[InferredInput[ShippingMode]]:
        if user_mode not in ("air", "ocean"):
            return None
        return InferredInput(
            value=user_mode,
            source="user",
            confidence=USER_CONFIDENCE,
            explanation="User specified shipping mode",
            provenance="user",
        )

    def assumed() -> InferredInput[ShippingMode]:
        return InferredInput(
            value=DEFAULT_SHIPPING_MODE,
            source="assumed",
            confidence=70,
            explanation="Assumed ocean shipping (most common for imports)",
            provenance="category_default",
        )

    return first_resolved("shipping_mode", [("user", user), ("assumption", assumed)])


def resolve_unit_weight(
    prior: CategoryPrior,
    *,
    net_weight: Optional[str] = None,
    user_weight_g: Optional[float] = None,
) -> InferredInput[float]:
    def label() -> Optional[InferredInput[float]]:
        grams = parse_weight_grams(net_weight)
        if grams is None:
            return None
        return InferredInput(
            value=grams,
            source="from_customs",
            confidence=85,
            explanation=f"Extracted from product label: {net_weight}",
            provenance="label_verified",
            range=build_range(grams, 85),
        )

    tiers: List[Tier] = [
        ("user", lambda: _user_tier(_positive(user_weight_g), "User specified weight")),
        ("label", label),
        ("category", lambda: _category_tier(prior.weight_g, 60, "Category average for similar products")),
    ]
    return first_resolved("unit_weight_g", tiers)


def resolve_unit_volume(prior: CategoryPrior, *, user_volume_m3: Optional[float] = None) -> InferredInput[float]:
    # Volume is rarely observable, so the category prior is deliberately low confidence.
    tiers: List[Tier] = [
        (
            "user",
            lambda: _user_tier(_positive(user_volume_m3), "User specified volume", VOLUME_FLOOR_M3),
        ),
        (
            "category",
            lambda: _category_tier(prior.volume_m3, 50, "Category average volume", VOLUME_FLOOR_M3),
        ),
    ]
    return first_resolved("unit_volume_m3", tiers)


def resolve_carton_pack(user_carton_pack: Optional[float] = None) -> InferredInput[int]:
    """Units per shipment are declared by the caller, never taken from category priors."""

    def user() -> Optional[InferredInput[int]]:
        value = _positive(user_carton_pack)
        if value is None:
            return None
        pack = int(value)
        if pack < 1:
            return None
        return InferredInput(
            value=pack,
            source="user",
            confidence=USER_CONFIDENCE,
            explanation="User specified units per shipment",
            provenance="user",
            range=build_range(pack, USER_CONFIDENCE),
        )

    def assumed() -> InferredInput[int]:
        return InferredInput(
            value=DEFAULT_CARTON_PACK,
            source="assumed",
            confidence=30,
            explanation="Assumed single-unit shipment until units per shipment are provided",
            provenance="category_default",
            range=RangeTriple.pinned(DEFAULT_CARTON_PACK),
        )

    return first_resolved("carton_pack", [("user", user), ("assumption", assumed)])


def resolve_duty_rate(
    prior: CategoryPrior,
    *,
    hs2_entry: Optional[HS2DutyEntry] = None,
    user_duty_rate: Optional[float] = None,
) -> InferredInput[float]:
    def hs_chapter() -> Optional[InferredInput[float]]:
        if hs2_entry is None:
            return None
        return InferredInput(
            value=hs2_entry.rate,
            source="from_hs_estimate",
            confidence=80,
            explanation=f"Based on HS chapter: {hs2_entry.description}",
            provenance="label_verified",
            range=build_range(hs2_entry.rate, 80),
        )

    tiers: List[Tier] = [
        ("user", lambda: _user_tier(_non_negative(user_duty_rate), "User specified duty rate")),
        ("hs_chapter", hs_chapter),
        ("category", lambda: _category_tier(prior.duty_rate, 65, "Average duty rate for category")),
    ]
    return first_resolved("duty_rate", tiers)


def resolve_fees_per_unit(prior: CategoryPrior) -> InferredInput[float]:
    # Fees are modelled as homogeneous within a category.
    return first_resolved(
        "fees_per_unit",
        [("category", lambda: _category_tier(prior.fees_per_unit, 70, "Typical customs and handling fees"))],
    )
