"""Chargeable weight and per-unit freight estimates."""

from __future__ import annotations

from landedcost.costing.inferred import InferredInput, ShippingMode
from landedcost.costing.priors import CategoryPrior
from landedcost.costing.ranges import RangeTriple, combine_max

# 5,000 cm3/kg dimensional divisor, i.e. 1 m3 bills as 200 kg.
VOLUMETRIC_KG_PER_M3 = 200.0

WEIGHT_SENSITIVITY = 0.4
VOLUME_SENSITIVITY = 0.3
MAX_ADJUSTMENT = 0.5
FREIGHT_CONFIDENCE_CAP = 65


def _range_or_value(item: InferredInput[float]) -> RangeTriple:
    return item.range or RangeTriple.pinned(item.value)


def compute_billable_weight_kg(
    unit_weight_g: InferredInput[float],
    unit_volume_m3: InferredInput[float],
) -> InferredInput[float]:
    """Chargeable weight is the larger of physical and volumetric weight.

    The result is never more confident than its weakest input. Its range
    applies the same rule to each percentile of the inputs.
    """

    physical = _range_or_value(unit_weight_g).map(lambda grams: grams / 1000.0)
    volumetric = _range_or_value(unit_volume_m3).map(lambda m3: m3 * VOLUMETRIC_KG_PER_M3)

    physical_kg = unit_weight_g.value / 1000.0
    volumetric_kg = unit_volume_m3.value * VOLUMETRIC_KG_PER_M3
    dominant = unit_weight_g if physical_kg >= volumetric_kg else unit_volume_m3

    return InferredInput(
        value=max(physical_kg, volumetric_kg),
        source=dominant.source,
        confidence=min(unit_weight_g.confidence, unit_volume_m3.confidence),
        explanation=(
            "Billable weight from physical weight"
            if dominant is unit_weight_g
            else "Billable weight from volumetric weight (5,000 cm3/kg)"
        ),
        provenance=dominant.provenance,
        range=combine_max(physical, volumetric),
    )


def adjusted_shipping_cost(prior: CategoryPrior, mode: ShippingMode, weight_g: float, volume_m3: float) -> float:
    """Category base freight scaled by how far the unit deviates from the category's typical unit."""

    weight_adjustment = (weight_g / prior.weight_g - 1) * WEIGHT_SENSITIVITY
    volume_adjustment = (volume_m3 / prior.volume_m3 - 1) * VOLUME_SENSITIVITY
    adjustment = max(-MAX_ADJUSTMENT, min(MAX_ADJUSTMENT, weight_adjustment + volume_adjustment))
    return round(prior.base_shipping(mode) * (1 + adjustment), 2)


def infer_shipping_per_unit(
    *,
    shipping_mode: InferredInput[ShippingMode],
    unit_weight_g: InferredInput[float],
    unit_volume_m3: InferredInput[float],
    billable_weight_kg: InferredInput[float],
    prior: CategoryPrior,
) -> InferredInput[float]:
    mode = shipping_mode.value
    weight_range = _range_or_value(unit_weight_g)
    volume_range = _range_or_value(unit_volume_m3)

    value = adjusted_shipping_cost(prior, mode, unit_weight_g.value, unit_volume_m3.value)
    low = adjusted_shipping_cost(prior, mode, weight_range.p10, volume_range.p10)
    high = adjusted_shipping_cost(prior, mode, weight_range.p90, volume_range.p90)
    # Floors on the input ranges can push a bound past the point estimate.
    freight_range = RangeTriple(p10=min(low, value), p50=value, p90=max(high, value))

    return InferredInput(
        value=value,
        source="user" if shipping_mode.source == "user" else "from_category",
        # Base rates are category averages, so freight stays at medium confidence at best.
        confidence=min(shipping_mode.confidence, billable_weight_kg.confidence, FREIGHT_CONFIDENCE_CAP),
        explanation=(
            "Air freight estimate based on weight and volume"
            if mode == "air"
            else "Ocean freight estimate (FCL/LCL blended)"
        ),
        provenance=shipping_mode.provenance,
        range=freight_range,
    )
