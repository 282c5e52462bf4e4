"""Turn inferred inputs into the two cost scenarios used for reporting.

``standard`` prices the unit at the bottom of the factory quote with p50
freight, duty and fees. ``conservative`` takes the top of the quote with p90
everything. Landed cost per unit is ``price * (1 + duty) + shipping + fees``.
"""

from __future__ import annotations

import logging
from typing import Optional

from landedcost.costing.inferred import InferredInput, InferredInputs
from landedcost.costing.models import CostRangeModel, MoneyRangeModel, ScenarioCostModel
from landedcost.costing.ranges import RangeTriple

logger = logging.getLogger(__name__)


def normalize_money_range(value: MoneyRangeModel, label: Optional[str] = None) -> MoneyRangeModel:
    """Return ``value`` with ``min <= mid <= max`` enforced.

    Swaps inverted bounds and clamps ``mid`` into ``[min, max]``; logs a
    warning whenever a repair was needed.
    """

    low, mid, high = value.min, value.mid, value.max
    if low > high:
        low, high = high, low
    mid = min(max(mid, low), high)

    normalized = MoneyRangeModel(min=low, mid=mid, max=high)
    if normalized != value:
        logger.warning(
            "Normalized cost range%s: %s -> %s",
            f" ({label})" if label else "",
            value.model_dump(),
            normalized.model_dump(),
        )
    return normalized


def _percentiles(item: InferredInput[float]) -> RangeTriple:
    return item.range or RangeTriple.pinned(item.value)


def _scenario(unit_price: float, shipping: float, duty_rate: float, fees: float) -> ScenarioCostModel:
    return ScenarioCostModel(
        unit_price=round(unit_price, 4),
        shipping_per_unit=round(shipping, 4),
        duty_per_unit=round(unit_price * duty_rate, 4),
        fee_per_unit=round(fees, 4),
    )


def build_cost_scenarios(inputs: InferredInputs, factory_price: MoneyRangeModel) -> CostRangeModel:
    price = normalize_money_range(factory_price, "factory_price")
    shipping = _percentiles(inputs.shipping_per_unit)
    duty = _percentiles(inputs.duty_rate)
    fees = _percentiles(inputs.fees_per_unit)

    return CostRangeModel(
        standard=_scenario(price.min, shipping.p50, duty.p50, fees.p50),
        conservative=_scenario(price.max, shipping.p90, duty.p90, fees.p90),
    )
