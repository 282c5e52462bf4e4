from __future__ import annotations

from typing import Sequence

from landedcost.costing.models import MoneyRangeModel


def two_point_range(first: float, second: float) -> MoneyRangeModel:
    """min/mid/max over exactly two scenario values; ``mid`` is their mean."""

    return MoneyRangeModel(min=min(first, second), mid=(first + second) / 2, max=max(first, second))


def scale_range(value: MoneyRangeModel, factor: float) -> MoneyRangeModel:
    return MoneyRangeModel(min=value.min * factor, mid=value.mid * factor, max=value.max * factor)


def profit_per_unit(shelf_price: float, landed: MoneyRangeModel) -> MoneyRangeModel:
    # The highest landed cost gives the lowest profit.
    return MoneyRangeModel(
        min=shelf_price - landed.max,
        mid=shelf_price - landed.mid,
        max=shelf_price - landed.min,
    )


def total_profit(per_unit: MoneyRangeModel, quantity: int) -> MoneyRangeModel:
    return scale_range(per_unit, quantity)


def gross_margin_percent(per_unit: MoneyRangeModel, shelf_price: float) -> MoneyRangeModel:
    return scale_range(per_unit, 100.0 / shelf_price)


def cash_out(landed: MoneyRangeModel, quantity: int) -> MoneyRangeModel:
    """Up-front spend for ``quantity`` units."""

    return scale_range(landed, quantity)


def required_shelf_price(landed: MoneyRangeModel, margin_percent: float) -> MoneyRangeModel:
    """Shelf price that leaves ``margin_percent`` of the price as margin."""

    return scale_range(landed, 1.0 / (1.0 - margin_percent / 100.0))


def required_shelf_prices(landed: MoneyRangeModel, margins: Sequence[int]) -> list[tuple[int, MoneyRangeModel]]:
    return [(margin, required_shelf_price(landed, margin)) for margin in margins]
