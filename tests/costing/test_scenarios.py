import logging

import pytest

from landedcost.costing.inference import infer_cost_inputs
from landedcost.costing.models import MoneyRangeModel, ProductClassificationModel
from landedcost.costing.scenarios import build_cost_scenarios, normalize_money_range


@pytest.fixture
def toy_inputs():
    return infer_cost_inputs(ProductClassificationModel(category="Toys", hs_code="9503.00"))


def test_standard_and_conservative_scenarios(toy_inputs):
    cost_range = build_cost_scenarios(toy_inputs, MoneyRangeModel(min=1.0, mid=1.5, max=2.0))

    standard = cost_range.standard
    assert standard.unit_price == 1.0
    assert standard.shipping_per_unit == pytest.approx(0.12)
    assert standard.duty_per_unit == 0.0
    assert standard.fee_per_unit == pytest.approx(0.25)
    assert standard.landed_per_unit == pytest.approx(1.37)

    conservative = cost_range.conservative
    assert conservative.unit_price == 2.0
    assert conservative.shipping_per_unit == pytest.approx(0.14)
    assert conservative.fee_per_unit == pytest.approx(0.295)
    assert conservative.landed_per_unit == pytest.approx(2.435)
    assert conservative.landed_per_unit >= standard.landed_per_unit


def test_duty_scales_with_unit_price():
    inputs = infer_cost_inputs(ProductClassificationModel(category="Apparel", hs_code="6109.10"))

    cost_range = build_cost_scenarios(inputs, MoneyRangeModel(min=1.0, mid=1.5, max=2.0))

    assert cost_range.standard.duty_per_unit == pytest.approx(0.165)
    assert cost_range.conservative.duty_per_unit == pytest.approx(0.3564)


def test_inverted_factory_price_is_repaired(toy_inputs, caplog):
    with caplog.at_level(logging.WARNING):
        cost_range = build_cost_scenarios(toy_inputs, MoneyRangeModel(min=2.0, mid=1.5, max=1.0))

    assert cost_range.conservative.unit_price == 2.0
    assert cost_range.standard.unit_price == 1.0
    assert "Normalized cost range" in caplog.text


def test_normalize_money_range_clamps_mid():
    result = normalize_money_range(MoneyRangeModel(min=5.0, mid=9.0, max=3.0))

    assert result == MoneyRangeModel(min=3.0, mid=5.0, max=5.0)


def test_normalize_money_range_keeps_ordered_values(caplog):
    value = MoneyRangeModel(min=1.0, mid=2.0, max=3.0)

    with caplog.at_level(logging.WARNING):
        assert normalize_money_range(value) == value
    assert caplog.text == ""
