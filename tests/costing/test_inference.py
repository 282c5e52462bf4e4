import dataclasses

import pytest

from landedcost.costing.inference import infer_cost_inputs
from landedcost.costing.models import (
    HsCodeCandidateModel,
    LabelDataModel,
    MarketEstimateModel,
    ProductClassificationModel,
    UserOverridesModel,
)
from landedcost.costing.priors import CategoryKey
from landedcost.costing.resolvers import VOLUME_FLOOR_M3

RANGED_FIELDS = (
    "unit_weight_g",
    "unit_volume_m3",
    "carton_pack",
    "billable_weight_kg",
    "duty_rate",
    "fees_per_unit",
    "shipping_per_unit",
)


def test_toy_with_hs_code():
    classification = ProductClassificationModel(
        product_name="Mini figure blind box",
        category="Toys",
        hs_code="9503.00.00",
        keywords=["toy", "candy", "collectible"],
    )

    inputs = infer_cost_inputs(classification)

    assert inputs.category_key == "toy"
    assert inputs.hs2 == "95"
    assert inputs.unit_weight_g.value == 150
    assert inputs.unit_weight_g.source == "from_category"
    assert inputs.unit_weight_g.confidence == 60
    assert inputs.shipping_mode.value == "ocean"
    assert inputs.shipping_mode.source == "assumed"
    assert inputs.shipping_mode.confidence == 70
    assert inputs.duty_rate.value == 0.0
    assert inputs.duty_rate.source == "from_hs_estimate"
    assert inputs.billable_weight_kg.value == pytest.approx(0.16)
    assert inputs.shipping_per_unit.value == pytest.approx(0.12)
    assert inputs.carton_pack.value == 1


def test_label_weight_and_hs_chapter_duty():
    classification = ProductClassificationModel(
        category="Food",
        hs_code="1905.31.00",
        label_data=LabelDataModel(net_weight="200g"),
    )

    inputs = infer_cost_inputs(classification)

    assert inputs.unit_weight_g.value == 200
    assert inputs.unit_weight_g.source == "from_customs"
    assert inputs.unit_weight_g.confidence == 85
    assert inputs.duty_rate.value == 0.055


@pytest.mark.parametrize("net_weight", ["200gm", "200 GMS", "200gr", "0.2 kg"])
def test_label_weight_spellings_resolve_from_label(net_weight):
    classification = ProductClassificationModel(category="Toys", label_data=LabelDataModel(net_weight=net_weight))

    inputs = infer_cost_inputs(classification)

    assert inputs.unit_weight_g.value == pytest.approx(200)
    assert inputs.unit_weight_g.source == "from_customs"
    assert inputs.unit_weight_g.provenance == "label_verified"


def test_apparel_chapter_duty():
    inputs = infer_cost_inputs(ProductClassificationModel(category="Apparel", hs_code="6109.10.00"))

    assert inputs.duty_rate.value == 0.165
    assert inputs.duty_rate.source == "from_hs_estimate"
    assert inputs.duty_rate.confidence == 80


def test_market_estimate_supplies_hs_chapter():
    market = MarketEstimateModel(hs_code_candidates=[HsCodeCandidateModel(code="3304.99", confidence=0.7)])

    inputs = infer_cost_inputs(ProductClassificationModel(category="Beauty"), market)

    assert inputs.hs2 == "33"
    assert inputs.duty_rate.value == 0.065
    assert inputs.duty_rate.source == "from_hs_estimate"


def test_unknown_chapter_uses_category_duty():
    inputs = infer_cost_inputs(ProductClassificationModel(category="Toys", hs_code="9999.00"))

    assert inputs.hs2 == "99"
    assert inputs.duty_rate.source == "from_category"
    assert inputs.duty_rate.confidence == 65


@pytest.mark.parametrize(
    "overrides",
    [
        {"unit_weight_g": 500, "unit_volume_m3": 0.002, "carton_pack": 200, "duty_rate": 0.1, "shipping_mode": "air"},
        UserOverridesModel(unit_weight_g=500, unit_volume_m3=0.002, carton_pack=200, duty_rate=0.1, shipping_mode="air"),
    ],
)
def test_user_overrides_win(overrides):
    classification = ProductClassificationModel(category="Toys", label_data=LabelDataModel(net_weight="200g"))

    inputs = infer_cost_inputs(classification, user_inputs=overrides)

    for name in ("shipping_mode", "unit_weight_g", "unit_volume_m3", "carton_pack", "duty_rate"):
        field = getattr(inputs, name)
        assert field.source == "user"
        assert field.confidence == 100
    assert inputs.unit_weight_g.value == 500
    assert inputs.carton_pack.value == 200
    assert inputs.billable_weight_kg.value == pytest.approx(0.5)
    assert inputs.billable_weight_kg.source == "user"
    assert inputs.shipping_per_unit.source == "user"
    assert inputs.shipping_per_unit.confidence == 65
    pinned = {
        "unit_weight_g": 500,
        "unit_volume_m3": 0.002,
        "carton_pack": 200,
        "duty_rate": 0.1,
    }
    for name, expected in pinned.items():
        field = getattr(inputs, name)
        assert field.provenance == "user", name
        assert (field.range.p10, field.range.p50, field.range.p90) == (expected, expected, expected), name


def test_result_is_immutable():
    inputs = infer_cost_inputs(ProductClassificationModel(category="Toys"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        inputs.category_key = "food"
    with pytest.raises(dataclasses.FrozenInstanceError):
        inputs.unit_weight_g.value = 1.0


@pytest.mark.parametrize("key", list(CategoryKey))
def test_every_category_yields_ordered_ranges(key):
    inputs = infer_cost_inputs(ProductClassificationModel(category=key.value))

    assert inputs.category_key == key.value
    for name in RANGED_FIELDS:
        field = getattr(inputs, name)
        assert field.range is not None, name
        assert 0 <= field.range.p10 <= field.range.p50 <= field.range.p90, name
        assert 0 <= field.confidence <= 100
    assert inputs.unit_volume_m3.range.p10 >= VOLUME_FLOOR_M3
    assert inputs.billable_weight_kg.value >= inputs.unit_weight_g.value / 1000.0
    assert inputs.billable_weight_kg.value >= inputs.unit_volume_m3.value * 200
    assert inputs.shipping_per_unit.confidence <= 65


def test_to_dict_is_plain_data():
    payload = infer_cost_inputs(ProductClassificationModel(category="Toys")).to_dict()

    assert payload["unit_weight_g"]["range"] == {"p10": 123.0, "p50": 150, "p90": 177.0}
    assert payload["shipping_mode"]["range"] is None


def test_billable_weight_never_drops_as_volume_grows():
    classification = ProductClassificationModel(category="Home & Kitchen")
    previous = None
    for volume_m3 in (0.0001, 0.001, 0.002, 0.01, 0.05):
        billable = infer_cost_inputs(classification, user_inputs={"unit_volume_m3": volume_m3}).billable_weight_kg
        if previous is not None:
            assert billable.value >= previous.value
            assert billable.range.p10 >= previous.range.p10
            assert billable.range.p90 >= previous.range.p90
        previous = billable
