import pytest

from landedcost.costing.weight_text import parse_weight_grams


@pytest.mark.parametrize(
    "text, grams",
    [
        ("150g", 150.0),
        ("200 g", 200.0),
        ("0.15kg", 150.0),
        ("1.2 KG", 1200.0),
        ("5.3 oz", 150.255),
        ("1 lb", 453.59),
        ("2 lbs", 907.18),
        ("15 grams", 15.0),
        ("NET WT 12 OZ (340g)", 340.2),
        ("1,000 g", 1000.0),
        ("1,5 kg", 1500.0),
        ("150gm", 150.0),
        ("150 gms", 150.0),
        ("150gr", 150.0),
        ("NET WT 100GM", 100.0),
        (".5 kg", 500.0),
        ("Net .25 lb", 113.3975),
    ],
)
def test_parse_weight_grams_normalizes_units(text, grams):
    assert parse_weight_grams(text) == pytest.approx(grams)


@pytest.mark.parametrize("text", [None, "", "n/a", "about a handful", "0g", "12 pieces"])
def test_parse_weight_grams_returns_none_for_unusable_text(text):
    assert parse_weight_grams(text) is None
