import pytest

from landedcost.costing.category_detector import (
    determine_category_key,
    determine_category_key_for,
    extract_chapter,
    extract_hs2,
)
from landedcost.costing.models import (
    HsCodeCandidateModel,
    MarketEstimateModel,
    ProductClassificationModel,
)
from landedcost.costing.priors import DEFAULT_CATEGORY_KEY, CategoryKey


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Toys", CategoryKey.TOY),
        ("Home & Kitchen", CategoryKey.HOME_KITCHEN),
        ("food_beverage", CategoryKey.FOOD),
        ("Consumer Electronics", CategoryKey.ELECTRONICS),
        ("Jewelry", CategoryKey.JEWELRY_ACCESSORIES),
    ],
)
def test_category_name_aliases(category, expected):
    assert determine_category_key(category=category) is expected


def test_category_name_beats_keywords():
    assert determine_category_key(category="Furniture", keywords=["usb", "cable"]) is CategoryKey.FURNITURE


def test_keywords_used_when_category_unrecognized():
    key = determine_category_key(category="Widgets", keywords=["USB", "cable", "charger"])
    assert key is CategoryKey.ELECTRONICS


def test_toy_and_food_keywords_resolve_to_hybrid():
    assert determine_category_key(keywords=["gummy", "plush"]) is CategoryKey.HYBRID


def test_hs_chapter_used_when_no_name_or_keywords():
    assert determine_category_key(hs_code="8517.12.00") is CategoryKey.ELECTRONICS
    assert determine_category_key(hs_code="6109.10") is CategoryKey.APPAREL


def test_product_name_is_last_signal():
    assert determine_category_key(product_name="Stainless steel hinge set") is CategoryKey.HARDWARE


def test_no_signal_falls_back_to_default():
    assert determine_category_key() is DEFAULT_CATEGORY_KEY
    assert determine_category_key(category="??", keywords=["zzz"], hs_code="x") is DEFAULT_CATEGORY_KEY


def test_determine_category_key_for_reads_classification():
    classification = ProductClassificationModel(category="", keywords=["lipstick"], product_name="Matte lip")
    assert determine_category_key_for(classification) is CategoryKey.BEAUTY


@pytest.mark.parametrize(
    "hs_code, chapter",
    [("9503.00.00", "95"), ("61", "61"), ("  3304-99 ", "33"), ("9", None), ("", None), (None, None)],
)
def test_extract_chapter(hs_code, chapter):
    assert extract_chapter(hs_code) == chapter


def test_extract_hs2_prefers_classification_code():
    classification = ProductClassificationModel(hs_code="9503.00")
    market = MarketEstimateModel(hs_code_candidates=[HsCodeCandidateModel(code="6109.10")])

    assert extract_hs2(classification, market) == "95"


def test_extract_hs2_falls_back_to_top_market_candidate():
    classification = ProductClassificationModel(hs_code="9")
    market = MarketEstimateModel(
        hs_code_candidates=[HsCodeCandidateModel(code="6109.10"), HsCodeCandidateModel(code="9503")]
    )

    assert extract_hs2(classification, market) == "61"


def test_extract_hs2_absent():
    assert extract_hs2(ProductClassificationModel()) is None
    assert extract_hs2(ProductClassificationModel(), MarketEstimateModel()) is None
