"""Static cost priors keyed by category and by HS chapter.

Both tables are process-wide constants. They are wrapped in
``MappingProxyType`` so callers can share them freely without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class CategoryKey(str, Enum):
    """Closed set of product categories with their own cost priors."""

    TOY = "toy"
    FOOD = "food"
    HYBRID = "hybrid"
    ELECTRONICS = "electronics"
    APPAREL = "apparel"
    BEAUTY = "beauty"
    HOME_KITCHEN = "home_kitchen"
    FURNITURE = "furniture"
    HARDWARE = "hardware"
    CHEMICAL = "chemical"
    PACKAGING = "packaging"
    INDUSTRIAL_PARTS = "industrial_parts"
    JEWELRY_ACCESSORIES = "jewelry_accessories"
    STATIONERY_OFFICE = "stationery_office"
    PET = "pet"


DEFAULT_CATEGORY_KEY = CategoryKey.HOME_KITCHEN


@dataclass(frozen=True)
class CategoryPrior:
    """Typical physical and cost figures for one unit in a category (USD)."""

    weight_g: float
    volume_m3: float
    carton_pack: int
    duty_rate: float
    fees_per_unit: float
    base_shipping_air: float
    base_shipping_ocean: float

    def base_shipping(self, mode: str) -> float:
        return self.base_shipping_air if mode == "air" else self.base_shipping_ocean


@dataclass(frozen=True)
class HS2DutyEntry:
    rate: float
    description: str


CATEGORY_PRIORS: Mapping[CategoryKey, CategoryPrior] = MappingProxyType(
    {
        # 20cm cube, most toys enter duty-free
        CategoryKey.TOY: CategoryPrior(150, 0.0008, 24, 0.00, 0.25, 0.45, 0.12),
        CategoryKey.FOOD: CategoryPrior(200, 0.0006, 12, 0.05, 0.35, 0.60, 0.15),
        CategoryKey.HYBRID: CategoryPrior(180, 0.0007, 18, 0.03, 0.30, 0.52, 0.13),
        CategoryKey.ELECTRONICS: CategoryPrior(300, 0.001, 6, 0.025, 0.45, 0.90, 0.20),
        CategoryKey.APPAREL: CategoryPrior(250, 0.0012, 12, 0.165, 0.30, 0.50, 0.10),
        CategoryKey.BEAUTY: CategoryPrior(120, 0.0004, 24, 0.065, 0.40, 0.38, 0.08),
        CategoryKey.HOME_KITCHEN: CategoryPrior(400, 0.0015, 12, 0.08, 0.35, 0.80, 0.18),
        CategoryKey.FURNITURE: CategoryPrior(5000, 0.05, 1, 0.00, 1.20, 8.50, 2.00),
        CategoryKey.HARDWARE: CategoryPrior(350, 0.001, 12, 0.05, 0.40, 0.75, 0.16),
        CategoryKey.CHEMICAL: CategoryPrior(500, 0.001, 12, 0.06, 0.50, 1.20, 0.25),
        CategoryKey.PACKAGING: CategoryPrior(100, 0.001, 100, 0.03, 0.10, 0.30, 0.06),
        CategoryKey.INDUSTRIAL_PARTS: CategoryPrior(800, 0.002, 6, 0.045, 0.60, 1.50, 0.30),
        CategoryKey.JEWELRY_ACCESSORIES: CategoryPrior(50, 0.0002, 36, 0.115, 0.35, 0.20, 0.04),
        CategoryKey.STATIONERY_OFFICE: CategoryPrior(100, 0.0005, 24, 0.04, 0.20, 0.30, 0.06),
        CategoryKey.PET: CategoryPrior(300, 0.001, 12, 0.05, 0.35, 0.70, 0.15),
    }
)

HS2_DUTY_RATES: Mapping[str, HS2DutyEntry] = MappingProxyType(
    {
        "17": HS2DutyEntry(0.05, "Sugars and sugar confectionery"),
        "18": HS2DutyEntry(0.04, "Cocoa and cocoa preparations"),
        "19": HS2DutyEntry(0.055, "Cereal, flour, starch, milk preparations"),
        "20": HS2DutyEntry(0.08, "Vegetable, fruit, nut preparations"),
        "21": HS2DutyEntry(0.06, "Miscellaneous edible preparations"),
        "33": HS2DutyEntry(0.065, "Essential oils and perfumery"),
        "39": HS2DutyEntry(0.065, "Plastics and articles thereof"),
        "42": HS2DutyEntry(0.10, "Leather articles"),
        "61": HS2DutyEntry(0.165, "Knitted apparel"),
        "62": HS2DutyEntry(0.165, "Woven apparel"),
        "63": HS2DutyEntry(0.115, "Made-up textile articles"),
        "64": HS2DutyEntry(0.125, "Footwear"),
        "73": HS2DutyEntry(0.05, "Iron or steel articles"),
        "84": HS2DutyEntry(0.025, "Machinery"),
        "85": HS2DutyEntry(0.025, "Electrical machinery"),
        "94": HS2DutyEntry(0.00, "Furniture"),
        "95": HS2DutyEntry(0.00, "Toys and sports equipment"),
    }
)


def get_category_prior(key: CategoryKey | str) -> CategoryPrior:
    """Return the prior for ``key``; unknown keys resolve to the default category."""

    try:
        return CATEGORY_PRIORS[CategoryKey(key)]
    except ValueError:
        return CATEGORY_PRIORS[DEFAULT_CATEGORY_KEY]


def lookup_hs2_duty(hs2: Optional[str]) -> Optional[HS2DutyEntry]:
    if not hs2:
        return None
    return HS2_DUTY_RATES.get(hs2)
