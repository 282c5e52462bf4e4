"""Landed-cost inference domain package.

Evidence-ranked resolution of cost-model inputs plus the decision-support
view built on top of a finished cost estimate.
"""
from .category_detector import determine_category_key, extract_hs2
from .decision_support import build_decision_support
from .inference import infer_cost_inputs
from .inferred import InferredInput, InferredInputs
from .priors import CATEGORY_PRIORS, HS2_DUTY_RATES, CategoryKey
from .ranges import RangeTriple, build_range
from .scenarios import build_cost_scenarios

__all__ = [
    "CATEGORY_PRIORS",
    "HS2_DUTY_RATES",
    "CategoryKey",
    "InferredInput",
    "InferredInputs",
    "RangeTriple",
    "build_cost_scenarios",
    "build_decision_support",
    "build_range",
    "determine_category_key",
    "extract_hs2",
    "infer_cost_inputs",
]
