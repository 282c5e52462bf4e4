"""Decision support for a finished two-scenario cost estimate.

Everything here is derived from ``standard`` and ``conservative`` scenario
costs. Each per-unit figure is reported as min/mid/max over those two
points, where ``mid`` is their mean rather than a statistical median.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from landedcost.costing.hs_fallbacks import generate_fallback_hs_candidates
from landedcost.costing.models import (
    ActionPlanModel,
    ConfidenceTier,
    CostComponentsModel,
    CostSummaryModel,
    DecisionStatus,
    DecisionSupportModel,
    DecisionSupportRequestModel,
    DutyBandModel,
    HsCandidateModel,
    HsCodeCandidateModel,
    HsDecisionModel,
    HybridPathModel,
    MoneyRangeModel,
    ProfitModel,
    QuantityOptionModel,
    TargetMarginPriceModel,
)
from landedcost.costing.profit import (
    cash_out,
    gross_margin_percent,
    profit_per_unit,
    required_shelf_prices,
    total_profit,
    two_point_range,
)

logger = logging.getLogger(__name__)

PLANNER_QUANTITIES = (100, 300, 1000)
TARGET_MARGINS = (30, 40, 50)
DEFAULT_CANDIDATE_CONFIDENCE = 0.8

# Duty band heuristics in percent, widened when upstream already saw duty.
DUTY_FLOOR_WITH_SIGNAL = 8.0
DUTY_FLOOR_NO_SIGNAL = 5.0
DUTY_CEILING_WITH_SIGNAL = 25.0
DUTY_CEILING_NO_SIGNAL = 15.0

HYBRID_DECISION_RULE = (
    "If it ships or is marketed as candy-first, classify under the food HS code. "
    "If packaging and marketing emphasize the toy/collectible, use the toy HS code "
    "and keep candy separate."
)

NEXT_STEPS = (
    "Find verified suppliers with competitive quotes",
    "Verify HS code and estimate duty rates",
    "Calculate landed cost and profit margins",
    "Monitor import trends and pricing",
)

EXPECTED_TIMELINES = {
    "high": "2-3 business days to receive quotes",
    "medium": "3-5 business days for verification",
    "low": "5-7 business days for full analysis",
}

ALL_CONFIRMED = "All key data confirmed"


def _market_candidates(raw: List[HsCodeCandidateModel]) -> List[HsCandidateModel]:
    candidates = []
    for item in raw:
        confidence = item.confidence if item.confidence is not None else DEFAULT_CANDIDATE_CONFIDENCE
        rationale = item.rationale or "From market estimate"
        candidates.append(
            HsCandidateModel(
                code=item.code,
                confidence=round(confidence * 100, 2),
                rationale=rationale,
                evidence_snippet=item.description or item.rationale or "HS code candidate",
                source=item.source or "MARKET_ESTIMATE",
            )
        )
    return candidates


def resolve_candidates(request: DecisionSupportRequestModel) -> List[HsCandidateModel]:
    if request.hs_code_candidates:
        return _market_candidates(request.hs_code_candidates)
    return generate_fallback_hs_candidates(request.category or "product")


def _hybrid_paths(category: Optional[str], candidates: List[HsCandidateModel]) -> Optional[List[HybridPathModel]]:
    if (category or "").strip().lower() != "hybrid" or len(candidates) < 2:
        return None
    primary, secondary = candidates[0], candidates[1]
    return [
        HybridPathModel(
            code=primary.code,
            label="Candy / edible pathway",
            when="Use when ingredients or nutrition facts are present and product is primarily consumed.",
            confidence=primary.confidence,
        ),
        HybridPathModel(
            code=secondary.code,
            label="Toy / collectible pathway",
            when="Use when the item is primarily a toy/collectible and candy is incidental or absent.",
            confidence=secondary.confidence,
        ),
    ]


def confidence_tier_for(evidence_level: str) -> ConfidenceTier:
    if evidence_level in ("verified_quote", "exact_import"):
        return "high"
    if evidence_level == "similar_import":
        return "medium"
    return "low"


def evidence_summary_for(evidence_level: str, similar_records_count: int) -> str:
    if evidence_level == "verified_quote":
        return "Verified supplier quote on file"
    if evidence_level == "exact_import":
        return "Exact import match found in recent shipments"
    if similar_records_count > 0:
        plural = "" if similar_records_count == 1 else "s"
        return f"Based on {similar_records_count} similar import record{plural}"
    return "Category-based estimate, not verified"


def _blockers(request: DecisionSupportRequestModel, has_shelf_price: bool, tier: ConfidenceTier) -> List[str]:
    checks = [
        (not has_shelf_price, "Retail price not provided - profit margin unclear"),
        (not request.hs_code_candidates, "HS code not confirmed - duty rate uncertain"),
        (tier == "low", "Limited price evidence - range is wide"),
        (request.supplier_match_count == 0, "No verified suppliers found yet"),
    ]
    blockers = [message for failed, message in checks if failed]
    return blockers or [ALL_CONFIRMED]


def build_decision_support(request: DecisionSupportRequestModel) -> DecisionSupportModel:
    standard = request.cost_range.standard
    conservative = request.cost_range.conservative
    shelf_price = request.shelf_price if request.shelf_price and request.shelf_price > 0 else None

    # HS ------------------------------------------------------------------
    candidates = resolve_candidates(request)
    status: DecisionStatus = (
        "CONFIRMED"
        if any(c.source != "FALLBACK" for c in candidates) and request.evidence_level == "verified_quote"
        else "DRAFT"
    )
    hybrid_paths = _hybrid_paths(request.category, candidates)

    # Duty band -----------------------------------------------------------
    duty_band = DutyBandModel(
        status=status,
        rate_min=DUTY_FLOOR_WITH_SIGNAL if standard.duty_per_unit > 0 else DUTY_FLOOR_NO_SIGNAL,
        rate_max=DUTY_CEILING_WITH_SIGNAL if conservative.duty_per_unit > 0 else DUTY_CEILING_NO_SIGNAL,
        rationale=(
            "Estimated duty range based on HS code category "
            f"({candidates[0].code if candidates else 'pending'})"
        ),
    )

    # Cost ----------------------------------------------------------------
    landed = two_point_range(standard.landed_per_unit, conservative.landed_per_unit)
    tier = confidence_tier_for(request.evidence_level)
    cost = CostSummaryModel(
        landed_per_unit=landed,
        components_per_unit=CostComponentsModel(
            factory_unit_price=two_point_range(standard.unit_price, conservative.unit_price),
            shipping=two_point_range(standard.shipping_per_unit, conservative.shipping_per_unit),
            duty=two_point_range(standard.duty_per_unit, conservative.duty_per_unit),
            fees=two_point_range(standard.fee_per_unit, conservative.fee_per_unit),
        ),
        confidence_tier=tier,
        evidence_summary=evidence_summary_for(request.evidence_level, request.similar_records_count),
        currency=request.currency,
    )

    # Profit --------------------------------------------------------------
    unit_profit: Optional[MoneyRangeModel] = None
    margin: Optional[MoneyRangeModel] = None
    if shelf_price is not None:
        unit_profit = profit_per_unit(shelf_price, landed)
        margin = gross_margin_percent(unit_profit, shelf_price)

    planner = [
        QuantityOptionModel(
            quantity=quantity,
            total_landed=cash_out(landed, quantity),
            total_profit=total_profit(unit_profit, quantity) if unit_profit is not None else None,
        )
        for quantity in PLANNER_QUANTITIES
    ]

    profit = ProfitModel(
        shelf_price=shelf_price,
        break_even_price=landed,
        target_margin_prices=[
            TargetMarginPriceModel(margin_percent=margin_pct, required_shelf_price=price)
            for margin_pct, price in required_shelf_prices(landed, TARGET_MARGINS)
        ],
        profit_per_unit=unit_profit,
        margin_percent=margin,
    )

    blockers = _blockers(request, shelf_price is not None, tier)
    logger.debug("Decision support built: tier=%s hs_status=%s blockers=%d", tier, status, len(blockers))

    return DecisionSupportModel(
        hs=HsDecisionModel(
            customs_category_text=request.customs_category_text or None,
            status=status,
            candidates=candidates,
            hybrid_paths=hybrid_paths,
            decision_rule=HYBRID_DECISION_RULE if hybrid_paths else None,
        ),
        duty_rate=duty_band,
        cost=cost,
        quantity_planner=planner,
        profit=profit,
        action_plan=ActionPlanModel(
            blockers=blockers,
            next_steps=list(NEXT_STEPS),
            expected_timeline=EXPECTED_TIMELINES[tier],
        ),
    )
