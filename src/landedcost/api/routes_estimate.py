from __future__ import annotations

from fastapi import APIRouter, Depends

from landedcost.api.security import charge_estimate, require_api_key
from landedcost.costing.decision_support import build_decision_support
from landedcost.costing.inference import infer_cost_inputs
from landedcost.costing.models import (
    DecisionSupportModel,
    DecisionSupportRequestModel,
    InferRequestModel,
    InferResponseModel,
    ReportRequestModel,
    ReportResponseModel,
)
from landedcost.costing.scenarios import build_cost_scenarios
from landedcost.observability import current_run_id, log_event

router = APIRouter(
    prefix="/api/estimate",
    tags=["estimate"],
    dependencies=[Depends(require_api_key)],
)


@router.post("/infer", response_model=InferResponseModel, dependencies=[Depends(charge_estimate("infer"))])
def infer_endpoint(request: InferRequestModel) -> InferResponseModel:
    inputs = infer_cost_inputs(request.classification, request.market_estimate, request.user_inputs)
    log_event("estimate.infer", category=inputs.category_key, hs2=inputs.hs2)
    return InferResponseModel(run_id=current_run_id(), inputs=inputs.to_dict())


@router.post(
    "/decision-support",
    response_model=DecisionSupportModel,
    dependencies=[Depends(charge_estimate("decision-support"))],
)
def decision_support_endpoint(request: DecisionSupportRequestModel) -> DecisionSupportModel:
    return build_decision_support(request)


@router.post("/report", response_model=ReportResponseModel, dependencies=[Depends(charge_estimate("report"))])
def report_endpoint(request: ReportRequestModel) -> ReportResponseModel:
    inputs = infer_cost_inputs(request.classification, request.market_estimate, request.user_inputs)
    cost_range = build_cost_scenarios(inputs, request.factory_price)
    candidates = request.market_estimate.hs_code_candidates if request.market_estimate else []

    decision = build_decision_support(
        DecisionSupportRequestModel(
            cost_range=cost_range,
            hs_code_candidates=candidates,
            customs_category_text=request.customs_category_text,
            shelf_price=request.shelf_price,
            evidence_level=request.evidence_level,
            similar_records_count=request.similar_records_count,
            category=inputs.category_key,
            supplier_match_count=request.supplier_match_count or 0,
        )
    )
    log_event(
        "estimate.report",
        category=inputs.category_key,
        confidence_tier=decision.cost.confidence_tier,
        blockers=len(decision.action_plan.blockers),
    )
    return ReportResponseModel(
        run_id=current_run_id(),
        inputs=inputs.to_dict(),
        cost_range=cost_range,
        decision_support=decision,
    )
