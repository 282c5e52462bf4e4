from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EvidenceLevel = Literal["verified_quote", "exact_import", "similar_import", "category_based"]
HsCandidateSource = Literal["ANALYSIS", "MARKET_ESTIMATE", "FALLBACK", "USER_INPUT"]
ConfidenceTier = Literal["low", "medium", "high"]
DecisionStatus = Literal["DRAFT", "CONFIRMED"]


# -----------------------------------------------------------------------------
# Upstream signals
# -----------------------------------------------------------------------------
class LabelDataModel(BaseModel):
    """Text read off the product label by the extraction service."""

    net_weight: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class ProductClassificationModel(BaseModel):
    """Output of the upstream photo classifier."""

    product_name: str = ""
    description: str = ""
    category: str = ""
    hs_code: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    label_data: Optional[LabelDataModel] = None

    model_config = ConfigDict(extra="forbid")


class HsCodeCandidateModel(BaseModel):
    code: str
    confidence: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    rationale: Optional[str] = None
    description: Optional[str] = None
    source: Optional[HsCandidateSource] = None

    model_config = ConfigDict(extra="forbid")


class ObservedSupplierModel(BaseModel):
    name: str
    location: Optional[str] = None
    unit_price: Optional[float] = Field(default=None, ge=0.0)

    model_config = ConfigDict(extra="forbid")


class MarketEstimateModel(BaseModel):
    hs_code_candidates: List[HsCodeCandidateModel] = Field(default_factory=list)
    observed_suppliers: List[ObservedSupplierModel] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class UserOverridesModel(BaseModel):
    """Caller-declared values; any field present here wins over inference."""

    shipping_mode: Optional[Literal["air", "ocean"]] = None
    unit_weight_g: Optional[float] = Field(default=None, gt=0.0, allow_inf_nan=False)
    unit_volume_m3: Optional[float] = Field(default=None, gt=0.0, allow_inf_nan=False)
    carton_pack: Optional[int] = Field(default=None, ge=1)
    duty_rate: Optional[float] = Field(default=None, ge=0.0, allow_inf_nan=False)

    model_config = ConfigDict(extra="forbid")


# -----------------------------------------------------------------------------
# Cost scenarios
# -----------------------------------------------------------------------------
class MoneyRangeModel(BaseModel):
    min: float
    mid: float
    max: float

    model_config = ConfigDict(extra="forbid", frozen=True)


class ScenarioCostModel(BaseModel):
    """Per-unit cost components for one scenario (USD)."""

    unit_price: float = Field(ge=0.0)
    shipping_per_unit: float = Field(ge=0.0)
    duty_per_unit: float = Field(ge=0.0)
    fee_per_unit: float = Field(ge=0.0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def landed_per_unit(self) -> float:
        return self.unit_price + self.shipping_per_unit + self.duty_per_unit + self.fee_per_unit


class CostRangeModel(BaseModel):
    standard: ScenarioCostModel
    conservative: ScenarioCostModel

    model_config = ConfigDict(extra="forbid", frozen=True)


# -----------------------------------------------------------------------------
# Decision support
# -----------------------------------------------------------------------------
class DecisionSupportRequestModel(BaseModel):
    cost_range: CostRangeModel
    hs_code_candidates: List[HsCodeCandidateModel] = Field(default_factory=list)
    customs_category_text: Optional[str] = None
    shelf_price: Optional[float] = Field(default=None, allow_inf_nan=False)
    evidence_level: EvidenceLevel = "category_based"
    similar_records_count: int = Field(default=0, ge=0)
    category: Optional[str] = None
    supplier_match_count: int = Field(default=0, ge=0)
    currency: str = "USD"

    model_config = ConfigDict(extra="forbid")


class HsCandidateModel(BaseModel):
    code: str
    confidence: float = Field(ge=0.0, le=100.0)
    rationale: str
    evidence_snippet: str
    source: HsCandidateSource

    model_config = ConfigDict(extra="forbid", frozen=True)


class HybridPathModel(BaseModel):
    code: str
    label: str
    when: str
    confidence: Optional[float] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class HsDecisionModel(BaseModel):
    customs_category_text: Optional[str] = None
    status: DecisionStatus
    candidates: List[HsCandidateModel]
    hybrid_paths: Optional[List[HybridPathModel]] = None
    decision_rule: Optional[str] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class DutyBandModel(BaseModel):
    status: DecisionStatus
    rate_min: float  # percent
    rate_max: float  # percent
    rationale: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class CostComponentsModel(BaseModel):
    factory_unit_price: MoneyRangeModel
    shipping: MoneyRangeModel
    duty: MoneyRangeModel
    fees: MoneyRangeModel

    model_config = ConfigDict(extra="forbid", frozen=True)


class CostSummaryModel(BaseModel):
    landed_per_unit: MoneyRangeModel
    components_per_unit: CostComponentsModel
    confidence_tier: ConfidenceTier
    evidence_summary: str
    currency: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class QuantityOptionModel(BaseModel):
    quantity: int
    total_landed: MoneyRangeModel
    total_profit: Optional[MoneyRangeModel] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class TargetMarginPriceModel(BaseModel):
    margin_percent: int
    required_shelf_price: MoneyRangeModel

    model_config = ConfigDict(extra="forbid", frozen=True)


class ProfitModel(BaseModel):
    shelf_price: Optional[float] = None
    break_even_price: MoneyRangeModel
    target_margin_prices: List[TargetMarginPriceModel]
    profit_per_unit: Optional[MoneyRangeModel] = None
    margin_percent: Optional[MoneyRangeModel] = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class ActionPlanModel(BaseModel):
    blockers: List[str] = Field(min_length=1)
    next_steps: List[str]
    expected_timeline: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class DecisionSupportModel(BaseModel):
    """Read-only decision view rebuilt for every report render."""

    hs: HsDecisionModel
    duty_rate: DutyBandModel
    cost: CostSummaryModel
    quantity_planner: List[QuantityOptionModel]
    profit: ProfitModel
    action_plan: ActionPlanModel

    model_config = ConfigDict(extra="forbid", frozen=True)


# -----------------------------------------------------------------------------
# API payloads
# -----------------------------------------------------------------------------
class InferRequestModel(BaseModel):
    classification: ProductClassificationModel
    market_estimate: Optional[MarketEstimateModel] = None
    user_inputs: Optional[UserOverridesModel] = None

    model_config = ConfigDict(extra="forbid")


class InferResponseModel(BaseModel):
    run_id: Optional[str] = None
    inputs: Dict[str, Any]

    model_config = ConfigDict(extra="forbid")


class ReportRequestModel(InferRequestModel):
    """Inference plus decision support in one call."""

    factory_price: MoneyRangeModel
    shelf_price: Optional[float] = Field(default=None, allow_inf_nan=False)
    evidence_level: EvidenceLevel = "category_based"
    similar_records_count: int = Field(default=0, ge=0)
    supplier_match_count: Optional[int] = Field(default=None, ge=0)
    customs_category_text: Optional[str] = None

    @field_validator("factory_price")
    @classmethod
    def _factory_price_non_negative(cls, value: MoneyRangeModel) -> MoneyRangeModel:
        if min(value.min, value.mid, value.max) < 0:
            raise ValueError("factory_price must be non-negative")
        return value

    @model_validator(mode="after")
    def _default_supplier_count(self) -> "ReportRequestModel":
        if self.supplier_match_count is None:
            observed = self.market_estimate.observed_suppliers if self.market_estimate else []
            self.supplier_match_count = len(observed)
        return self


class ReportResponseModel(BaseModel):
    run_id: Optional[str] = None
    inputs: Dict[str, Any]
    cost_range: CostRangeModel
    decision_support: DecisionSupportModel

    model_config = ConfigDict(extra="forbid")
