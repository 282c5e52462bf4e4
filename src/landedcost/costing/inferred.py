from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Generic, Literal, Optional, TypeVar

from landedcost.costing.ranges import RangeTriple

InferenceSource = Literal[
    "user",
    "vision",
    "label",
    "from_customs",
    "from_hs_estimate",
    "from_category",
    "assumed",
]
Provenance = Literal["user", "label_verified", "vision_inferred", "category_default"]
ShippingMode = Literal["air", "ocean"]

T = TypeVar("T")


@dataclass(frozen=True)
class InferredInput(Generic[T]):
    """A resolved cost-model input and the evidence behind it."""

    value: T
    source: InferenceSource
    confidence: float  # 0-100
    explanation: str
    provenance: Provenance
    range: Optional[RangeTriple] = None


@dataclass(frozen=True)
class InferredInputs:
    """All cost-model inputs for one estimate request."""

    category_key: str
    hs2: Optional[str]
    shipping_mode: InferredInput[ShippingMode]
    unit_weight_g: InferredInput[float]
    unit_volume_m3: InferredInput[float]
    carton_pack: InferredInput[int]
    billable_weight_kg: InferredInput[float]
    duty_rate: InferredInput[float]
    fees_per_unit: InferredInput[float]
    shipping_per_unit: InferredInput[float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
