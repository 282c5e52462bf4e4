"""Uncertainty bands for inferred values.

Every range in the package is produced here so that band width is always a
function of confidence alone.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

USER_CONFIDENCE = 100


class ConfidenceBand(Enum):
    HIGH = ("high", 0.08)
    MEDIUM = ("medium", 0.18)
    LOW = ("low", 0.35)

    def __init__(self, label: str, spread: float) -> None:
        self.label = label
        self.spread = spread


def confidence_band(confidence: float) -> ConfidenceBand:
    if confidence >= 80:
        return ConfidenceBand.HIGH
    if confidence >= 60:
        return ConfidenceBand.MEDIUM
    return ConfidenceBand.LOW


def to_confidence_label(confidence: float) -> str:
    return confidence_band(confidence).label


@dataclass(frozen=True)
class RangeTriple:
    """p10/p50/p90 estimate, always ordered ``p10 <= p50 <= p90``."""

    p10: float
    p50: float
    p90: float

    @classmethod
    def pinned(cls, value: float) -> "RangeTriple":
        return cls(value, value, value)

    @property
    def width(self) -> float:
        return self.p90 - self.p10

    def map(self, fn: Callable[[float], float]) -> "RangeTriple":
        return RangeTriple(fn(self.p10), fn(self.p50), fn(self.p90))


def build_range(value: float, confidence: float, floor: float = 0.0) -> RangeTriple:
    """Spread ``value`` by its confidence band and clamp both bounds at ``floor``.

    A user-pinned value (confidence 100) has no spread.
    """

    if confidence >= USER_CONFIDENCE:
        return RangeTriple.pinned(max(floor, value))

    spread = confidence_band(confidence).spread
    p10 = max(floor, round(value * (1 - spread), 4))
    p50 = max(floor, round(value, 4))
    p90 = max(floor, round(value * (1 + spread), 4))
    return RangeTriple(p10=p10, p50=p50, p90=p90)


def combine_max(left: RangeTriple, right: RangeTriple) -> RangeTriple:
    """Element-wise ``max`` of two ranges, used by combinators such as billable weight."""

    return RangeTriple(
        p10=max(left.p10, right.p10),
        p50=max(left.p50, right.p50),
        p90=max(left.p90, right.p90),
    )
