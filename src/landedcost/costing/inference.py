"""Resolve every cost-model input for one product estimate.

The orchestrator picks the category, pulls the HS chapter, then calls the
field resolvers in dependency order: physical inputs first, then billable
weight, then freight which depends on all of them.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from landedcost.costing.category_detector import determine_category_key_for, extract_hs2
from landedcost.costing.freight import compute_billable_weight_kg, infer_shipping_per_unit
from landedcost.costing.inferred import InferredInputs
from landedcost.costing.models import MarketEstimateModel, ProductClassificationModel, UserOverridesModel
from landedcost.costing.priors import get_category_prior, lookup_hs2_duty
from landedcost.costing.resolvers import (
    resolve_carton_pack,
    resolve_duty_rate,
    resolve_fees_per_unit,
    resolve_shipping_mode,
    resolve_unit_volume,
    resolve_unit_weight,
)

logger = logging.getLogger(__name__)


def _override(user_inputs: Any, name: str) -> Any:
    if user_inputs is None:
        return None
    if isinstance(user_inputs, dict):
        return user_inputs.get(name)
    return getattr(user_inputs, name, None)


def infer_cost_inputs(
    classification: ProductClassificationModel,
    market_estimate: Optional[MarketEstimateModel] = None,
    user_inputs: Optional[UserOverridesModel] = None,
) -> InferredInputs:
    """Build the full :class:`InferredInputs` bundle for a classified product.

    Parameters
    ----------
    classification:
        Upstream classification (category, keywords, HS code, label data).
    market_estimate:
        Optional market data; only its top HS candidate is consulted here.
    user_inputs:
        Optional overrides. A model or a plain mapping with the same keys.
    """

    category_key = determine_category_key_for(classification)
    prior = get_category_prior(category_key)
    hs2 = extract_hs2(classification, market_estimate)
    logger.debug("Estimating with category=%s hs2=%s", category_key.value, hs2)

    label_data = getattr(classification, "label_data", None)
    net_weight = getattr(label_data, "net_weight", None) if label_data is not None else None

    shipping_mode = resolve_shipping_mode(_override(user_inputs, "shipping_mode"))
    unit_weight_g = resolve_unit_weight(
        prior,
        net_weight=net_weight,
        user_weight_g=_override(user_inputs, "unit_weight_g"),
    )
    unit_volume_m3 = resolve_unit_volume(prior, user_volume_m3=_override(user_inputs, "unit_volume_m3"))
    carton_pack = resolve_carton_pack(_override(user_inputs, "carton_pack"))
    billable_weight_kg = compute_billable_weight_kg(unit_weight_g, unit_volume_m3)
    duty_rate = resolve_duty_rate(
        prior,
        hs2_entry=lookup_hs2_duty(hs2),
        user_duty_rate=_override(user_inputs, "duty_rate"),
    )
    fees_per_unit = resolve_fees_per_unit(prior)
    shipping_per_unit = infer_shipping_per_unit(
        shipping_mode=shipping_mode,
        unit_weight_g=unit_weight_g,
        unit_volume_m3=unit_volume_m3,
        billable_weight_kg=billable_weight_kg,
        prior=prior,
    )

    return InferredInputs(
        category_key=category_key.value,
        hs2=hs2,
        shipping_mode=shipping_mode,
        unit_weight_g=unit_weight_g,
        unit_volume_m3=unit_volume_m3,
        carton_pack=carton_pack,
        billable_weight_kg=billable_weight_kg,
        duty_rate=duty_rate,
        fees_per_unit=fees_per_unit,
        shipping_per_unit=shipping_per_unit,
    )
