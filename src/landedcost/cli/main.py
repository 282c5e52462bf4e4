"""Command-line interface for landedcost."""

from __future__ import annotations

import functools
import json
import logging
from typing import Any, Callable, Optional, Tuple

import click

from ..costing.decision_support import build_decision_support
from ..costing.inference import infer_cost_inputs
from ..costing.models import (
    DecisionSupportRequestModel,
    LabelDataModel,
    MoneyRangeModel,
    ProductClassificationModel,
    UserOverridesModel,
)
from ..costing.scenarios import build_cost_scenarios
from ..observability import estimate_run

CLI_CALLER = "cli"


def _product_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    options = [
        click.option("--product-name", default="", help="Product name from the classifier."),
        click.option("--category", default="", help="Classifier category name."),
        click.option("--keyword", "keywords", multiple=True, help="Classifier keyword (repeatable)."),
        click.option("--hs-code", default=None, help="HS code guess, e.g. 9503.00."),
        click.option("--net-weight", default=None, help='Label net weight, e.g. "150g" or "5.3 oz".'),
        click.option("--shipping-mode", type=click.Choice(["air", "ocean"]), default=None),
        click.option("--unit-weight-g", type=float, default=None, help="Override unit weight in grams."),
        click.option("--unit-volume-m3", type=float, default=None, help="Override unit volume in m3."),
        click.option("--carton-pack", type=int, default=None, help="Units per shipment."),
        click.option("--duty-rate", type=float, default=None, help="Override duty rate as a fraction."),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _build_request(
    product_name: str,
    category: str,
    keywords: Tuple[str, ...],
    hs_code: Optional[str],
    net_weight: Optional[str],
    **overrides: Any,
) -> tuple[ProductClassificationModel, UserOverridesModel]:
    classification = ProductClassificationModel(
        product_name=product_name,
        category=category,
        keywords=list(keywords),
        hs_code=hs_code,
        label_data=LabelDataModel(net_weight=net_weight) if net_weight else None,
    )
    return classification, UserOverridesModel(**overrides)


def _with_validation(fn: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc

    return wrapper


@click.group()
@click.option("--verbose", is_flag=True, help="Log resolver decisions.")
def cli(verbose: bool) -> None:
    """landedcost command suite."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@cli.command("infer")
@_product_options
@_with_validation
def infer(**kwargs: Any) -> None:
    """Resolve cost-model inputs and print them as JSON."""

    classification, overrides = _build_request(**kwargs)
    with estimate_run(caller=CLI_CALLER, route="infer") as run:
        inputs = infer_cost_inputs(classification, user_inputs=overrides)
    click.echo(json.dumps({"run_id": run.run_id, **inputs.to_dict()}, indent=2))


@cli.command("report")
@_product_options
@click.option("--factory-price-min", type=float, required=True, help="Lowest factory unit price (USD).")
@click.option("--factory-price-max", type=float, required=True, help="Highest factory unit price (USD).")
@click.option("--retail-price", type=float, default=None, help="Intended shelf price (USD).")
@click.option(
    "--evidence-level",
    type=click.Choice(["verified_quote", "exact_import", "similar_import", "category_based"]),
    default="category_based",
    show_default=True,
)
@click.option("--similar-records", type=int, default=0, show_default=True)
@click.option("--supplier-matches", type=int, default=0, show_default=True)
@_with_validation
def report(
    factory_price_min: float,
    factory_price_max: float,
    retail_price: Optional[float],
    evidence_level: str,
    similar_records: int,
    supplier_matches: int,
    **kwargs: Any,
) -> None:
    """Infer inputs, build cost scenarios and print decision support as JSON."""

    classification, overrides = _build_request(**kwargs)
    factory_price = MoneyRangeModel(
        min=factory_price_min,
        mid=(factory_price_min + factory_price_max) / 2,
        max=factory_price_max,
    )
    with estimate_run(caller=CLI_CALLER, route="report") as run:
        inputs = infer_cost_inputs(classification, user_inputs=overrides)
        cost_range = build_cost_scenarios(inputs, factory_price)
        decision = build_decision_support(
            DecisionSupportRequestModel(
                cost_range=cost_range,
                shelf_price=retail_price,
                evidence_level=evidence_level,
                similar_records_count=similar_records,
                category=inputs.category_key,
                supplier_match_count=supplier_matches,
            )
        )
    payload = {
        "run_id": run.run_id,
        "inputs": inputs.to_dict(),
        "cost_range": cost_range.model_dump(),
        "decision_support": decision.model_dump(),
    }
    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    cli()
