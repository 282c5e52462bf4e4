import json

from click.testing import CliRunner

from landedcost.cli.main import cli


def test_infer_prints_inputs_as_json():
    runner = CliRunner()

    result = runner.invoke(cli, ["infer", "--category", "Toys", "--hs-code", "9503.00"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["category_key"] == "toy"
    assert payload["run_id"]
    assert payload["unit_weight_g"]["value"] == 150
    assert payload["duty_rate"]["source"] == "from_hs_estimate"


def test_infer_reads_label_weight_and_overrides():
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["infer", "--category", "Food", "--net-weight", "5.3 oz", "--shipping-mode", "air", "--carton-pack", "24"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["unit_weight_g"]["source"] == "from_customs"
    assert payload["shipping_mode"]["value"] == "air"
    assert payload["carton_pack"]["value"] == 24


def test_infer_rejects_non_positive_override():
    runner = CliRunner()

    result = runner.invoke(cli, ["infer", "--unit-weight-g=-3"])

    assert result.exit_code == 2
    assert "unit_weight_g" in result.output


def test_report_builds_decision_support():
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "report",
            "--category", "Apparel",
            "--keyword", "cotton",
            "--hs-code", "6109.10",
            "--factory-price-min", "3.0",
            "--factory-price-max", "4.0",
            "--retail-price", "19.99",
            "--evidence-level", "similar_import",
            "--similar-records", "2",
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["cost_range"]["standard"]["unit_price"] == 3.0
    assert payload["run_id"]
    decision = payload["decision_support"]
    assert decision["cost"]["confidence_tier"] == "medium"
    assert decision["profit"]["profit_per_unit"] is not None
    assert decision["hs"]["candidates"][0]["code"] == "6204"


def test_report_requires_factory_price():
    runner = CliRunner()

    result = runner.invoke(cli, ["report", "--category", "Toys"])

    assert result.exit_code == 2
