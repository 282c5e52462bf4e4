import pytest

from landedcost.api.security import EstimateQuota, QuotaExceeded, configured_api_keys


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_charge_returns_remaining_units():
    quota = EstimateQuota(5, clock=FakeClock())

    assert quota.charge("a", 3) == 2
    assert quota.charge("a", 2) == 0


def test_overcharge_is_rejected_without_recording():
    clock = FakeClock()
    quota = EstimateQuota(4, clock=clock)
    quota.charge("a", 3)
    clock.now += 15

    with pytest.raises(QuotaExceeded) as excinfo:
        quota.charge("a", 3)

    assert excinfo.value.retry_after == pytest.approx(45.0)
    assert quota.charge("a", 1) == 0


def test_budget_is_per_key():
    quota = EstimateQuota(3, clock=FakeClock())
    quota.charge("a", 3)

    assert quota.charge("b", 3) == 0


def test_units_free_up_once_window_passes():
    clock = FakeClock()
    quota = EstimateQuota(3, clock=clock)
    quota.charge("a", 3)

    clock.now += 60
    assert quota.charge("a", 3) == 0


def test_configured_api_keys(monkeypatch):
    monkeypatch.setenv("LANDEDCOST_API_KEYS", " alpha, beta ,,")
    assert configured_api_keys() == {"alpha", "beta"}

    monkeypatch.delenv("LANDEDCOST_API_KEYS")
    assert configured_api_keys() == {"dev-key"}
