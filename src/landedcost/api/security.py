"""API-key gate and per-key estimate quota for the HTTP surface.

Estimate endpoints are not equally expensive: a report runs inference, cost
scenarios and decision support in one call. Each endpoint therefore charges
a number of *estimate units* against a sliding one-minute budget per key.
"""

from __future__ import annotations

import math
import os
import threading
import time
from collections import defaultdict, deque
from typing import Callable, Deque, Dict, Optional, Tuple

from fastapi import Depends, Header, HTTPException

ENGINE_VERSION = os.getenv("LANDEDCOST_ENGINE_VERSION", "0.1.0")

ESTIMATE_COSTS: Dict[str, int] = {"infer": 1, "decision-support": 1, "report": 3}
QUOTA_WINDOW_SECONDS = 60.0


def configured_api_keys() -> frozenset[str]:
    raw = os.getenv("LANDEDCOST_API_KEYS", "")
    keys = frozenset(key.strip() for key in raw.split(",") if key.strip())
    return keys or frozenset({"dev-key"})


class QuotaExceeded(Exception):
    def __init__(self, units: int, retry_after: float) -> None:
        super().__init__(f"Estimate quota exhausted; {units} unit(s) requested")
        self.units = units
        self.retry_after = retry_after


class EstimateQuota:
    """Sliding-window budget of estimate units per API key."""

    def __init__(
        self,
        units_per_minute: int,
        window_seconds: float = QUOTA_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.units_per_minute = max(1, units_per_minute)
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._spent: Dict[str, Deque[Tuple[float, int]]] = defaultdict(deque)

    def charge(self, api_key: str, units: int) -> int:
        """Record ``units`` for ``api_key`` and return the units left in the window.

        Raises :class:`QuotaExceeded` without recording anything when the
        charge does not fit.
        """

        now = self._clock()
        with self._lock:
            history = self._spent[api_key]
            while history and now - history[0][0] >= self.window_seconds:
                history.popleft()
            used = sum(spent for _, spent in history)
            if used + units > self.units_per_minute:
                oldest = history[0][0] if history else now
                raise QuotaExceeded(units, max(0.0, oldest + self.window_seconds - now))
            history.append((now, units))
            return self.units_per_minute - used - units


estimate_quota = EstimateQuota(int(os.getenv("LANDEDCOST_ESTIMATE_UNITS_PER_MINUTE", "60")))


def configure_quota(units_per_minute: int) -> None:
    """Replace the process-wide quota, dropping everything already charged."""

    global estimate_quota
    estimate_quota = EstimateQuota(units_per_minute)


def require_api_key(x_api_key: Optional[str] = Header(None)) -> str:
    if not x_api_key:
        raise HTTPException(status_code=401, detail={"message": "Missing API key"})
    if x_api_key not in configured_api_keys():
        raise HTTPException(status_code=401, detail={"message": "Invalid API key"})
    return x_api_key


def charge_estimate(endpoint: str) -> Callable[..., str]:
    """Dependency charging the cost of ``endpoint`` to the caller's quota."""

    units = ESTIMATE_COSTS[endpoint]

    def dependency(api_key: str = Depends(require_api_key)) -> str:
        try:
            estimate_quota.charge(api_key, units)
        except QuotaExceeded as exc:
            raise HTTPException(
                status_code=429,
                detail={
                    "message": "Estimate quota exceeded",
                    "endpoint": endpoint,
                    "units": units,
                    "units_per_minute": estimate_quota.units_per_minute,
                },
                headers={"Retry-After": str(math.ceil(exc.retry_after))},
            ) from exc
        return api_key

    return dependency
