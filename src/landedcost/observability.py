"""Per-estimate run context so every log line of one estimate can be correlated.

An :class:`EstimateRun` is bound for the duration of an HTTP request or a CLI
command. ``log_event`` stamps the active run onto the record's ``payload``
extra; raw API keys never reach the logs, only a short fingerprint.
"""

from __future__ import annotations

import hashlib
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

ANONYMOUS_CALLER = "anonymous"


@dataclass(frozen=True)
class EstimateRun:
    run_id: str
    caller: str
    route: str


_active_run: ContextVar[Optional[EstimateRun]] = ContextVar("estimate_run", default=None)


def caller_fingerprint(api_key: Optional[str]) -> str:
    """Stable, non-reversible label for an API key."""

    if not api_key:
        return ANONYMOUS_CALLER
    digest = hashlib.sha256(api_key.encode("utf-8")).hexdigest()
    return f"key-{digest[:10]}"


@contextmanager
def estimate_run(*, caller: str, route: str, run_id: Optional[str] = None) -> Iterator[EstimateRun]:
    """Bind a run for the enclosed block; a fresh id is generated unless one is supplied."""

    run = EstimateRun(run_id=run_id or uuid.uuid4().hex, caller=caller, route=route)
    token = _active_run.set(run)
    try:
        yield run
    finally:
        _active_run.reset(token)


def current_run() -> Optional[EstimateRun]:
    return _active_run.get()


def current_run_id() -> Optional[str]:
    run = _active_run.get()
    return run.run_id if run is not None else None


def log_event(event: str, **fields: object) -> None:
    payload = {"event": event, **fields}
    run = _active_run.get()
    if run is not None:
        payload.update(run_id=run.run_id, caller=run.caller, route=run.route)
    logger.info("%s %s", event, fields, extra={"payload": payload})
