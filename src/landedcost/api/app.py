from __future__ import annotations

import logging
import os
import re
import time
from typing import Any, Dict, Iterable, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from landedcost.api.routes_estimate import router as estimate_router
from landedcost.api.security import ENGINE_VERSION, ESTIMATE_COSTS
from landedcost.costing.priors import DEFAULT_CATEGORY_KEY, CategoryKey
from landedcost.observability import caller_fingerprint, estimate_run, log_event
from landedcost.version import __version__

logger = logging.getLogger(__name__)

# Callers may forward the run id of an upstream pipeline step.
_RUN_ID_RE = re.compile(r"^[A-Za-z0-9_-]{8,64}$")
_VALUE_ERROR_PREFIX = "Value error, "

app = FastAPI(title="landedcost API", version="v1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(estimate_router)


@app.middleware("http")
async def estimate_run_context(request: Request, call_next):
    supplied = request.headers.get("X-Run-ID", "")
    started = time.perf_counter()
    with estimate_run(
        caller=caller_fingerprint(request.headers.get("X-API-Key")),
        route=request.url.path,
        run_id=supplied if _RUN_ID_RE.match(supplied) else None,
    ) as run:
        response = await call_next(request)
        response.headers["X-Run-ID"] = run.run_id
        log_event(
            "request.completed",
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )
    return response


def _field_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    fields = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "Invalid value")
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        fields.append({"path": ".".join(["request", *location]), "message": message})
    return fields


async def validation_error_response(request: Request, exc: Exception) -> JSONResponse:
    fields = _field_errors(exc.errors())
    logger.info("Rejected %s payload: %d invalid field(s)", request.url.path, len(fields))
    return JSONResponse(status_code=422, content={"error": "VALIDATION_ERROR", "fields": fields})


app.add_exception_handler(RequestValidationError, validation_error_response)
# Models built inside a handler (e.g. a decision-support request) can still fail validation.
app.add_exception_handler(ValidationError, validation_error_response)


@app.get("/v1/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "status": "ok"}


@app.get("/v1/info")
def info() -> Dict[str, Any]:
    return {
        "version": __version__,
        "engine_version": ENGINE_VERSION,
        "git_sha": os.getenv("GIT_COMMIT"),
        "categories": [key.value for key in CategoryKey],
        "default_category": DEFAULT_CATEGORY_KEY.value,
        "estimate_costs": dict(ESTIMATE_COSTS),
    }
