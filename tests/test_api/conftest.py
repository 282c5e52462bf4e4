"""Shared fixtures for estimate API tests."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from landedcost.api.app import app
from landedcost.api.security import configure_quota


@pytest.fixture()
def api_client(monkeypatch) -> Iterator[TestClient]:
    monkeypatch.setenv("LANDEDCOST_API_KEYS", "test-key")
    configure_quota(100)
    with TestClient(app, headers={"X-API-Key": "test-key"}) as client:
        yield client


@pytest.fixture()
def toy_payload() -> dict:
    return {
        "classification": {
            "product_name": "Mini figure blind box",
            "category": "Toys",
            "hs_code": "9503.00.00",
            "keywords": ["toy", "candy", "collectible"],
        }
    }
