"""Shared fixtures: sample payloads and fakes for the HTTP layer."""

import json
from typing import Any

import pytest
import requests

from ticker_dash.core.domain_models import StockSnapshot

INFY_PAYLOAD: dict[str, Any] = {
    "companyName": "Infosys",
    "percentChange": "-1.5",
    "financials": [
        {
            "stockFinancialMap": {
                "INC": [{"key": "NetIncome", "value": "22000"}],
                "BAL": [],
            }
        }
    ],
    "companyProfile": {
        "peerCompanyList": [
            {
                "companyName": "TCS",
                "price": "3500",
                "netChange": "-10",
                "percentChange": "-0.3",
                "overallRating": "Buy",
            }
        ]
    },
}


@pytest.fixture
def infy_payload() -> dict[str, Any]:
    return json.loads(json.dumps(INFY_PAYLOAD))


@pytest.fixture
def infy_snapshot(infy_payload: dict[str, Any]) -> StockSnapshot:
    return StockSnapshot.model_validate(infy_payload)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, body: Any = None, status_code: int = 200, raw: bytes | None = None) -> None:
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        elif body is None:
            self.content = b""
        else:
            self.content = json.dumps(body).encode("utf-8")

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=None)

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise requests.exceptions.JSONDecodeError(str(e), self.content.decode(), 0) from e


class FakeSession:
    """Records calls and replays a canned response or exception."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


class FakeSource:
    """Snapshot source returning a snapshot or raising a configured error."""

    def __init__(self, snapshot: StockSnapshot | None = None, error: Exception | None = None) -> None:
        self.snapshot = snapshot
        self.error = error
        self.queries: list[str] = []

    def fetch_snapshot(self, ticker: str) -> StockSnapshot:
        self.queries.append(ticker)
        if self.error is not None:
            raise self.error
        assert self.snapshot is not None
        return self.snapshot


@pytest.fixture
def make_response() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_session() -> type[FakeSession]:
    return FakeSession


@pytest.fixture
def make_source() -> type[FakeSource]:
    return FakeSource
