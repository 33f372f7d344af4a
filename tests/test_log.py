"""Loguru wiring: sink configuration and failure logging."""

import pytest
import requests
from loguru import logger

from ticker_dash.core import log
from ticker_dash.core.client import StockApiClient
from ticker_dash.core.errors import TransportError


def test_configure_logging_is_idempotent() -> None:
    log.configure_logging("debug")
    assert log._configured_level == "DEBUG"
    log.configure_logging("DEBUG")
    assert log._configured_level == "DEBUG"
    log.configure_logging("info")
    assert log._configured_level == "INFO"


def test_transport_failure_is_logged(make_session) -> None:
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="ERROR", format="{message}")
    try:
        client = StockApiClient(
            "https://stock.example.test/stock",
            "k",
            session=make_session(error=requests.ConnectionError("timeout")),
        )
        with pytest.raises(TransportError):
            client.fetch_snapshot("INFY")
    finally:
        logger.remove(sink_id)

    assert any("[INFY]" in m and "timeout" in m for m in messages)
