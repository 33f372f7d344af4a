"""Stock API client.

Wraps the snapshot endpoint with requests and validates the response
before returning it to the caller. There is no retry: every failure is
terminal for the query that caused it.
"""

from typing import Any

import requests
from loguru import logger

from ticker_dash.config.settings import Settings
from ticker_dash.core.domain_models import StockSnapshot
from ticker_dash.core.errors import EmptyResultError, TransportError

API_KEY_HEADER = "X-Api-Key"
EMPTY_RESULT_MESSAGE = "No data found."


class StockApiClient:
    """Fetches one snapshot per ticker from the stock API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Snapshot endpoint, queried as `<base_url>?name=<ticker>`
            api_key: Static credential sent with every request
            timeout: Request timeout in seconds; None waits indefinitely
            session: Optional shared session; a short-lived one is used otherwise
        """
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> "StockApiClient":
        if not settings.api_key:
            logger.warning("TICKER_DASH_API_KEY is not set; requests will likely be rejected")
        return cls(
            base_url=settings.api_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )

    def fetch_snapshot(self, ticker: str) -> StockSnapshot:
        """
        Fetch the stock snapshot for a ticker.

        Args:
            ticker: Uppercase ticker symbol (e.g., "INFY")

        Returns:
            Parsed snapshot; every field may be absent

        Raises:
            EmptyResultError: If the API answered with an empty body
            TransportError: Network failure, non-2xx status or unreadable body
        """
        logger.info(f"[{ticker}] Fetching stock snapshot")

        try:
            response = self._get(ticker)
            response.raise_for_status()
            body = self._decode(response)
        except requests.RequestException as e:
            logger.error(f"[{ticker}] Snapshot request failed: {e}")
            raise TransportError(str(e), details={"ticker": ticker}) from e

        if not body:
            logger.warning(f"[{ticker}] API returned an empty body")
            raise EmptyResultError(EMPTY_RESULT_MESSAGE, details={"ticker": ticker})

        if not isinstance(body, dict):
            msg = f"Unexpected response payload of type {type(body).__name__}"
            logger.error(f"[{ticker}] {msg}")
            raise TransportError(msg, details={"ticker": ticker})

        snapshot = StockSnapshot.model_validate(body)
        logger.success(f"[{ticker}] Fetched snapshot for {snapshot.company_name or ticker}")
        return snapshot

    def _get(self, ticker: str) -> requests.Response:
        params = {"name": ticker}
        headers = {API_KEY_HEADER: self.api_key}
        if self._session is not None:
            return self._session.get(
                self.base_url, params=params, headers=headers, timeout=self.timeout
            )
        with requests.Session() as session:
            return session.get(self.base_url, params=params, headers=headers, timeout=self.timeout)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        # An empty 2xx body is a valid "nothing found" answer, not a decode error
        if not response.content or not response.content.strip():
            return None
        return response.json()
