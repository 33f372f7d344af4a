"""Fetch lifecycle for a single ticker query.

The request state is an immutable FetchState that only changes through the
action functions below. FetchController keeps the current state in a
mapping (st.session_state in the app, a plain dict in tests).
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Protocol

from loguru import logger

from ticker_dash.core.client import EMPTY_RESULT_MESSAGE
from ticker_dash.core.domain_models import StockSnapshot
from ticker_dash.core.errors import DashboardError, EmptyResultError

FETCH_STATE_KEY = "fetch_state"
FAILURE_PREFIX = "Failed to fetch data: "


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    """Snapshot of the request lifecycle shown by the page."""

    query: str = ""
    status: FetchStatus = FetchStatus.IDLE
    snapshot: StockSnapshot | None = None
    error: str = ""
    # Incremented per submit; completions carrying an older id are stale
    request_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status == FetchStatus.LOADING


class SnapshotSource(Protocol):
    def fetch_snapshot(self, ticker: str) -> StockSnapshot: ...


def normalize_query(raw: str | None) -> str:
    """Strip and uppercase user input; empty string means no query."""
    return (raw or "").strip().upper()


# --- Actions ---


def start(state: FetchState, query: str) -> FetchState:
    return FetchState(
        query=query,
        status=FetchStatus.LOADING,
        snapshot=None,
        error="",
        request_id=state.request_id + 1,
    )


def _is_current(state: FetchState, request_id: int) -> bool:
    return state.status == FetchStatus.LOADING and state.request_id == request_id


def succeed(state: FetchState, request_id: int, snapshot: StockSnapshot) -> FetchState:
    if not _is_current(state, request_id):
        return state
    return replace(state, status=FetchStatus.SUCCESS, snapshot=snapshot)


def empty(state: FetchState, request_id: int) -> FetchState:
    if not _is_current(state, request_id):
        return state
    return replace(state, status=FetchStatus.EMPTY, error=EMPTY_RESULT_MESSAGE)


def fail(state: FetchState, request_id: int, message: str) -> FetchState:
    if not _is_current(state, request_id):
        return state
    return replace(state, status=FetchStatus.ERROR, error=f"{FAILURE_PREFIX}{message}")


# --- Controller ---


class FetchController:
    """Runs one fetch per submit and records the outcome in a state store."""

    def __init__(
        self,
        source: SnapshotSource,
        store: MutableMapping[str, Any],
        key: str = FETCH_STATE_KEY,
    ) -> None:
        self.source = source
        self.store = store
        self.key = key

    @property
    def state(self) -> FetchState:
        state = self.store.get(self.key)
        return state if isinstance(state, FetchState) else FetchState()

    def _dispatch(self, state: FetchState) -> FetchState:
        self.store[self.key] = state
        return state

    def submit(self, raw_query: str | None) -> FetchState:
        """Fetch the snapshot for `raw_query` and store the resulting state.

        An empty query is ignored and leaves the state untouched. Every
        other submit ends in success, empty or error; loading never
        survives the call.
        """
        query = normalize_query(raw_query)
        if not query:
            logger.debug("Ignoring submit without a ticker")
            return self.state

        request_id = self._dispatch(start(self.state, query)).request_id

        try:
            snapshot = self.source.fetch_snapshot(query)
        except EmptyResultError:
            return self._dispatch(empty(self.state, request_id))
        except DashboardError as e:
            return self._dispatch(fail(self.state, request_id, e.message))
        except Exception as e:
            logger.exception(f"[{query}] Unexpected error while fetching snapshot")
            return self._dispatch(fail(self.state, request_id, str(e)))

        return self._dispatch(succeed(self.state, request_id, snapshot))
