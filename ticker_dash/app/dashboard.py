"""Stock Dashboard - Main Entry Point.

Wiring layer: ticker input, fetch lifecycle and snapshot sections.
Run with `streamlit run ticker_dash/app/dashboard.py`.
"""

import streamlit as st
from loguru import logger

from ticker_dash.app.logic.fetch import FetchController, FetchStatus, normalize_query
from ticker_dash.app.logic.presentation import (
    build_peer_export,
    financial_cards,
    overview_cards,
    peer_rows,
    price_series,
)
from ticker_dash.app.views.charts import render_price_trend
from ticker_dash.app.views.common import render_empty_state
from ticker_dash.app.views.stock_detail import (
    render_financials,
    render_overview,
    render_peer_comparison,
)
from ticker_dash.config.settings import get_settings
from ticker_dash.core.client import StockApiClient
from ticker_dash.core.log import configure_logging

TICKER_INPUT_KEY = "ticker_input"

settings = get_settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title=settings.app_title,
    page_icon="📊",
    layout="wide",
)

st.title(f"📊 {settings.app_title}")


def _uppercase_ticker() -> None:
    st.session_state[TICKER_INPUT_KEY] = normalize_query(st.session_state.get(TICKER_INPUT_KEY))


controller = FetchController(StockApiClient.from_settings(settings), st.session_state)

with st.form("ticker_form", border=False):
    col_input, col_button = st.columns([5, 1])
    with col_input:
        st.text_input(
            "Ticker",
            key=TICKER_INPUT_KEY,
            placeholder="Enter stock symbol (e.g., INFY)",
            label_visibility="collapsed",
        )
    with col_button:
        submitted = st.form_submit_button(
            "Fetch",
            type="primary",
            use_container_width=True,
            on_click=_uppercase_ticker,
        )

if submitted:
    with st.spinner("Fetching stock data..."):
        controller.submit(st.session_state.get(TICKER_INPUT_KEY))

state = controller.state

if state.error:
    st.error(state.error)

if state.status == FetchStatus.IDLE:
    render_empty_state("Enter a stock symbol and press Fetch to load its snapshot.")

if state.snapshot is not None:
    snapshot = state.snapshot
    symbol = settings.currency_symbol
    try:
        render_overview(overview_cards(snapshot, symbol))
        st.divider()
        render_price_trend(price_series(snapshot))
        render_financials(financial_cards(snapshot, symbol))
        st.divider()
        render_peer_comparison(
            peer_rows(snapshot, symbol),
            build_peer_export(snapshot, state.query),
        )
    except Exception as e:
        st.exception(e)
        logger.exception(f"Snapshot rendering error for {state.query}: {e}")
