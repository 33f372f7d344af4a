"""Section renderers for the stock snapshot page.

Each function renders one block of the page from already-derived values.
"""

import streamlit as st

from ticker_dash.app.logic.presentation import (
    CsvExport,
    DisplayCard,
    PeerRow,
)
from ticker_dash.app.views.common import colored, render_card_grid


def render_overview(cards: list[DisplayCard]) -> None:
    """Render company identity, price and daily change cards."""
    render_card_grid(cards, columns=3)


def render_financials(cards: list[DisplayCard]) -> None:
    """Render the financial metric grid (one card per metric)."""
    st.subheader("💰 Financials")
    render_card_grid(cards, columns=len(cards) or 1)


def render_peer_comparison(rows: list[PeerRow], export: CsvExport | None) -> None:
    """Render the peer table with its CSV export button.

    The section is hidden entirely when there are no peers.
    """
    if not rows:
        return

    head_left, head_right = st.columns([4, 1])
    with head_left:
        st.subheader("👥 Peer Comparison")
    with head_right:
        if export is not None:
            st.download_button(
                label="⬇️ Export CSV",
                data=export.content.encode("utf-8"),
                file_name=export.filename,
                mime=export.mime,
                use_container_width=True,
            )

    widths = [0.5, 3, 1.5, 2, 1.5]
    header = st.columns(widths)
    for col, title in zip(header, ["", "Company", "Price", "Change", "Rating"]):
        col.markdown(f"**{title}**")

    for row in rows:
        cols = st.columns(widths)
        with cols[0]:
            if row.image_url:
                st.image(row.image_url, width=24)
        cols[1].markdown(row.company or "&nbsp;")
        cols[2].markdown(row.price)
        cols[3].markdown(colored(row.change, row.change_style))
        cols[4].markdown(row.rating or "&nbsp;")
