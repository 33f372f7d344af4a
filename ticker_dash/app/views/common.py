"""Common UI components shared across sections.

Pure rendering functions for reusable Streamlit widgets.
"""

import streamlit as st

from ticker_dash.app.logic.presentation import DisplayCard
from ticker_dash.app.views.colors import CHANGE_STYLE_MARKDOWN
from ticker_dash.core.domain_models import ChangeStyle

GLOBAL_MARGINS = dict(t=30, l=5, r=5, b=0)
GLOBAL_FONT = dict(
    family="Arial",
    size=14,
)


def colored(text: str, style: ChangeStyle | None) -> str:
    """Wrap text in a Streamlit color directive for the given style."""
    if style is None or not text:
        return text
    # Brackets would terminate the directive early
    safe = text.replace("[", "(").replace("]", ")")
    return f":{CHANGE_STYLE_MARKDOWN[style]}[{safe}]"


def render_card(card: DisplayCard) -> None:
    """Render a label/value card inside a bordered container."""
    with st.container(border=True):
        st.caption(card.label)
        value = colored(card.value, card.style) or "&nbsp;"
        if card.emphasis or card.style is not None:
            st.markdown(f"#### {value}")
        else:
            st.markdown(f"**{value}**")


def render_card_grid(cards: list[DisplayCard], columns: int = 3) -> None:
    """Render cards row by row, `columns` per row."""
    for start in range(0, len(cards), columns):
        cols = st.columns(columns)
        for col, card in zip(cols, cards[start : start + columns]):
            with col:
                render_card(card)


def render_empty_state(message: str, icon: str = "📊") -> None:
    """Render empty state placeholder when no data is available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")
