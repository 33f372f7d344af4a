"""Chart rendering components for the snapshot page.

Pure visualization functions using Plotly for interactive charts.
"""

import plotly.graph_objects as go
import streamlit as st

from ticker_dash.app.logic.presentation import PriceSeries
from ticker_dash.app.views.colors import Colors
from ticker_dash.app.views.common import GLOBAL_FONT, GLOBAL_MARGINS


def make_price_trend_chart(series: PriceSeries, height: int = 300) -> go.Figure:
    """Build the NSE price line chart.

    NaN prices are left as gaps (connectgaps=False).
    """
    fig = go.Figure(
        go.Scatter(
            x=series.labels,
            y=series.prices,
            mode="lines",
            name="NSE Price",
            line=dict(color=Colors.blue, width=3, shape="spline"),
            connectgaps=False,
            hovertemplate="%{x}: %{y:.2f}<extra></extra>",
        )
    )
    fig.update_xaxes(type="category")
    fig.update_layout(
        template="plotly_white",
        height=height,
        margin=GLOBAL_MARGINS,
        font=GLOBAL_FONT,
        showlegend=False,
        hovermode="x unified",
    )
    return fig


def render_price_trend(series: PriceSeries) -> None:
    """Render the price trend section; nothing is shown without samples."""
    if series.is_empty:
        return
    st.subheader("📈 Price Trend")
    st.plotly_chart(
        make_price_trend_chart(series),
        use_container_width=True,
        config={"displayModeBar": False},
    )
