# Define a static color class for consistent use across the app

from ticker_dash.core.domain_models import ChangeStyle


class Colors:
    blue = "#3b82f6"  # Price trend line


# Streamlit markdown color directives (":green[...]")
CHANGE_STYLE_MARKDOWN = {
    ChangeStyle.POSITIVE: "green",
    ChangeStyle.NEGATIVE: "red",
    ChangeStyle.NEUTRAL: "gray",
}
