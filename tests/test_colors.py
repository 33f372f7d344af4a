"""Color tables used by the views."""

import re

from ticker_dash.app.views.colors import CHANGE_STYLE_MARKDOWN, Colors
from ticker_dash.core.domain_models import ChangeStyle


def test_every_change_style_has_a_markdown_color() -> None:
    assert set(CHANGE_STYLE_MARKDOWN) == set(ChangeStyle)


def test_palette_holds_only_the_price_line_color() -> None:
    palette = {name for name in vars(Colors) if not name.startswith("_")}
    assert palette == {"blue"}
    assert re.fullmatch(r"#[0-9a-f]{6}", Colors.blue)
