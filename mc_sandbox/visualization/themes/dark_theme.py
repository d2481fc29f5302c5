"""Dark theme for distribution charts and the live dashboard."""

from __future__ import annotations

from typing import Dict


BAR_PURPLE = "#A5A1F0"
PRIMARY_CYAN = "#00D9FF"
EXPECTED_ORANGE = "#FF9E40"
BACKGROUND = "#1E1E1E"
CARD_BACKGROUND = "#2C2C2C"
TEXT_COLOR = "#FFFFFF"
SUBTEXT_COLOR = "#BDBDBD"
GRID_COLOR = "#424242"


DARK_THEME: Dict[str, object] = {
    "name": "dark",
    "background_color": BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "bar": BAR_PURPLE,
        "progress": PRIMARY_CYAN,
        "expected": EXPECTED_ORANGE,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "xaxis": {"gridcolor": GRID_COLOR, "linecolor": "#555555"},
            "yaxis": {"gridcolor": GRID_COLOR, "linecolor": "#555555"},
        }
    },
}
