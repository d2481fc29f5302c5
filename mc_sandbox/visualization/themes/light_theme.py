"""Light theme for distribution charts and the live dashboard."""

from __future__ import annotations

from typing import Dict


BAR_PURPLE = "#8884D8"
PRIMARY_NAVY = "#1F4788"
EXPECTED_ORANGE = "#FF6F00"
BACKGROUND = "#FAFAFA"
CARD_BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#1E1E1E"
SUBTEXT_COLOR = "#424242"
GRID_COLOR = "#E0E0E0"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
    "background_color": BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "bar": BAR_PURPLE,
        "progress": PRIMARY_NAVY,
        "expected": EXPECTED_ORANGE,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "xaxis": {"gridcolor": GRID_COLOR, "linecolor": "#BDBDBD"},
            "yaxis": {"gridcolor": GRID_COLOR, "linecolor": "#BDBDBD"},
        }
    },
}
