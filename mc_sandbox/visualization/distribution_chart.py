"""Bar chart of the outcome distribution."""

from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from ..models.results import DistributionSummary
from .themes import DEFAULT_THEME


def build_distribution_figure(
    summary: DistributionSummary,
    *,
    theme: Optional[dict] = None,
    title: str = "Outcome Distribution",
) -> go.Figure:
    """
    Plot percentage frequency per sum value, with the expected value marked.
    """
    theme = theme or DEFAULT_THEME
    palette = theme["palette"]
    frame = summary.to_frame()

    figure = go.Figure()
    if summary.empty:
        figure.update_layout(
            template=theme["plotly_template"],
            title=title,
            annotations=[
                dict(
                    text="Waiting for first trial…",
                    showarrow=False,
                    font=dict(color=theme["subtext_color"]),
                )
            ],
            xaxis=dict(visible=False),
            yaxis=dict(visible=False),
        )
        return figure

    figure.add_trace(
        go.Bar(
            x=frame["sum"],
            y=frame["percentage"],
            customdata=frame["count"],
            marker=dict(color=palette["bar"]),
            hovertemplate="Sum %{x}<br>%{y:.2f}% (%{customdata} trials)<extra></extra>",
            name="Percentage",
        )
    )
    figure.add_vline(
        x=summary.expected_value,
        line=dict(color=palette["expected"], width=2, dash="dash"),
        annotation_text=f"E = {summary.expected_value:.2f}",
        annotation_position="top",
    )
    figure.update_layout(
        template=theme["plotly_template"],
        title=f"{title} ({summary.total:,} simulations)",
        margin=dict(l=60, r=30, t=60, b=40),
        xaxis=dict(title="Sum", dtick=1),
        yaxis=dict(title="Percentage"),
        bargap=0.1,
    )
    return figure


__all__ = ["build_distribution_figure"]
