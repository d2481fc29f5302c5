"""Visualization utilities for dice simulation results."""

from __future__ import annotations

from .distribution_chart import build_distribution_figure
from .live_simulation_view import create_live_dashboard_app
from .themes import DARK_THEME, DEFAULT_THEME, LIGHT_THEME, resolve_theme

__all__ = [
    "build_distribution_figure",
    "create_live_dashboard_app",
    "resolve_theme",
    "DARK_THEME",
    "DEFAULT_THEME",
    "LIGHT_THEME",
]
