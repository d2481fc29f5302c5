"""Live dice simulation dashboard (real-time view)."""

from __future__ import annotations

import logging
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash, Input, Output, State, ctx, dcc, html, no_update

from ..config import DEFAULT_NUM_DICE, DEFAULT_NUM_TRIALS, DEFAULT_TRIAL_RATE
from ..core.validator import ConfigurationError, parse_form_inputs
from ..runtime.simulation_driver import SimulationDriver
from .distribution_chart import build_distribution_figure
from .themes import resolve_theme

LOGGER = logging.getLogger(__name__)


def _number_field(label: str, component_id: str, value: float, tooltip: Optional[str] = None) -> html.Div:
    return html.Div(
        [
            dbc.Label(label, html_for=component_id),
            dbc.Input(id=component_id, type="number", value=value, required=True),
        ],
        className="mb-3",
        title=tooltip,
    )


def create_live_dashboard_app(
    driver: SimulationDriver,
    *,
    theme: str = "light",
) -> Dash:
    theme_obj = resolve_theme(theme)
    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.BOOTSTRAP],
        suppress_callback_exceptions=True,
    )

    form = dbc.Card(
        dbc.CardBody(
            [
                _number_field("Number of dice", "input-num-dice", DEFAULT_NUM_DICE),
                _number_field(
                    "Number of iterations",
                    "input-num-iterations",
                    DEFAULT_NUM_TRIALS,
                    "How many times would you like to run the simulation?",
                ),
                _number_field(
                    "Simulations / second",
                    "input-simulation-rate",
                    DEFAULT_TRIAL_RATE,
                    "How many times should the simulation run per second?",
                ),
                dbc.Button("Run Simulation", id="run-button", color="primary", className="me-2"),
                dbc.Button("Stop", id="stop-button", color="secondary", outline=True),
                html.Div(id="form-message", className="mt-3 small"),
            ]
        ),
        className="shadow-sm",
    )

    app.layout = dbc.Container(
        [
            html.H3("Monte Carlo Sandbox", className="fw-bold mt-3"),
            dcc.Interval(
                id="live-refresh",
                interval=int(driver.refresh_interval * 1000),
                n_intervals=0,
            ),
            dbc.Row(
                [
                    dbc.Col(form, md=3),
                    dbc.Col(
                        [
                            dbc.Progress(id="live-progress", value=0, className="mb-2"),
                            dcc.Graph(id="live-distribution"),
                            html.Div(id="stat-expected"),
                            html.Div(id="stat-count"),
                        ],
                        md=9,
                    ),
                ],
                className="g-3 mt-1",
            ),
        ],
        fluid=True,
        className=f"theme-{theme_obj['name']} pb-4",
    )

    register_live_callbacks(app, driver, theme_obj)

    return app


def register_live_callbacks(app: Dash, driver: SimulationDriver, theme: dict) -> None:
    @app.callback(
        Output("form-message", "children"),
        Input("run-button", "n_clicks"),
        Input("stop-button", "n_clicks"),
        State("input-num-dice", "value"),
        State("input-num-iterations", "value"),
        State("input-simulation-rate", "value"),
        prevent_initial_call=True,
    )
    def handle_controls(_run_clicks, _stop_clicks, num_dice, num_iterations, rate):
        if ctx.triggered_id == "stop-button":
            return "Simulation stopped." if driver.stop() else no_update
        try:
            config = parse_form_inputs(num_dice, num_iterations, rate)
        except ConfigurationError as exc:
            LOGGER.info("Rejected dashboard configuration: %s", exc)
            return dbc.Alert(str(exc), color="danger", className="mb-0")
        run_id = driver.configure(config)
        return f"Run {run_id} started."

    @app.callback(
        Output("live-distribution", "figure"),
        Output("live-progress", "value"),
        Output("live-progress", "label"),
        Output("stat-expected", "children"),
        Output("stat-count", "children"),
        Output("input-num-dice", "disabled"),
        Output("input-num-iterations", "disabled"),
        Output("input-simulation-rate", "disabled"),
        Output("run-button", "disabled"),
        Input("live-refresh", "n_intervals"),
    )
    def update_live_dashboard(_):
        progress = driver.latest_progress()
        figure = build_distribution_figure(progress.summary, theme=theme)
        percent = round(progress.progress_fraction * 100)
        locked = progress.running
        return (
            figure,
            percent,
            f"{progress.completed}/{progress.target}" if progress.target else "",
            f"Expected value: {progress.expected_value:.2f}",
            f"Number of simulations: {progress.completed}",
            locked,
            locked,
            locked,
            locked,
        )


def main(host: str = "127.0.0.1", port: int = 8050, debug: bool = False) -> None:
    """Serve the live dashboard until interrupted."""
    with SimulationDriver() as driver:
        app = create_live_dashboard_app(driver)
        app.run(host=host, port=port, debug=debug)


__all__ = ["create_live_dashboard_app", "register_live_callbacks", "main"]
