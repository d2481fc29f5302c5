import unittest

from dash import Dash

from mc_sandbox.core.aggregator import aggregate
from mc_sandbox.models.outcome import Outcome
from mc_sandbox.runtime.simulation_driver import SimulationDriver
from mc_sandbox.visualization import (
    DARK_THEME,
    DEFAULT_THEME,
    build_distribution_figure,
    create_live_dashboard_app,
    resolve_theme,
)


class DistributionChartTests(unittest.TestCase):
    def test_bar_per_sum_value(self) -> None:
        summary = aggregate([Outcome(sum=s, values=(s,)) for s in (2, 5, 5, 6)])
        figure = build_distribution_figure(summary)
        self.assertEqual(len(figure.data), 1)
        bar = figure.data[0]
        self.assertEqual(bar.type, "bar")
        self.assertEqual(list(bar.x), [2, 5, 6])
        self.assertEqual(list(bar.y), [25.0, 50.0, 25.0])
        self.assertIn("4 simulations", figure.layout.title.text)

    def test_empty_summary_has_placeholder(self) -> None:
        figure = build_distribution_figure(aggregate([]))
        self.assertEqual(len(figure.data), 0)
        self.assertEqual(len(figure.layout.annotations), 1)

    def test_theme_lookup(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("DARK"), DARK_THEME)
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)


class LiveDashboardTests(unittest.TestCase):
    def test_app_builds_with_form_and_refresh(self) -> None:
        with SimulationDriver(refresh_interval=0.1) as driver:
            app = create_live_dashboard_app(driver)
            self.assertIsInstance(app, Dash)
            layout = str(app.layout)
            for component_id in ("input-num-dice", "input-num-iterations", "input-simulation-rate", "live-refresh"):
                self.assertIn(component_id, layout)


if __name__ == "__main__":
    unittest.main()
