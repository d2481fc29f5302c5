"""Typer-based command line interface for running dice simulations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..config import DEFAULT_NUM_DICE, DEFAULT_NUM_TRIALS, DEFAULT_TRIAL_RATE, LOG_LEVEL
from ..core.validator import ConfigurationError, parse_form_inputs
from ..models.progress import ProgressSnapshot
from ..runtime.simulation_driver import SimulationDriver

app = typer.Typer(help="Monte Carlo dice simulation sandbox")
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _display_distribution(progress: ProgressSnapshot) -> None:
    table = Table(title="Outcome Distribution", show_lines=False)
    table.add_column("Sum", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Percentage", justify="right")
    for value, count in progress.summary.counts.items():
        table.add_row(str(value), str(count), f"{progress.summary.percentages[value]:.2f}%")
    console.print(table)
    console.print(f"Expected value: {progress.expected_value:.2f}")
    console.print(f"Number of simulations: {progress.completed}")


@app.command()
def run(
    num_dice: int = typer.Option(DEFAULT_NUM_DICE, "--num-dice", "-d", help="Number of dice rolled per trial"),
    num_trials: int = typer.Option(
        DEFAULT_NUM_TRIALS, "--num-trials", "-n", help="How many times to run the simulation"
    ),
    trial_rate: float = typer.Option(
        DEFAULT_TRIAL_RATE, "--trial-rate", "-r", help="How many trials to run per second"
    ),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible runs"),
    chart: Optional[Path] = typer.Option(None, help="Write the final distribution chart to this HTML file"),
    theme: str = typer.Option("light", help="Chart theme: light | dark"),
    log_level: str = typer.Option(LOG_LEVEL, help="Logging level"),
) -> None:
    """Run one simulation, showing live progress, then print the distribution."""
    _configure_logging(log_level)
    try:
        config = parse_form_inputs(num_dice, num_trials, trial_rate, seed)
    except ConfigurationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2)

    with SimulationDriver() as driver:
        with Progress(
            TextColumn("[bold]Rolling {task.fields[dice]}d6"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("E = {task.fields[expected]:.2f}"),
            TimeElapsedColumn(),
            console=console,
        ) as progress_bar:
            task = progress_bar.add_task("simulation", total=config.num_trials, dice=config.num_dice, expected=0.0)

            def on_progress(snapshot: ProgressSnapshot) -> None:
                progress_bar.update(task, completed=snapshot.completed, expected=snapshot.expected_value)

            driver.subscribe(on_progress)
            driver.configure(config)
            try:
                while not driver.wait(timeout=0.25):
                    pass
            except KeyboardInterrupt:
                driver.stop()
                console.print("[yellow]Simulation stopped by user.[/yellow]")
        final = driver.latest_progress()

    _display_distribution(final)

    if chart is not None:
        from ..visualization import build_distribution_figure, resolve_theme

        figure = build_distribution_figure(final.summary, theme=resolve_theme(theme))
        chart.parent.mkdir(parents=True, exist_ok=True)
        figure.write_html(str(chart))
        console.print(f"Chart exported to: {chart}")


@app.command()
def dashboard(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8050, help="Port to serve on"),
    log_level: str = typer.Option(LOG_LEVEL, help="Logging level"),
) -> None:
    """Serve the live simulation dashboard."""
    _configure_logging(log_level)
    from ..visualization.live_simulation_view import main as serve

    serve(host=host, port=port)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
