"""Typer-based command line interface for what-if projections."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import DEFAULT_RUNS, MAX_RUNS, MIN_RUNS
from ..core.validator import InvalidParameters
from ..engine import WhatIfEngine
from ..models.parameters import AdjustmentSettings, ContributionFrequency, SimulationParameters
from ..models.results import WhatIfOutcome
from ..utils.numbers import clamp, format_currency, from_percent
from ..visualization import build_fan_chart, build_path_figure, get_theme

app = typer.Typer(help="What-if investment projections: single path or Monte Carlo")
console = Console()


class Frequency(str, Enum):
    monthly = "monthly"
    weekly = "weekly"
    daily = "daily"


class Theme(str, Enum):
    light = "light"
    matrix = "matrix"


AMOUNT_OPTION = typer.Option(10000.0, help="Lump sum, or amount per period when recurring")
RECURRING_OPTION = typer.Option(False, "--recurring/--one-off", help="Contribute the amount every period")
FREQUENCY_OPTION = typer.Option(Frequency.monthly, case_sensitive=False, help="Contribution schedule")
YEARS_OPTION = typer.Option(10, help="Investment horizon in years")
HISTORICAL_OPTION = typer.Option(
    False, "--historical/--fixed", help="Bootstrap annual returns from the historical series"
)
RATE_OPTION = typer.Option(7.0, help="Expected annual return (%) when not sampling history")
INFLATION_OPTION = typer.Option(None, help="Annual inflation (%); omit to skip the real value")
TAX_OPTION = typer.Option(None, help="Tax on gains (%); omit to skip the after-tax value")
SEED_OPTION = typer.Option(None, help="Random seed for reproducible historical sampling")
CHART_OPTION = typer.Option(None, help="Write an interactive HTML chart to this path")
THEME_OPTION = typer.Option(Theme.light, case_sensitive=False, help="Chart theme")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log progress to stderr")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_inputs(
    amount: float,
    recurring: bool,
    frequency: Frequency,
    years: int,
    historical: bool,
    rate: float,
    inflation: Optional[float],
    tax: Optional[float],
) -> tuple[SimulationParameters, AdjustmentSettings]:
    """Normalise raw option values the way the calculator form does."""
    params = SimulationParameters(
        amount=max(0.0, amount),
        recurring=recurring,
        frequency=ContributionFrequency.from_name(frequency.value),
        years=years,
        use_historical=historical,
        fixed_rate=from_percent(rate),
    )
    adjustments = AdjustmentSettings(
        inflation_enabled=inflation is not None,
        inflation_rate=from_percent(inflation) or 0.0,
        tax_enabled=tax is not None,
        tax_rate=from_percent(tax) or 0.0,
    )
    return params, adjustments


def _sample_years(years: int) -> List[int]:
    """Years shown in the ladder: every fifth year plus the horizon."""
    selected = [year for year in range(0, years + 1) if year % 5 == 0]
    if years not in selected:
        selected.append(years)
    return selected


def _headline_table(outcome: WhatIfOutcome) -> Table:
    table = Table(title="Summary", show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    nominal_label = "Median ending value" if outcome.mode == "monte_carlo" else "Ending value"
    table.add_row(nominal_label, format_currency(outcome.nominal))
    table.add_row("Total contributions", format_currency(outcome.total_contributions))
    if outcome.real is not None:
        table.add_row("Inflation-adjusted", format_currency(outcome.real))
    if outcome.after_tax is not None:
        table.add_row("After tax", format_currency(outcome.after_tax))
    if outcome.ensemble is not None:
        ensemble = outcome.ensemble
        table.add_row("P10", format_currency(ensemble.p10[-1]))
        table.add_row("P90", format_currency(ensemble.p90[-1]))
        table.add_row("Best", format_currency(ensemble.best))
        table.add_row("Worst", format_currency(ensemble.worst))
    return table


def _ladder_table(outcome: WhatIfOutcome) -> Table:
    table = Table(title="Value by year")
    table.add_column("Year", justify="right")
    if outcome.ensemble is not None:
        for column in ("P10", "Median", "P90"):
            table.add_column(column, justify="right")
        ensemble = outcome.ensemble
        for year in _sample_years(outcome.years):
            table.add_row(
                str(year),
                format_currency(ensemble.p10[year]),
                format_currency(ensemble.median[year]),
                format_currency(ensemble.p90[year]),
            )
    elif outcome.path is not None:
        table.add_column("Value", justify="right")
        for year in _sample_years(outcome.years):
            table.add_row(str(year), format_currency(outcome.path.path[year]))
    return table


def _export_chart(outcome: WhatIfOutcome, chart: Path, theme: Theme) -> None:
    selected = get_theme(theme.value)
    if outcome.ensemble is not None:
        figure = build_fan_chart(outcome.ensemble, theme=selected)
    else:
        figure = build_path_figure(outcome.path, theme=selected)
    chart.parent.mkdir(parents=True, exist_ok=True)
    figure.write_html(str(chart))
    console.print(f"Chart written to: {chart}")


def _render(outcome: WhatIfOutcome, chart: Optional[Path], theme: Theme) -> None:
    console.print(outcome.label, style="bold", markup=False)
    console.print(_headline_table(outcome))
    console.print(_ladder_table(outcome))
    if chart is not None:
        _export_chart(outcome, chart, theme)


@app.command()
def single(
    amount: float = AMOUNT_OPTION,
    recurring: bool = RECURRING_OPTION,
    frequency: Frequency = FREQUENCY_OPTION,
    years: int = YEARS_OPTION,
    historical: bool = HISTORICAL_OPTION,
    rate: float = RATE_OPTION,
    inflation: Optional[float] = INFLATION_OPTION,
    tax: Optional[float] = TAX_OPTION,
    seed: Optional[int] = SEED_OPTION,
    chart: Optional[Path] = CHART_OPTION,
    theme: Theme = THEME_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Project a single path (fixed rate, or one historical resample)."""
    _configure_logging(verbose)
    params, adjustments = _build_inputs(
        amount, recurring, frequency, years, historical, rate, inflation, tax
    )
    try:
        outcome = WhatIfEngine(seed=seed).run_single(params, adjustments)
    except InvalidParameters as exc:
        raise typer.BadParameter(str(exc)) from exc
    _render(outcome, chart, theme)


@app.command("monte-carlo")
def monte_carlo(
    amount: float = AMOUNT_OPTION,
    recurring: bool = RECURRING_OPTION,
    frequency: Frequency = FREQUENCY_OPTION,
    years: int = YEARS_OPTION,
    historical: bool = typer.Option(
        True, "--historical/--fixed", help="Bootstrap annual returns from the historical series"
    ),
    rate: float = RATE_OPTION,
    inflation: Optional[float] = INFLATION_OPTION,
    tax: Optional[float] = TAX_OPTION,
    runs: int = typer.Option(
        DEFAULT_RUNS, help=f"Number of simulated paths (clamped to {MIN_RUNS}-{MAX_RUNS})"
    ),
    seed: Optional[int] = SEED_OPTION,
    chart: Optional[Path] = CHART_OPTION,
    theme: Theme = THEME_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Run a Monte Carlo ensemble and report percentile bands."""
    _configure_logging(verbose)
    params, adjustments = _build_inputs(
        amount, recurring, frequency, years, historical, rate, inflation, tax
    )
    runs = int(clamp(runs, MIN_RUNS, MAX_RUNS))
    try:
        outcome = WhatIfEngine(seed=seed).run_monte_carlo(params, runs, adjustments)
    except InvalidParameters as exc:
        raise typer.BadParameter(str(exc)) from exc
    _render(outcome, chart, theme)


def main() -> None:
    """Entry point for CLI execution."""
    app()


if __name__ == "__main__":
    main()
