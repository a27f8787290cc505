"""
CLI entry point for the asset financial & risk estimator.

Usage:
    # Estimate one asset
    python -m wildcatter.asset_estimator \\
        --inputs-json ./inputs/example_oil_well.json --as-of 2025-02-01

    # With a price override, sensitivity table and JSON output
    python -m wildcatter.asset_estimator \\
        --inputs-json ./inputs/example_oil_well.json --price 68.5 \\
        --sensitivity --output-dir ./outputs

    # Show benchmark price and cost tables
    python -m wildcatter.asset_estimator --show-benchmarks

Exit codes: 0 success, 1 bad input / failed estimate, 2 no production history.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def _show_benchmarks() -> None:
    """Display benchmark prices and per-unit cost tables."""
    from wildcatter.asset_estimator.config import load_settings

    settings = load_settings()

    prices = Table(title="[bold cyan]Benchmark Prices[/bold cyan]", box=box.ROUNDED)
    prices.add_column("Commodity", style="bold green")
    prices.add_column("Price / unit", justify="right")
    for key, price in sorted(settings.benchmark_prices.items()):
        prices.add_row(key, f"${price:,.2f}")
    console.print(prices)

    costs = Table(title="[bold cyan]Lifting Cost Benchmarks[/bold cyan]", box=box.ROUNDED)
    costs.add_column("Asset Type", style="bold green")
    costs.add_column("Basin")
    costs.add_column("Cost / unit", justify="right")
    for asset_type, table in sorted(settings.cost_benchmarks.items()):
        for basin, cost in table.items():
            costs.add_row(asset_type, basin, f"${cost:,.2f}")
    console.print(costs)
    console.print(
        f"\n[dim]Operating cost basis: {settings.operating_cost_basis} "
        f"(fraction {settings.operating_cost_fraction:.0%})[/dim]"
    )


def _print_outcome(outcome, sensitivity_rows=None) -> None:
    """Print the estimate and risk breakdown to console."""
    est = outcome.estimate
    risk = outcome.risk

    def _line(label: str, value) -> str:
        return f"  [bold]{label:<24}[/bold] {value}"

    def _usd(v) -> str:
        return f"${v:,.2f}" if v is not None else "N/A"

    lines = [
        _line("Commodity:", est.commodity),
        _line("Monthly volume:", f"{est.monthly_volume:,.2f}"),
        _line("Price used:", _usd(est.price_used)),
        _line("Monthly revenue:", _usd(est.monthly_revenue)),
        _line("Annual revenue:", _usd(est.annual_revenue)),
        _line("Operating cost:", _usd(est.estimated_operating_cost)),
        _line("Net cash flow:", _usd(est.estimated_net_cash_flow)),
        _line("Breakeven price:", _usd(est.breakeven_price)),
        _line("Price sensitivity:", f"{_usd(est.price_sensitivity)} per $1"),
    ]
    if risk is not None:
        f = risk.factors
        lines.append("")
        lines.append(_line("Risk score:", f"{risk.total_score}/100"))
        lines.append(
            f"  [dim]decline {f.decline_rate} · compliance {f.compliance} · "
            f"age {f.asset_age} · water cut {f.water_cut}[/dim]"
        )

    console.print(Panel(
        "\n".join(lines),
        title=f"[bold cyan]Financial Estimate — {est.as_of_date.isoformat()} ({outcome.status.value})[/bold cyan]",
        border_style="cyan",
        expand=False,
    ))

    if sensitivity_rows:
        table = Table(title="[bold cyan]Price Sensitivity[/bold cyan]", box=box.SIMPLE)
        table.add_column("Δ Price", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("Net cash flow", justify="right", style="green")
        table.add_column("Δ Net", justify="right")
        for row in sensitivity_rows:
            table.add_row(
                f"{row.price_change_pct:+.0f}%",
                f"${row.price:,.2f}",
                f"${row.estimated_net_cash_flow:,.0f}",
                f"${row.delta_net_cash_flow:+,.0f}",
            )
        console.print(table)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Wildcatter — asset financial & risk estimator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--inputs-json",
        metavar="PATH",
        help='JSON file: {"asset": {...}, "production_history": [...]} (most recent month first)',
    )
    parser.add_argument("--price", type=float, metavar="USD", help="Price per unit override")
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        metavar="YYYY-MM-DD",
        help="Evaluation date (default: today)",
    )
    parser.add_argument("--output-dir", metavar="DIR", help="Write financial_estimate.json under DIR/<asset>/")
    parser.add_argument("--sensitivity", action="store_true", help="Show the price sensitivity table")
    parser.add_argument("--show-benchmarks", action="store_true", help="Show benchmark tables and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # ── --show-benchmarks ─────────────────────────────────────────────────────
    if args.show_benchmarks:
        _show_benchmarks()
        sys.exit(0)

    if not args.inputs_json:
        parser.error("--inputs-json is required (unless --show-benchmarks)")

    inputs_path = Path(args.inputs_json)
    if not inputs_path.exists():
        console.print(f"[red]Error: inputs file not found: {inputs_path}[/red]")
        sys.exit(1)

    from wildcatter.asset_estimator.config import load_settings
    from wildcatter.asset_estimator.estimator import estimate_asset, load_inputs
    from wildcatter.asset_estimator.models import EstimateStatus
    from wildcatter.asset_estimator.report_generator import write_json_result
    from wildcatter.asset_estimator.sensitivity import run_price_sensitivity

    try:
        settings = load_settings()
        asset, history = load_inputs(inputs_path)
    except Exception as e:
        console.print(f"[red]Error: could not load inputs: {e}[/red]")
        sys.exit(1)

    outcome = estimate_asset(
        asset,
        history,
        price_override=args.price,
        as_of=args.as_of,
        settings=settings,
    )

    if args.output_dir:
        path = write_json_result(outcome, args.output_dir, inputs_path.stem)
        console.print(f"  [green]✓[/green] financial_estimate: [dim]{path}[/dim]")

    if outcome.status == EstimateStatus.no_production_history:
        console.print(f"[yellow]Estimate unavailable: {outcome.reason}[/yellow]")
        sys.exit(2)
    if not outcome.ok:
        console.print(f"[red]Estimate failed: {outcome.reason}[/red]")
        sys.exit(1)

    rows = run_price_sensitivity(outcome.estimate) if args.sensitivity else None
    _print_outcome(outcome, rows)


if __name__ == "__main__":
    main()
