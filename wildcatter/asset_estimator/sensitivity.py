"""
Price sensitivity table for a computed FinancialEstimate.

One-way sensitivity on unit price:
  - Reprices the estimate's monthly volume at base price × (1 + factor)
  - Holds the operating cost fixed in dollars (same assumption as breakeven)
  - Returns rows ordered by price change, lowest first
"""

from __future__ import annotations

from collections.abc import Iterable

from wildcatter.asset_estimator.models import FinancialEstimate, SensitivityRow

DEFAULT_PRICE_RANGES: tuple[float, ...] = (-0.20, -0.10, 0.10, 0.20)


def run_price_sensitivity(
    estimate: FinancialEstimate,
    ranges: Iterable[float] | None = None,
) -> list[SensitivityRow]:
    """
    Net cash flow at perturbed prices.

    Args:
        estimate: Base case estimate (price_used, monthly_volume, operating cost)
        ranges: Perturbation fractions; defaults to [-0.20, -0.10, +0.10, +0.20]

    Returns:
        List of SensitivityRow sorted by price_change_pct ascending
    """
    if ranges is None:
        ranges = DEFAULT_PRICE_RANGES

    base_net = estimate.estimated_net_cash_flow
    rows: list[SensitivityRow] = []

    for factor in sorted(set(ranges)):
        price = estimate.price_used * (1 + factor)
        revenue = estimate.monthly_volume * price
        net = revenue - estimate.estimated_operating_cost
        rows.append(SensitivityRow(
            price_change_pct=round(factor * 100.0, 4),
            price=price,
            monthly_revenue=revenue,
            estimated_net_cash_flow=net,
            delta_net_cash_flow=net - base_net,
        ))

    return rows
