"""
Estimate aggregator: composes revenue, operating cost, cash flow and risk into
one EstimateOutcome for an asset.

Fallback estimator for the cache-miss path (no persisted financial estimate).
Pure and deterministic: same inputs and as_of → identical output. Never raises;
failures come back as a typed outcome instead of a sentinel number.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date, datetime, timezone

from wildcatter.asset_estimator.config import DEFAULT_SETTINGS, EstimatorSettings
from wildcatter.asset_estimator.costs import cost_from_benchmark_revenue, estimate_costs
from wildcatter.asset_estimator.decline import VOLUME_FIELDS, volume_for
from wildcatter.asset_estimator.models import (
    AssetProfile,
    CostEstimate,
    EstimateOutcome,
    EstimateStatus,
    FinancialEstimate,
    ProductionSample,
    RevenueEstimate,
)
from wildcatter.asset_estimator.revenue import estimate_revenue
from wildcatter.asset_estimator.risk_scorer import calculate_risk_score


def volume_commodity(asset: AssetProfile) -> str:
    """Commodity whose volume field is read: the commodity tag if it names one, else the asset type."""
    commodity = asset.effective_commodity
    return commodity if commodity in VOLUME_FIELDS else asset.asset_type.value


def breakeven_price(operating_cost: float, monthly_volume: float) -> float | None:
    """
    Unit price at which net cash flow is zero, holding the operating cost fixed.

    net(P) = V × P − C  →  P* = C / V. Undefined for zero volume.
    """
    if monthly_volume == 0:
        return None
    return operating_cost / monthly_volume


def price_sensitivity(monthly_volume: float) -> float:
    """d(net cash flow)/d(price) = monthly volume (USD per month per $1/unit)."""
    return monthly_volume


def _operating_cost(
    asset: AssetProfile,
    volume: float,
    revenue: RevenueEstimate,
    settings: EstimatorSettings,
) -> CostEstimate:
    if settings.operating_cost_basis == "unit_benchmark":
        return estimate_costs(volume, asset.asset_type.value, asset.basin, settings=settings)
    # priced at the benchmark so the cost stays fixed under a price override
    return cost_from_benchmark_revenue(volume, revenue.commodity, settings=settings)


def _check_finite(**values: float | None) -> None:
    for name, value in values.items():
        if value is not None and not math.isfinite(value):
            raise ValueError(f"{name} is not finite ({value})")


def calculate_all(
    asset: AssetProfile,
    production_history: Sequence[ProductionSample],
    *,
    price_override: float | None = None,
    as_of: date | datetime | None = None,
    settings: EstimatorSettings | None = None,
) -> EstimateOutcome:
    """
    Build the financial estimate and risk score for one asset.

    Steps:
      1. Latest sample (history is most-recent-first) → representative monthly volume
      2. Revenue at benchmark or override price
      3. Operating cost (revenue fraction, or per-unit benchmark by basin)
      4. Net cash flow, breakeven price, price sensitivity
      5. Risk score (informational; does not feed the cash-flow maths)

    Args:
        asset: Asset attributes (commodity, decline rate, spud date, flags)
        production_history: Monthly samples, most recent first. Must be non-empty.
        price_override: Price per unit; replaces the benchmark
        as_of: Evaluation date stamped on the estimate and used for asset age
            (default: today, UTC)
        settings: Benchmarks and policy (defaults to DEFAULT_SETTINGS)

    Returns:
        EstimateOutcome with status computed, no_production_history (empty
        history) or failed (computation error; reason carries the detail).
    """
    if not production_history:
        return EstimateOutcome(
            status=EstimateStatus.no_production_history,
            reason="production history is empty; nothing to estimate from",
        )

    settings = settings or DEFAULT_SETTINGS
    evaluated_at = as_of if as_of is not None else datetime.now(timezone.utc)
    as_of_date = evaluated_at.date() if isinstance(evaluated_at, datetime) else evaluated_at

    try:
        latest = production_history[0]
        volume = volume_for(latest, volume_commodity(asset))

        revenue = estimate_revenue(
            volume, asset.effective_commodity, price_override, settings=settings
        )
        cost = _operating_cost(asset, volume, revenue, settings)
        net_cash_flow = revenue.monthly_revenue - cost.monthly_cost
        breakeven = breakeven_price(cost.monthly_cost, volume)

        _check_finite(
            monthly_revenue=revenue.monthly_revenue,
            operating_cost=cost.monthly_cost,
            net_cash_flow=net_cash_flow,
            breakeven_price=breakeven,
        )

        estimate = FinancialEstimate(
            monthly_revenue=revenue.monthly_revenue,
            annual_revenue=revenue.annual_revenue,
            price_used=revenue.price_used,
            commodity=revenue.commodity,
            monthly_volume=volume,
            estimated_operating_cost=cost.monthly_cost,
            estimated_net_cash_flow=net_cash_flow,
            breakeven_price=breakeven,
            price_sensitivity=price_sensitivity(volume),
            as_of_date=as_of_date,
        )

        risk = calculate_risk_score(
            decline_rate=asset.decline_rate,
            compliance_flags=asset.operator_compliance_flags,
            spud_date=asset.spud_date,
            water_cut_pct=latest.water_cut_pct,
            as_of=evaluated_at,
            settings=settings,
        )
    except Exception as e:
        return EstimateOutcome(
            status=EstimateStatus.failed,
            reason=f"{type(e).__name__}: {e}",
        )

    return EstimateOutcome(status=EstimateStatus.computed, estimate=estimate, risk=risk)
