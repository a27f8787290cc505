"""Operating (lifting) cost estimation."""

from __future__ import annotations

from wildcatter.asset_estimator.config import (
    DEFAULT_SETTINGS,
    FALLBACK_COMMODITY,
    EstimatorSettings,
)
from wildcatter.asset_estimator.models import CostEstimate


def estimate_costs(
    monthly_production: float,
    asset_type: str | None,
    basin: str | None = None,
    *,
    settings: EstimatorSettings | None = None,
) -> CostEstimate:
    """
    Operating cost from static per-unit benchmarks by asset type and basin.

    Unknown asset type → oil table; unknown or missing basin → the type's default.
    """
    settings = settings or DEFAULT_SETTINGS
    type_key = (asset_type or "").strip().lower() or FALLBACK_COMMODITY
    basin_key = (basin or "").strip().lower() or "default"

    table = settings.cost_benchmarks.get(type_key, settings.cost_benchmarks[FALLBACK_COMMODITY])
    cost_per_unit = table.get(basin_key, table["default"])
    monthly_cost = monthly_production * cost_per_unit

    return CostEstimate(
        monthly_cost=monthly_cost,
        annual_cost=monthly_cost * 12,
        cost_per_unit=cost_per_unit,
        asset_type=type_key,
        basin=basin or "default",
        basis="unit_benchmark",
    )


def cost_from_benchmark_revenue(
    monthly_production: float,
    commodity: str | None,
    *,
    settings: EstimatorSettings | None = None,
) -> CostEstimate:
    """
    Operating cost as a fixed fraction of benchmark revenue.

    cost_per_unit = operating_cost_fraction × benchmark price. The benchmark,
    not any price override, sets the cost, so the cost does not move with the
    realised price and breakeven = cost / volume holds exactly.
    """
    settings = settings or DEFAULT_SETTINGS
    key = (commodity or "").strip().lower() or FALLBACK_COMMODITY
    cost_per_unit = settings.operating_cost_fraction * settings.price_for(key)
    monthly_cost = monthly_production * cost_per_unit
    return CostEstimate(
        monthly_cost=monthly_cost,
        annual_cost=monthly_cost * 12,
        cost_per_unit=cost_per_unit,
        asset_type=key,
        basis="revenue_fraction",
    )
