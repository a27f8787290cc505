"""
Revenue estimation: monthly production volume × commodity price.

Pure: no I/O, no logging. Total over finite inputs; unrecognised commodities
are priced at the oil benchmark rather than rejected.
"""

from __future__ import annotations

from wildcatter.asset_estimator.config import (
    DEFAULT_SETTINGS,
    FALLBACK_COMMODITY,
    EstimatorSettings,
)
from wildcatter.asset_estimator.models import RevenueEstimate


def normalise_commodity(commodity: str | None) -> str:
    """Lower-case, stripped commodity key; empty or None → 'oil'."""
    key = (commodity or "").strip().lower()
    return key or FALLBACK_COMMODITY


def resolve_price(
    commodity: str | None,
    price_override: float | None = None,
    settings: EstimatorSettings | None = None,
) -> tuple[float, str]:
    """
    Return (price, source) where source is "override" or "benchmark".

    An override always wins, including 0.0.
    """
    if price_override is not None:
        return float(price_override), "override"
    settings = settings or DEFAULT_SETTINGS
    return settings.price_for(normalise_commodity(commodity)), "benchmark"


def estimate_revenue(
    monthly_production: float,
    commodity: str | None = None,
    price_override: float | None = None,
    *,
    settings: EstimatorSettings | None = None,
) -> RevenueEstimate:
    """
    Revenue = monthly production × price.

    Negative production is passed through (reversals, prior-period adjustments).

    Args:
        monthly_production: Volume for one month (bbl, mcf or tons)
        commodity: Commodity tag, matched case-insensitively
        price_override: Price per unit; takes precedence over the benchmark table
        settings: Benchmark table source (defaults to DEFAULT_SETTINGS)
    """
    key = normalise_commodity(commodity)
    price, source = resolve_price(key, price_override, settings)
    monthly_revenue = monthly_production * price

    return RevenueEstimate(
        monthly_revenue=monthly_revenue,
        annual_revenue=monthly_revenue * 12,
        price_used=price,
        commodity=key,
        price_source=source,
    )
