"""
Shared test helpers: record builders and constants.

Import these directly in tests that need ad-hoc records outside a fixture:

    from helpers import AS_OF, make_asset, make_sample
"""
from __future__ import annotations

from datetime import date

from wildcatter.asset_estimator.models import AssetProfile, ProductionSample

# Fixed evaluation date so asset-age scores are reproducible
AS_OF = date(2025, 1, 1)


def make_sample(month: date = date(2025, 1, 1), **fields) -> ProductionSample:
    """ProductionSample with only the given volume fields set."""
    return ProductionSample(month=month, **fields)


def make_asset(**fields) -> AssetProfile:
    """AssetProfile defaulting to a bare oil asset (no decline, flags, spud or basin)."""
    return AssetProfile(**fields)


def monthly_history(volumes: list[float], field: str = "oil_volume_bbl", start_year: int = 2024) -> list[ProductionSample]:
    """Most-recent-first history: volumes[0] is December of start_year, then backwards."""
    samples = []
    for i, v in enumerate(volumes):
        samples.append(ProductionSample(month=date(start_year, 12 - i, 1), **{field: v}))
    return samples


# Asset row as a data-access layer would return it (numerics as strings)
ASSET_ROW = {
    "id": "asset-0001",
    "name": "Test Well 1H",
    "asset_type": "oil",
    "commodity": None,
    "basin": "Permian Basin",
    "decline_rate": "0.2500",
    "spud_date": "2015-01-01",
    "compliance_flags": ["H-15 overdue", "W-10 late filing"],
}

PRODUCTION_ROWS = [
    {"month": "2025-01-01", "oil_volume_bbl": "1000.00", "gas_volume_mcf": "2400.00",
     "ore_volume_tons": None, "water_cut_pct": "40.00", "downtime_days": "2"},
    {"month": "2024-12-01", "oil_volume_bbl": "1050.00", "gas_volume_mcf": "2500.00",
     "ore_volume_tons": None, "water_cut_pct": "38.00", "downtime_days": "0"},
]
