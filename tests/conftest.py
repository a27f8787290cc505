"""Shared fixtures for the wildcatter estimator test suite."""
from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from helpers import (  # type: ignore[import]
    AS_OF,
    ASSET_ROW,
    PRODUCTION_ROWS,
    make_asset,
    make_sample,
)
from wildcatter.asset_estimator.models import AssetProfile, ProductionSample

__all__ = ["AS_OF", "ASSET_ROW", "PRODUCTION_ROWS", "make_asset", "make_sample"]


# ── Record fixtures ───────────────────────────────────────────────────────────


@pytest.fixture()
def bare_oil_asset() -> AssetProfile:
    """Oil asset with no decline rate, flags, spud date or basin."""
    return make_asset(asset_type="oil")


@pytest.fixture()
def risky_oil_asset() -> AssetProfile:
    """Oil asset: 25% decline, 2 compliance flags, spudded 10 years before AS_OF."""
    return make_asset(
        asset_type="oil",
        basin="Permian Basin",
        decline_rate=0.25,
        spud_date=date(2015, 1, 1),
        operator_compliance_flags=["H-15 overdue", "W-10 late filing"],
    )


@pytest.fixture()
def single_month_history() -> list[ProductionSample]:
    """One month, 1,000 bbl, no water cut."""
    return [make_sample(date(2025, 1, 1), oil_volume_bbl=1000.0)]


@pytest.fixture()
def mixed_history() -> list[ProductionSample]:
    """Three months, most recent first, all volume fields populated."""
    return [
        make_sample(date(2025, 1, 1), oil_volume_bbl=1000.0, gas_volume_mcf=2400.0,
                    ore_volume_tons=500.0, water_cut_pct=40.0, downtime_days=2),
        make_sample(date(2024, 12, 1), oil_volume_bbl=1200.0, gas_volume_mcf=2600.0,
                    ore_volume_tons=550.0, water_cut_pct=38.0),
        make_sample(date(2024, 11, 1), oil_volume_bbl=1300.0, gas_volume_mcf=2800.0,
                    ore_volume_tons=600.0, water_cut_pct=36.0),
    ]


# ── File fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture()
def inputs_json(tmp_path) -> Path:
    """Write an asset + production history JSON file in the CLI input format."""
    path = tmp_path / "test_well.json"
    path.write_text(json.dumps({"asset": ASSET_ROW, "production_history": PRODUCTION_ROWS}), encoding="utf-8")
    return path


@pytest.fixture()
def empty_history_json(tmp_path) -> Path:
    path = tmp_path / "shut_in_well.json"
    path.write_text(json.dumps({"asset": ASSET_ROW, "production_history": []}), encoding="utf-8")
    return path


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove any WILDCATTER_* settings overrides from the environment."""
    for var in (
        "WILDCATTER_SETTINGS_JSON",
        "WILDCATTER_OIL_PRICE",
        "WILDCATTER_GAS_PRICE",
        "WILDCATTER_MINING_PRICE",
        "WILDCATTER_OPERATING_COST_FRACTION",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
