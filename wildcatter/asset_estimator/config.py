"""
Benchmark prices, cost benchmarks and risk-scoring policy for the asset estimator.

Every number the calculators depend on lives here, so saturation points and
weights can be tuned (and tested) independently of the formula bodies.

Default benchmark price table (public contract; refresh as markets move):

    oil     75.00  USD/bbl   WTI benchmark
    gas      3.50  USD/mcf   Henry Hub benchmark
    mining  50.00  USD/ton   generic ore

Any commodity without an entry (including "energy") is priced at the oil
benchmark.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ── Defaults ──────────────────────────────────────────────────────────────────

FALLBACK_COMMODITY = "oil"

DEFAULT_BENCHMARK_PRICES: dict[str, float] = {
    "oil": 75.0,     # $/bbl WTI
    "gas": 3.50,     # $/mcf Henry Hub
    "mining": 50.0,  # $/ton generic
}

# Lifting cost per unit ($/bbl, $/mcf, $/ton) by asset type → basin
DEFAULT_COST_BENCHMARKS: dict[str, dict[str, float]] = {
    "oil": {
        "default": 15.0,
        "permian basin": 12.0,
        "eagle ford": 14.0,
        "bakken": 18.0,
        "midcontinent": 16.0,
    },
    "gas": {
        "default": 1.20,
        "marcellus": 0.90,
        "haynesville": 1.10,
        "permian basin": 1.00,
    },
    "mining": {
        "default": 25.0,
    },
    "energy": {
        "default": 10.0,
    },
}

# Simplified lifting-cost assumption: operating cost as a share of revenue
OPERATING_COST_FRACTION = 0.20

OperatingCostBasis = Literal["revenue_fraction", "unit_benchmark"]


# ── Risk policy ───────────────────────────────────────────────────────────────

class RiskFactorRule(BaseModel):
    """Linear sub-score: min(cap, driver / saturation × cap)."""
    model_config = ConfigDict(frozen=True)

    cap: float = Field(..., gt=0.0, description="Maximum points this factor can contribute")
    saturation: float = Field(..., gt=0.0, description="Driver value at which the cap is reached")


class RiskWeights(BaseModel):
    """Caps and saturation points for the four risk factors (caps sum to 100)."""
    model_config = ConfigDict(frozen=True)

    decline_rate: RiskFactorRule = RiskFactorRule(cap=30.0, saturation=0.50)       # 50% annual decline
    compliance: RiskFactorRule = RiskFactorRule(cap=25.0, saturation=5.0)          # 5 flags
    asset_age: RiskFactorRule = RiskFactorRule(cap=25.0, saturation=20.0)          # 20 years since spud
    water_cut: RiskFactorRule = RiskFactorRule(cap=20.0, saturation=80.0)          # 80% water cut
    days_per_year: float = Field(365.25, gt=0.0, description="Julian year used for asset age")

    @property
    def compliance_points_per_flag(self) -> float:
        return self.compliance.cap / self.compliance.saturation


# ── Settings ──────────────────────────────────────────────────────────────────

class EstimatorSettings(BaseModel):
    """Complete configuration surface for the estimator. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    benchmark_prices: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_BENCHMARK_PRICES),
        description="Benchmark price per unit keyed by lower-case commodity",
    )
    cost_benchmarks: dict[str, dict[str, float]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in DEFAULT_COST_BENCHMARKS.items()},
        description="Lifting cost per unit keyed by asset type, then lower-case basin",
    )
    operating_cost_fraction: float = Field(
        OPERATING_COST_FRACTION, ge=0.0, le=1.0,
        description="Operating cost as a fraction of benchmark revenue (revenue_fraction basis)",
    )
    operating_cost_basis: OperatingCostBasis = "revenue_fraction"
    risk: RiskWeights = Field(default_factory=RiskWeights)

    @model_validator(mode="after")
    def check_tables(self) -> "EstimatorSettings":
        if FALLBACK_COMMODITY not in self.benchmark_prices:
            raise ValueError(f"benchmark_prices must define the fallback commodity {FALLBACK_COMMODITY!r}")
        for key, price in self.benchmark_prices.items():
            if price < 0:
                raise ValueError(f"benchmark price for {key!r} must be >= 0 (got {price})")
        if FALLBACK_COMMODITY not in self.cost_benchmarks:
            raise ValueError(f"cost_benchmarks must define the fallback asset type {FALLBACK_COMMODITY!r}")
        for asset_type, table in self.cost_benchmarks.items():
            if "default" not in table:
                raise ValueError(f"cost_benchmarks[{asset_type!r}] is missing a 'default' entry")
        return self

    def price_for(self, commodity: str) -> float:
        """Benchmark price for a normalised commodity key, falling back to oil."""
        return self.benchmark_prices.get(commodity, self.benchmark_prices[FALLBACK_COMMODITY])


DEFAULT_SETTINGS = EstimatorSettings()


# Environment variable → benchmark_prices key
_PRICE_ENV_VARS: dict[str, str] = {
    "WILDCATTER_OIL_PRICE": "oil",
    "WILDCATTER_GAS_PRICE": "gas",
    "WILDCATTER_MINING_PRICE": "mining",
}


def load_settings(path: str | Path | None = None) -> EstimatorSettings:
    """
    Build EstimatorSettings from an optional JSON file plus environment overrides.

    Resolution order (later wins):
      1. Built-in defaults
      2. JSON file at `path`, or at $WILDCATTER_SETTINGS_JSON
      3. WILDCATTER_OIL_PRICE / WILDCATTER_GAS_PRICE / WILDCATTER_MINING_PRICE
      4. WILDCATTER_OPERATING_COST_FRACTION

    Raises pydantic.ValidationError for out-of-range values and ValueError for
    non-numeric environment overrides.
    """
    data: dict = {}
    path = path or os.environ.get("WILDCATTER_SETTINGS_JSON")
    if path:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

    prices = dict(data.get("benchmark_prices") or DEFAULT_BENCHMARK_PRICES)
    for env_var, key in _PRICE_ENV_VARS.items():
        val = os.environ.get(env_var)
        if val:
            prices[key] = float(val)
    data["benchmark_prices"] = prices

    fraction = os.environ.get("WILDCATTER_OPERATING_COST_FRACTION")
    if fraction:
        data["operating_cost_fraction"] = float(fraction)

    return EstimatorSettings.model_validate(data)
