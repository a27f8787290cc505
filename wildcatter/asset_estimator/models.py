"""Pydantic data models for the asset financial & risk estimator."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Enumerations ──────────────────────────────────────────────────────────────

class Commodity(str, Enum):
    oil = "oil"
    gas = "gas"
    mining = "mining"
    energy = "energy"


class EstimateStatus(str, Enum):
    computed = "computed"                            # fresh estimate from production data
    stored = "stored"                                # caller-supplied persisted estimate
    no_production_history = "no_production_history"  # precondition violated: nothing to estimate from
    failed = "failed"                                # computation raised; see reason


# ── Input Models ──────────────────────────────────────────────────────────────

class ProductionSample(BaseModel):
    """One month of production for one asset (one row of production_records)."""
    model_config = ConfigDict(frozen=True)

    month: date = Field(..., description="Calendar month (first day of month)")
    oil_volume_bbl: float | None = Field(None, ge=0.0, description="Oil produced in the month (bbl)")
    gas_volume_mcf: float | None = Field(None, ge=0.0, description="Gas produced in the month (mcf)")
    ore_volume_tons: float | None = Field(None, ge=0.0, description="Ore produced in the month (tons)")
    water_cut_pct: float | None = Field(None, description="Water cut (%); out-of-range values are clamped by the risk scorer")
    downtime_days: float | None = Field(None, ge=0.0, description="Days offline in the month")


class AssetProfile(BaseModel):
    """Read-only projection of an asset row plus its operator's compliance flags."""
    model_config = ConfigDict(frozen=True)

    asset_type: Commodity = Commodity.oil
    commodity: str | None = Field(None, description="Free-text commodity tag; overrides asset_type for pricing")
    basin: str | None = None
    decline_rate: float | None = Field(None, description="Fractional annual decline; negative or > saturation clamped by the risk scorer")
    spud_date: date | None = None
    operator_compliance_flags: list[str] = Field(default_factory=list)

    @field_validator("asset_type", mode="before")
    @classmethod
    def normalise_asset_type(cls, v: Any) -> Any:
        """Case-insensitive match; None, blank or unrecognised types fall back to oil."""
        if isinstance(v, Commodity):
            return v
        key = str(v or "").strip().lower()
        return key if key in Commodity.__members__ else Commodity.oil

    @property
    def effective_commodity(self) -> str:
        """Commodity used for pricing and volume selection: commodity tag, else asset type."""
        tag = (self.commodity or "").strip().lower()
        return tag or self.asset_type.value


# ── Calculation Result Models ─────────────────────────────────────────────────

class RevenueEstimate(BaseModel):
    monthly_revenue: float
    annual_revenue: float             # monthly_revenue × 12
    price_used: float
    commodity: str                    # normalised commodity key
    price_source: Literal["benchmark", "override"] = "benchmark"


class CostEstimate(BaseModel):
    monthly_cost: float
    annual_cost: float                # monthly_cost × 12
    cost_per_unit: float | None = None
    asset_type: str
    basin: str = "default"
    basis: Literal["revenue_fraction", "unit_benchmark"] = "unit_benchmark"


class RiskFactors(BaseModel):
    """Per-factor sub-scores, each rounded for display."""
    decline_rate: int = 0
    compliance: int = 0
    asset_age: int = 0
    water_cut: int = 0


class RiskScoreResult(BaseModel):
    total_score: int = Field(..., ge=0, le=100)
    factors: RiskFactors = Field(default_factory=RiskFactors)


class FinancialEstimate(BaseModel):
    """
    Monthly revenue / cost / cash-flow estimate for one asset as of one date.

    Invariants:
      annual_revenue == monthly_revenue × 12
      estimated_net_cash_flow == monthly_revenue − estimated_operating_cost
    """
    monthly_revenue: float
    annual_revenue: float
    price_used: float
    commodity: str
    monthly_volume: float             # volume the revenue was priced on
    estimated_operating_cost: float
    estimated_net_cash_flow: float
    breakeven_price: float | None = None    # unit price at which net cash flow = 0
    price_sensitivity: float | None = None  # d(net cash flow)/d(price), USD per $1/unit
    as_of_date: date

    def to_row(self) -> dict[str, Any]:
        """Shape of a financial_estimates row, for callers that persist the estimate."""
        return {
            "estimated_revenue": self.monthly_revenue,
            "estimated_operating_cost": self.estimated_operating_cost,
            "estimated_net_cash_flow": self.estimated_net_cash_flow,
            "breakeven_price": self.breakeven_price,
            "price_sensitivity": self.price_sensitivity,
            "as_of_date": self.as_of_date.isoformat(),
        }


class EstimateOutcome(BaseModel):
    """
    Result of one estimation attempt.

    Distinguishes a real estimate (computed / stored) from "no data to estimate
    from" and from "the computation failed", so a zero estimate is never
    ambiguous.
    """
    status: EstimateStatus
    estimate: FinancialEstimate | None = None
    risk: RiskScoreResult | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status in (EstimateStatus.computed, EstimateStatus.stored)


class SensitivityRow(BaseModel):
    """One row of the price sensitivity table (operating cost held fixed)."""
    price_change_pct: float
    price: float
    monthly_revenue: float
    estimated_net_cash_flow: float
    delta_net_cash_flow: float        # vs. base case
