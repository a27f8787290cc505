"""
Rule-based asset risk score: 0 (low risk) to 100 (high risk).

Four independently capped linear factors (see config.RiskWeights):

    Decline rate   0–30   saturates at 50% annual decline
    Compliance     0–25   5 points per operator flag, saturates at 5 flags
    Asset age      0–25   saturates at 20 Julian years since spud
    Water cut      0–20   saturates at 80% water cut

Missing inputs contribute zero: absent data is neither evidence of risk nor of
safety. The scorer is a pure rule, not a validator, and never raises for
out-of-range values; they simply saturate.
"""

from __future__ import annotations

import math
from collections.abc import Collection
from datetime import date, datetime, timezone

from wildcatter.asset_estimator.config import (
    DEFAULT_SETTINGS,
    EstimatorSettings,
    RiskFactorRule,
)
from wildcatter.asset_estimator.models import RiskFactors, RiskScoreResult

_SECONDS_PER_DAY = 86_400.0


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() is banker's rounding)."""
    return int(math.floor(value + 0.5))


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def asset_age_years(
    spud_date: date | datetime,
    as_of: date | datetime | None = None,
    days_per_year: float = 365.25,
) -> float:
    """Elapsed Julian years from spud_date to as_of (default: now, UTC). Negative if spud is in the future."""
    end = _as_datetime(as_of) if as_of is not None else datetime.now(timezone.utc)
    elapsed = (end - _as_datetime(spud_date)).total_seconds()
    return elapsed / (days_per_year * _SECONDS_PER_DAY)


def factor_score(driver: float | None, rule: RiskFactorRule) -> float:
    """Unrounded sub-score: clamp(driver / saturation × cap, 0, cap). None/NaN → 0."""
    if driver is None or math.isnan(driver):
        return 0.0
    return max(0.0, min(rule.cap, (driver / rule.saturation) * rule.cap))


def calculate_risk_score(
    decline_rate: float | None = None,
    compliance_flags: Collection[str] | None = None,
    spud_date: date | datetime | None = None,
    water_cut_pct: float | None = None,
    *,
    as_of: date | datetime | None = None,
    settings: EstimatorSettings | None = None,
) -> RiskScoreResult:
    """
    Combine the four capped factors into one score.

    The total is rounded once from the raw (capped) sub-scores and clamped to
    [0, 100]; the per-factor breakdown is rounded separately for display, so
    the reported factors need not sum exactly to the total.

    Args:
        decline_rate: Fractional annual decline (0.25 = 25%); >1.0 allowed
        compliance_flags: Operator compliance/violation markers
        spud_date: Date production began; age measured to as_of
        water_cut_pct: Latest water cut (%)
        as_of: Evaluation time for asset age (default: now, UTC)
        settings: Caps and saturation points (defaults to DEFAULT_SETTINGS)
    """
    weights = (settings or DEFAULT_SETTINGS).risk

    decline_score = factor_score(decline_rate, weights.decline_rate)
    flag_count = len(compliance_flags or ())
    compliance_score = min(weights.compliance.cap, flag_count * weights.compliance_points_per_flag)

    age_score = 0.0
    if spud_date is not None:
        age_years = asset_age_years(spud_date, as_of, weights.days_per_year)
        age_score = factor_score(age_years, weights.asset_age)

    water_cut_score = factor_score(water_cut_pct, weights.water_cut)

    raw_total = decline_score + compliance_score + age_score + water_cut_score
    total = min(100, max(0, round_half_up(raw_total)))

    return RiskScoreResult(
        total_score=total,
        factors=RiskFactors(
            decline_rate=round_half_up(decline_score),
            compliance=round_half_up(compliance_score),
            asset_age=round_half_up(age_score),
            water_cut=round_half_up(water_cut_score),
        ),
    )
