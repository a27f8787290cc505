"""
Asset estimator: main orchestrator for the cache-miss path.

Called by the asset-detail data collaborator with plain rows. Returns the
stored estimate when one exists; otherwise parses the rows and delegates to
calculate_all(). Never raises: every failure becomes an EstimateOutcome so the
rest of the asset record can still be served.

Usage (Python API):
    from wildcatter.asset_estimator.estimator import estimate_asset
    outcome = estimate_asset(asset_row, production_rows, stored_estimate=cached_row)
    if outcome.ok:
        print(outcome.estimate.estimated_net_cash_flow)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

from wildcatter.asset_estimator.aggregator import calculate_all
from wildcatter.asset_estimator.config import EstimatorSettings
from wildcatter.asset_estimator.models import (
    AssetProfile,
    EstimateOutcome,
    EstimateStatus,
    FinancialEstimate,
    ProductionSample,
)

log = logging.getLogger(__name__)


def parse_asset(asset: AssetProfile | Mapping[str, Any]) -> AssetProfile:
    """Accept an AssetProfile or an asset row (compliance_flags accepted as an alias)."""
    if isinstance(asset, AssetProfile):
        return asset
    data = dict(asset)
    if "operator_compliance_flags" not in data and "compliance_flags" in data:
        data["operator_compliance_flags"] = data.pop("compliance_flags")
    if data.get("operator_compliance_flags") is None:
        data.pop("operator_compliance_flags", None)
    return AssetProfile.model_validate(data)


def parse_history(
    rows: Sequence[ProductionSample | Mapping[str, Any]],
) -> list[ProductionSample]:
    """Accept ProductionSample models or production_records rows (order preserved)."""
    return [
        r if isinstance(r, ProductionSample) else ProductionSample.model_validate(dict(r))
        for r in rows
    ]


def load_inputs(path: str | Path) -> tuple[AssetProfile, list[ProductionSample]]:
    """Read {"asset": {...}, "production_history": [...]} from a JSON file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_asset(data.get("asset") or {}), parse_history(data.get("production_history") or [])


def estimate_asset(
    asset: AssetProfile | Mapping[str, Any],
    production_history: Sequence[ProductionSample | Mapping[str, Any]],
    *,
    stored_estimate: FinancialEstimate | Mapping[str, Any] | None = None,
    price_override: float | None = None,
    as_of: date | datetime | None = None,
    settings: EstimatorSettings | None = None,
) -> EstimateOutcome:
    """
    Return the persisted estimate if supplied, else compute one.

    Pipeline:
      Step 1 — Short-circuit on a stored estimate (system of record wins)
      Step 2 — Parse asset + production rows
      Step 3 — Compute via calculate_all()

    Args:
        asset: AssetProfile or asset row dict
        production_history: Samples or rows, most recent first
        stored_estimate: Latest persisted financial estimate, if any
        price_override: Price per unit replacing the benchmark
        as_of: Evaluation date (default: today, UTC)
        settings: Benchmarks and policy (defaults to DEFAULT_SETTINGS)

    Returns:
        EstimateOutcome; check .ok before reading .estimate
    """
    # ── Step 1: Stored estimate ───────────────────────────────────────────────
    if stored_estimate is not None:
        try:
            stored = (
                stored_estimate if isinstance(stored_estimate, FinancialEstimate)
                else FinancialEstimate.model_validate(dict(stored_estimate))
            )
        except Exception as e:
            log.warning("Stored estimate unreadable, recomputing: %s", e)
        else:
            log.debug("Using stored estimate as of %s", stored.as_of_date)
            return EstimateOutcome(status=EstimateStatus.stored, estimate=stored)

    # ── Step 2: Parse inputs ──────────────────────────────────────────────────
    try:
        profile = parse_asset(asset)
        history = parse_history(production_history)
    except Exception as e:
        log.warning("Estimate unavailable: input parsing failed: %s", e)
        return EstimateOutcome(
            status=EstimateStatus.failed,
            reason=f"Input parsing failed: {type(e).__name__}: {e}",
        )

    log.info(
        "Estimating %s asset | commodity=%s | %d production month(s)",
        profile.asset_type.value,
        profile.effective_commodity,
        len(history),
    )

    # ── Step 3: Compute ───────────────────────────────────────────────────────
    outcome = calculate_all(
        profile,
        history,
        price_override=price_override,
        as_of=as_of,
        settings=settings,
    )

    if outcome.ok:
        log.info(
            "Estimate computed: revenue $%.0f/mo | net $%.0f/mo | risk %d",
            outcome.estimate.monthly_revenue,
            outcome.estimate.estimated_net_cash_flow,
            outcome.risk.total_score,
        )
    else:
        log.warning("Estimate unavailable (%s): %s", outcome.status.value, outcome.reason)

    return outcome
