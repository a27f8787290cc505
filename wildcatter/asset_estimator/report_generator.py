"""Output writers: JSON artefact and financial_estimates row shape."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wildcatter.asset_estimator.models import EstimateOutcome

RESULT_FILENAME = "financial_estimate.json"


def outcome_to_row(outcome: EstimateOutcome, asset_id: str) -> dict[str, Any] | None:
    """financial_estimates row for an ok outcome; None when there is nothing to persist."""
    if not outcome.ok or outcome.estimate is None:
        return None
    return {"asset_id": asset_id, **outcome.estimate.to_row()}


def write_json_result(outcome: EstimateOutcome, output_dir: str | Path, asset_id: str) -> Path:
    """Write the full EstimateOutcome to <output_dir>/<asset_id>/financial_estimate.json."""
    run_dir = Path(output_dir) / asset_id
    run_dir.mkdir(parents=True, exist_ok=True)
    json_path = run_dir / RESULT_FILENAME
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(outcome.model_dump(mode="json"), f, indent=2, default=str)
    return json_path
