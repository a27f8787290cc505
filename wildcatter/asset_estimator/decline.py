"""
Illustrative decline overlay for production charts.

Fixed-exponent exponential: q(i) = q_anchor × e^(−k·i), k = 0.05 per month,
anchored on the first sample in the order supplied. This is a display aid,
not a fitted forecast; only the formula is guaranteed.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import numpy as np

from wildcatter.asset_estimator.models import ProductionSample

DEFAULT_MONTHLY_EXPONENT = 0.05

# Commodity → ProductionSample volume field; anything else reads oil
VOLUME_FIELDS: dict[str, str] = {
    "oil": "oil_volume_bbl",
    "gas": "gas_volume_mcf",
    "mining": "ore_volume_tons",
}


def volume_for(sample: ProductionSample, commodity: str | None) -> float:
    """Volume of the commodity's field in one sample; missing → 0.0."""
    field = VOLUME_FIELDS.get((commodity or "").strip().lower(), "oil_volume_bbl")
    value = getattr(sample, field)
    return float(value) if value is not None else 0.0


def decline_overlay(
    history: Sequence[ProductionSample],
    commodity: str | None = None,
    *,
    monthly_exponent: float = DEFAULT_MONTHLY_EXPONENT,
) -> list[tuple[date, float]]:
    """
    Overlay values aligned with `history`, one per sample.

    Returns [(month, anchor × exp(−monthly_exponent × i)), ...]; empty history → [].
    """
    if not history:
        return []
    anchor = volume_for(history[0], commodity)
    curve = anchor * np.exp(-monthly_exponent * np.arange(len(history), dtype=float))
    return [(s.month, float(q)) for s, q in zip(history, curve)]
