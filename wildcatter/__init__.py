"""Wildcatter energy asset tracking: financial estimates and risk scoring."""

from __future__ import annotations


def __getattr__(name: str):
    """Lazy imports: keeps package import free of pydantic/numpy until needed."""
    if name == "estimate_asset":
        from wildcatter.asset_estimator.estimator import estimate_asset
        return estimate_asset
    if name == "calculate_all":
        from wildcatter.asset_estimator.aggregator import calculate_all
        return calculate_all
    raise AttributeError(f"module 'wildcatter' has no attribute {name!r}")


__all__ = ["estimate_asset", "calculate_all"]
