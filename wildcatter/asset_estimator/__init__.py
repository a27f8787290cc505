"""
Asset Financial & Risk Estimator.

A pure estimation engine for producing assets (wells, mines): monthly revenue,
operating cost, net cash flow, breakeven price and a 0–100 risk score.
No database, no HTTP: callers pass plain records in and get plain records back.

Public API:
    from wildcatter.asset_estimator.estimator import estimate_asset
    from wildcatter.asset_estimator.aggregator import calculate_all
    from wildcatter.asset_estimator.revenue import estimate_revenue
    from wildcatter.asset_estimator.risk_scorer import calculate_risk_score
    from wildcatter.asset_estimator.costs import estimate_costs
    from wildcatter.asset_estimator.decline import decline_overlay
    from wildcatter.asset_estimator.config import EstimatorSettings, load_settings
"""
