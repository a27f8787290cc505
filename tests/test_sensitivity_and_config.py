"""Unit tests for the price sensitivity table (sensitivity.py) and settings (config.py)."""

import json

import pytest
from pydantic import ValidationError

from helpers import AS_OF  # type: ignore[import]
from wildcatter.asset_estimator.config import (
    DEFAULT_BENCHMARK_PRICES,
    DEFAULT_SETTINGS,
    OPERATING_COST_FRACTION,
    EstimatorSettings,
    load_settings,
)
from wildcatter.asset_estimator.models import FinancialEstimate
from wildcatter.asset_estimator.sensitivity import run_price_sensitivity


def _estimate(volume: float = 1000.0, price: float = 75.0, cost: float = 15_000.0) -> FinancialEstimate:
    revenue = volume * price
    return FinancialEstimate(
        monthly_revenue=revenue,
        annual_revenue=revenue * 12,
        price_used=price,
        commodity="oil",
        monthly_volume=volume,
        estimated_operating_cost=cost,
        estimated_net_cash_flow=revenue - cost,
        breakeven_price=cost / volume if volume else None,
        price_sensitivity=volume,
        as_of_date=AS_OF,
    )


# ── Price sensitivity ─────────────────────────────────────────────────────────


class TestPriceSensitivity:
    def test_default_ranges_sorted(self):
        rows = run_price_sensitivity(_estimate())
        assert [r.price_change_pct for r in rows] == [-20.0, -10.0, 10.0, 20.0]

    def test_plus_ten_percent(self):
        row = run_price_sensitivity(_estimate(), ranges=[0.10])[0]
        assert row.price == pytest.approx(82.5)
        assert row.monthly_revenue == pytest.approx(82_500.0)
        assert row.estimated_net_cash_flow == pytest.approx(67_500.0)
        assert row.delta_net_cash_flow == pytest.approx(7_500.0)

    def test_delta_is_linear_in_price(self):
        est = _estimate()
        for row in run_price_sensitivity(est, ranges=[-0.5, -0.2, 0.3]):
            expected = est.price_sensitivity * (row.price - est.price_used)
            assert row.delta_net_cash_flow == pytest.approx(expected)

    def test_breakeven_row_has_zero_net(self):
        # price 75 → 15 is a -80% move
        row = run_price_sensitivity(_estimate(), ranges=[-0.80])[0]
        assert row.estimated_net_cash_flow == pytest.approx(0.0, abs=1e-6)

    def test_zero_volume_is_flat(self):
        rows = run_price_sensitivity(_estimate(volume=0.0, cost=0.0))
        assert all(r.delta_net_cash_flow == 0.0 for r in rows)


# ── Settings ──────────────────────────────────────────────────────────────────


class TestSettingsDefaults:
    def test_default_table(self):
        assert DEFAULT_SETTINGS.benchmark_prices == {"oil": 75.0, "gas": 3.50, "mining": 50.0}
        assert DEFAULT_SETTINGS.operating_cost_fraction == OPERATING_COST_FRACTION == 0.20
        assert DEFAULT_SETTINGS.operating_cost_basis == "revenue_fraction"

    def test_default_risk_caps_sum_to_100(self):
        r = DEFAULT_SETTINGS.risk
        assert r.decline_rate.cap + r.compliance.cap + r.asset_age.cap + r.water_cut.cap == 100.0

    def test_price_for_falls_back_to_oil(self):
        assert DEFAULT_SETTINGS.price_for("energy") == 75.0

    def test_defaults_are_not_shared_mutable_state(self):
        settings = EstimatorSettings()
        assert settings.benchmark_prices is not DEFAULT_BENCHMARK_PRICES


class TestSettingsValidation:
    @pytest.mark.parametrize("fraction", [-0.1, 1.5])
    def test_cost_fraction_out_of_range(self, fraction):
        with pytest.raises(ValidationError):
            EstimatorSettings(operating_cost_fraction=fraction)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            EstimatorSettings(benchmark_prices={"oil": 75.0, "gas": -1.0})

    def test_missing_oil_fallback_rejected(self):
        with pytest.raises(ValidationError):
            EstimatorSettings(benchmark_prices={"gas": 3.5})

    def test_cost_table_needs_default(self):
        with pytest.raises(ValidationError):
            EstimatorSettings(cost_benchmarks={"oil": {"bakken": 18.0}})

    def test_unknown_cost_basis_rejected(self):
        with pytest.raises(ValidationError):
            EstimatorSettings(operating_cost_basis="per_well")

    def test_settings_are_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.operating_cost_fraction = 0.5


class TestLoadSettings:
    def test_no_overrides_gives_defaults(self, clean_env):
        assert load_settings() == EstimatorSettings()

    def test_env_price_overrides(self, clean_env):
        clean_env.setenv("WILDCATTER_OIL_PRICE", "68.25")
        clean_env.setenv("WILDCATTER_GAS_PRICE", "2.80")
        settings = load_settings()
        assert settings.benchmark_prices["oil"] == 68.25
        assert settings.benchmark_prices["gas"] == 2.80
        assert settings.benchmark_prices["mining"] == 50.0

    def test_env_cost_fraction(self, clean_env):
        clean_env.setenv("WILDCATTER_OPERATING_COST_FRACTION", "0.3")
        assert load_settings().operating_cost_fraction == 0.3

    def test_env_cost_fraction_validated(self, clean_env):
        clean_env.setenv("WILDCATTER_OPERATING_COST_FRACTION", "2")
        with pytest.raises(ValidationError):
            load_settings()

    def test_json_file(self, clean_env, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({
            "benchmark_prices": {"oil": 80.0, "gas": 4.0},
            "operating_cost_basis": "unit_benchmark",
        }), encoding="utf-8")
        settings = load_settings(path)
        assert settings.price_for("mining") == 80.0
        assert settings.operating_cost_basis == "unit_benchmark"

    def test_json_file_from_env_with_price_override(self, clean_env, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"operating_cost_fraction": 0.25}), encoding="utf-8")
        clean_env.setenv("WILDCATTER_SETTINGS_JSON", str(path))
        clean_env.setenv("WILDCATTER_MINING_PRICE", "55")
        settings = load_settings()
        assert settings.operating_cost_fraction == 0.25
        assert settings.benchmark_prices["mining"] == 55.0
