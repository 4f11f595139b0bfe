import pytest

from pitcher_valuation.analysis.impact import compute_impacts, era_impact, whip_impact
from pitcher_valuation.analysis.stats import CatStats, compute_cat_stats, field_means


def test_population_standard_deviation():
    rows = [{"x": v} for v in (2, 4, 4, 4, 5, 5, 7, 9)]
    stats = compute_cat_stats(rows, ["x"])
    assert stats["x"] == CatStats(mean=5.0, stdev=2.0)


def test_empty_population_has_no_stats():
    assert compute_cat_stats([], ["x", "y"]) == {
        "x": CatStats(mean=None, stdev=None),
        "y": CatStats(mean=None, stdev=None),
    }
    assert field_means([], ["x"]) == {"x": None}


def test_field_means():
    rows = [{"ERA": 3.0, "WHIP": 1.0}, {"ERA": 5.0, "WHIP": 1.5}]
    assert field_means(rows, ["ERA", "WHIP"]) == {"ERA": 4.0, "WHIP": 1.25}


def test_era_impact_is_runs_saved_per_nine():
    assert era_impact(3.0, 180, 4.0) == pytest.approx(20.0)
    assert era_impact(5.0, 90, 4.0) == pytest.approx(-10.0)
    assert era_impact(3.0, 180, None) == 0.0


def test_whip_impact_is_baserunners_saved():
    assert whip_impact(1.1, 100, 1.3) == pytest.approx(20.0)
    assert whip_impact(1.1, 0, 1.3) == 0.0


def test_counting_stats_pass_through():
    stats = {"ERA": 3.5, "WHIP": 1.2, "W": 12, "SV": 3, "SO": 190}
    impacts = compute_impacts(stats, 160, {"ERA": 4.0, "WHIP": 1.25})
    assert impacts["W"] == 12
    assert impacts["SV"] == 3
    assert impacts["SO"] == 190
    assert impacts["ERA"] == pytest.approx(0.5 * 160 / 9)
    assert impacts["WHIP"] == pytest.approx(0.05 * 160)


def test_values_equal_up_to_rounding_are_flat():
    rows = [{"x": v} for v in (1e-14, -2e-14, 0.0, 3e-15)]
    assert compute_cat_stats(rows, ["x"])["x"].stdev == 0.0


def test_small_real_spread_is_not_flat():
    rows = [{"x": 0.001}, {"x": 0.002}]
    assert compute_cat_stats(rows, ["x"])["x"].stdev == pytest.approx(0.0005)
