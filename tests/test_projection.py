import pytest

from pitcher_valuation.analysis.projection import apply_display_adjustments
from pitcher_valuation.analysis.valuation import calculate_base_values


def _by_id(players):
    return {p["PlayerId"]: p for p in players}


def test_no_edits_reproduces_base_values_exactly(staff_rows):
    base = calculate_base_values(staff_rows, {})
    projected = apply_display_adjustments(base.players, {}, {}, base.constants, 1500)
    assert [p["value"] for p in projected] == [p["value"] for p in base.players]
    assert [p["total_zscore"] for p in projected] == [p["total_zscore"] for p in base.players]
    assert all(p["status_era"] == "default" for p in projected)


def test_committed_only_reproduces_base_values_exactly(staff_rows):
    committed = {"sp2-ERA": -0.25, "rp3-SV": 10}
    base = calculate_base_values(staff_rows, committed)
    projected = apply_display_adjustments(base.players, {}, committed, base.constants, 1500)
    assert [p["value"] for p in projected] == [p["value"] for p in base.players]
    players = _by_id(projected)
    assert players["sp2"]["status_era"] == "changed"
    assert players["sp2"]["ERA"] == pytest.approx(3.15)
    assert players["rp3"]["status_sv"] == "changed"
    assert players["rp3"]["status_so"] == "default"


def test_pending_edit_moves_only_the_edited_pitcher(staff_rows):
    base = calculate_base_values(staff_rows, {})
    pending = {"sp3-ERA": -1.0}
    projected = _by_id(apply_display_adjustments(base.players, pending, {}, base.constants, 1500))
    before = _by_id(base.players)

    assert projected["sp3"]["status_era"] == "pending"
    assert projected["sp3"]["ERA"] == pytest.approx(3.10)
    assert projected["sp3"]["value"] > before["sp3"]["value"]
    for pid in ("sp1", "sp2", "rp1", "rp4"):
        assert projected[pid]["value"] == before[pid]["value"]


def test_pending_overrides_committed(staff_rows):
    committed = {"sp1-SO": -50}
    base = calculate_base_values(staff_rows, committed)
    projected = _by_id(
        apply_display_adjustments(base.players, {"sp1-SO": 0}, committed, base.constants, 1500)
    )
    assert projected["sp1"]["SO"] == 230
    assert projected["sp1"]["status_so"] == "pending"
    assert projected["sp1"]["value"] > _by_id(base.players)["sp1"]["value"]


def test_base_rows_are_not_mutated(staff_rows):
    base = calculate_base_values(staff_rows, {})
    snapshot = [dict(p) for p in base.players]
    apply_display_adjustments(base.players, {"sp1-W": 5}, {}, base.constants, 1500)
    assert base.players == snapshot


def test_pool_amount_rescales_projection(staff_rows):
    base = calculate_base_values(staff_rows, {}, pool_amount=1500)
    doubled = apply_display_adjustments(base.players, {}, {}, base.constants, 3000)
    for old, new in zip(base.players, doubled):
        assert new["value"] == pytest.approx(old["value"] * 2)


def test_falling_below_replacement_projects_to_zero(staff_rows):
    base = calculate_base_values(staff_rows, {})
    pending = {"sp1-ERA": 4.0, "sp1-WHIP": 0.8, "sp1-W": -14, "sp1-SO": -200}
    projected = _by_id(apply_display_adjustments(base.players, pending, {}, base.constants, 1500))
    assert projected["sp1"]["value_over_replacement"] < 0
    assert projected["sp1"]["value"] == 0.0


def test_excluded_pitchers_stay_at_zero(staff_rows):
    base = calculate_base_values(staff_rows, {}, excluded_ids={"sp2"})
    pending = {"sp2-ERA": -1.5}
    projected = _by_id(apply_display_adjustments(base.players, pending, {}, base.constants, 1500))
    assert projected["sp2"]["value"] == 0.0
    assert projected["sp2"]["ERA"] == 3.40
    assert projected["sp2"]["status_era"] == "pending"


def test_missing_constants_returns_input_unchanged(staff_rows):
    ids = {p["PlayerId"] for p in staff_rows}
    base = calculate_base_values(staff_rows, {}, excluded_ids=ids)
    assert base.constants is None
    assert apply_display_adjustments(base.players, {"sp1-ERA": -1.0}, {}, None, 1500) is base.players
