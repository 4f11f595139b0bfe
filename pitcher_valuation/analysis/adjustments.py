"""Committed vs. pending stat adjustments.

Adjustments are flat mappings of "<PlayerId>-<stat>" -> delta.  Committed
adjustments are the saved, authoritative edits that drive the full valuation
pass; pending adjustments are unsaved local edits that only affect display and
incremental projection.  For any key the live delta is the pending delta if
one exists, else the committed delta, else 0.

Nothing here mutates its inputs; every edit returns a new mapping.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from pitcher_valuation.config import DEFAULT_CONFIG
from pitcher_valuation.stores import AdjustmentRow
from .pitcher_pool import STATS

STATUS_DEFAULT = "default"
STATUS_CHANGED = "changed"
STATUS_PENDING = "pending"

# Stepper increment per click for each editable stat
STAT_STEPS: dict[str, float] = {"ERA": 0.05, "WHIP": 0.01, "W": 1, "SV": 1, "SO": 5}


def adjustment_key(player_id, stat: str) -> str:
    if stat not in STATS:
        raise ValueError(f"Unknown stat {stat!r}; expected one of {STATS}")
    return f"{player_id}-{stat}"


def split_adjustment_key(key: str) -> tuple[str, str]:
    """Inverse of adjustment_key.  Splits on the last '-' so ids may contain dashes."""
    player_id, sep, stat = key.rpartition("-")
    if not sep or not player_id or stat not in STATS:
        raise ValueError(f"Malformed adjustment key {key!r}")
    return player_id, stat


def resolve_delta(
    key: str,
    pending: Mapping[str, float],
    committed: Mapping[str, float],
) -> tuple[float, str]:
    """Live delta for a key and its edit status (default / changed / pending)."""
    if key in pending:
        return pending[key], STATUS_PENDING
    delta = committed.get(key) or 0
    return delta, STATUS_CHANGED if delta != 0 else STATUS_DEFAULT


def step_adjustment(
    pending: Mapping[str, float],
    committed: Mapping[str, float],
    player_id,
    stat: str,
    change: float,
    precision: int = DEFAULT_CONFIG.DELTA_PRECISION,
) -> dict[str, float]:
    """Return a new pending mapping with `change` added to the stat's live delta.

    The first edit of a key starts from its committed delta, so stepping a
    saved +0.10 ERA adjustment by -0.05 yields a pending +0.05.
    """
    key = adjustment_key(player_id, stat)
    current, _ = resolve_delta(key, pending, committed)
    updated = dict(pending)
    updated[key] = round(current + change, precision)
    return updated


def commit_pending(
    committed: Mapping[str, float],
    pending: Mapping[str, float],
) -> tuple[dict[str, float], list[AdjustmentRow]]:
    """Merge pending edits over committed ones.

    Returns:
        (new_committed, rows) where rows is the batch-upsert payload for the
        adjustment store, one row per pending key.
    """
    rows = []
    for key, delta in pending.items():
        player_id, stat = split_adjustment_key(key)
        rows.append(AdjustmentRow(playerId=player_id, stat=stat, delta=delta))
    merged = dict(committed)
    merged.update(pending)
    return merged, rows


def adjustments_from_rows(rows: Iterable[AdjustmentRow | Mapping]) -> dict[str, float]:
    """Convert the store's read-all rows into a keyed committed mapping."""
    adjustments: dict[str, float] = {}
    for row in rows:
        if not isinstance(row, AdjustmentRow):
            row = AdjustmentRow.model_validate(row)
        adjustments[adjustment_key(row.playerId, row.stat)] = row.delta
    return adjustments
