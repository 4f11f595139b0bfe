"""Pitcher pool construction: column names, category keys, and committed stats."""

from __future__ import annotations

from typing import Iterable, Mapping

# Projection sheet columns (FanGraphs export headers)
ID_COLUMN = "PlayerId"
NAME_COLUMN = "Name"
IP_COLUMN = "IP"

# Category order matters: z terms are always summed ERA, WHIP, W, SV, SO
RATE_STATS = ["ERA", "WHIP"]
COUNTING_STATS = ["W", "SV", "SO"]
STATS = RATE_STATS + COUNTING_STATS

COMMITTED_KEYS = {stat: f"committed_{stat.lower()}" for stat in STATS}
IMPACT_KEYS = {stat: f"impact_{stat.lower()}" for stat in STATS}
ZSCORE_KEYS = {stat: f"zscore_{stat.lower()}" for stat in STATS}
STATUS_KEYS = {stat: f"status_{stat.lower()}" for stat in STATS}


def safe_float(val) -> float:
    """Convert a value to float, handling missing values."""
    try:
        return float(val) if val else 0.0
    except (ValueError, TypeError):
        return 0.0


def has_identity(row: Mapping) -> bool:
    """Rows without both an id and a name never enter the pool."""
    return bool(row.get(ID_COLUMN)) and bool(row.get(NAME_COLUMN))


def load_pitchers(
    raw_rows: Iterable[Mapping],
    committed_adjustments: Mapping[str, float],
    excluded_ids: set | frozenset = frozenset(),
) -> list[dict]:
    """Filter unidentified rows and attach committed-effective stats.

    Each returned dict is a copy of the raw row with IP coerced to a float,
    a committed_<stat> value per category (raw + committed delta), and an
    is_excluded flag.
    """
    pitchers = []
    for row in raw_rows:
        if not has_identity(row):
            continue
        pid = row[ID_COLUMN]
        p = dict(row)
        p[IP_COLUMN] = max(0.0, safe_float(row.get(IP_COLUMN)))
        for stat in STATS:
            delta = committed_adjustments.get(f"{pid}-{stat}") or 0.0
            p[COMMITTED_KEYS[stat]] = safe_float(row.get(stat)) + delta
        p["is_excluded"] = pid in excluded_ids
        pitchers.append(p)
    return pitchers
