"""Z-score normalization and composite ranking of pitcher impact values."""

from __future__ import annotations

from typing import Mapping

from .pitcher_pool import STATS
from .stats import CatStats


def zscore_term(value: float, stats: CatStats) -> float:
    """(value - mean) / stdev, or 0 when the category has no spread."""
    if not stats.stdev or stats.mean is None:
        return 0.0
    return (value - stats.mean) / stats.stdev


def zscore_terms(impacts: Mapping[str, float], impact_stats: Mapping[str, CatStats]) -> dict[str, float]:
    return {stat: zscore_term(impacts[stat], impact_stats[stat]) for stat in STATS}


def composite_score(terms: Mapping[str, float]) -> float:
    """Equal-weight sum of the per-category z terms, in fixed category order."""
    total = 0.0
    for stat in STATS:
        total += terms[stat]
    return total


def rank_by_score(rows: list[dict], key: str = "total_zscore") -> list[dict]:
    """Sort rows by score, best first.  Ties keep their input order."""
    return sorted(rows, key=lambda r: r[key], reverse=True)
