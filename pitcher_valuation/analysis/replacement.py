"""Replacement level and auction-dollar distribution.

The replacement pitcher is the REPLACEMENT_RANK-th best active pitcher (or the
worst active pitcher when the pool is shallower).  Every pitcher's value over
replacement is its composite score minus that baseline, and the fixed dollar
pool is split among active pitchers in proportion to their positive value.
"""

from __future__ import annotations

import logging
from typing import Optional

from pitcher_valuation.config import DEFAULT_CONFIG, ValuationConfig

logger = logging.getLogger(__name__)


def replacement_index(active_count: int, replacement_rank: int = DEFAULT_CONFIG.REPLACEMENT_RANK) -> Optional[int]:
    """Zero-based index of the replacement pitcher, or None for an empty pool."""
    if active_count <= 0:
        return None
    return min(replacement_rank - 1, active_count - 1)


def replacement_score(active_sorted: list[dict], config: ValuationConfig = DEFAULT_CONFIG) -> float:
    """Composite score of the replacement pitcher among active pitchers sorted best-first."""
    idx = replacement_index(len(active_sorted), config.REPLACEMENT_RANK)
    if idx is None:
        return config.EMPTY_POOL_REPLACEMENT
    return active_sorted[idx]["total_zscore"]


def dollar_value(value_over_replacement: float, positive_sum: float, pool_amount: float) -> float:
    """Share of the pool earned by one pitcher.  At or below replacement earns nothing."""
    if positive_sum <= 0 or value_over_replacement <= 0:
        return 0.0
    return (value_over_replacement / positive_sum) * pool_amount


def assign_values(
    sorted_rows: list[dict],
    pool_amount: float,
    config: ValuationConfig = DEFAULT_CONFIG,
) -> tuple[float, float]:
    """Set value_over_replacement and value on each row (in place).

    Only active rows set the baseline, contribute to the positive sum, and
    receive dollars.  Excluded rows still get a value_over_replacement from
    their shadow score so they can be positioned, but their value is 0.

    Returns:
        (replacement_score, positive_sum)
    """
    active = [p for p in sorted_rows if not p["is_excluded"]]
    repl = replacement_score(active, config)

    for p in sorted_rows:
        p["value_over_replacement"] = p["total_zscore"] - repl

    positive_sum = sum(
        p["value_over_replacement"] for p in active if p["value_over_replacement"] > 0
    )

    for p in sorted_rows:
        if p["is_excluded"]:
            p["value"] = 0.0
        else:
            p["value"] = dollar_value(p["value_over_replacement"], positive_sum, pool_amount)

    above = sum(1 for p in active if p["value_over_replacement"] > 0)
    logger.info(
        f"Replacement level {repl:+.3f} (rank {config.REPLACEMENT_RANK}, {len(active)} active); "
        f"{above} pitchers above replacement share ${pool_amount:.0f} (positive sum {positive_sum:.3f})"
    )
    return repl, positive_sum
