"""Fast re-projection of displayed values while edits are pending.

Uses the frozen ValuationConstants from the last full pass instead of
recomputing population statistics: each pitcher is re-scored on its own
against the old rate means, impact means/stdevs, replacement score and
positive sum.  This assumes one pitcher's edit does not materially move the
pool; the caller restores exactness by running a full pass once edits are
committed.  The pool amount is read live, so changing it rescales every
projected value immediately.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from pitcher_valuation.config import DEFAULT_CONFIG
from .adjustments import resolve_delta
from .pitcher_pool import (
    ID_COLUMN,
    IMPACT_KEYS,
    IP_COLUMN,
    STATS,
    STATUS_KEYS,
    ZSCORE_KEYS,
    safe_float,
)
from .replacement import dollar_value
from .valuation import ValuationConstants, score_pitcher

logger = logging.getLogger(__name__)


def apply_display_adjustments(
    base_players: list[dict],
    pending_adjustments: Mapping[str, float],
    committed_adjustments: Mapping[str, float],
    constants: Optional[ValuationConstants],
    pool_amount: float = DEFAULT_CONFIG.POOL_AMOUNT,
) -> list[dict]:
    """Overlay live deltas on the base list and project each pitcher's value.

    Displayed stats become raw + live delta and a status_<stat> field records
    whether each stat is untouched, saved, or pending.  Excluded pitchers keep
    their stats and are worth $0.  Order is left as in base_players; the
    caller re-sorts for display if it wants to.
    """
    if constants is None:
        return base_players

    projected = []
    for p in base_players:
        pid = p[ID_COLUMN]
        live: dict[str, float] = {}
        statuses: dict[str, str] = {}
        for stat in STATS:
            delta, status = resolve_delta(f"{pid}-{stat}", pending_adjustments, committed_adjustments)
            live[stat] = safe_float(p.get(stat)) + delta
            statuses[stat] = status

        row = dict(p)
        for stat in STATS:
            row[STATUS_KEYS[stat]] = statuses[stat]

        if p.get("is_excluded"):
            row["value"] = 0.0
            projected.append(row)
            continue

        impacts, terms, total = score_pitcher(
            live, p[IP_COLUMN], constants.rate_means, constants.impact_stats
        )
        value_over_replacement = total - constants.replacement_score

        for stat in STATS:
            row[stat] = live[stat]
            row[IMPACT_KEYS[stat]] = impacts[stat]
            row[ZSCORE_KEYS[stat]] = terms[stat]
        row["total_zscore"] = total
        row["value_over_replacement"] = value_over_replacement
        row["value"] = dollar_value(value_over_replacement, constants.positive_sum, pool_amount)
        projected.append(row)

    logger.debug(
        f"Projected {len(projected)} pitchers with {len(pending_adjustments)} pending "
        f"adjustments at ${pool_amount:.0f}"
    )
    return projected
