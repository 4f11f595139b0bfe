"""Full valuation pass: committed stats -> impact -> z-scores -> replacement -> dollars.

Population statistics (rate means, impact means/stdevs) come from active
pitchers only.  Excluded pitchers are shadow-scored against those same
statistics so they keep a comparable place in the ranking, but they never move
the baseline or take a share of the pool.

The pass also freezes everything needed to re-score a single pitcher later
(ValuationConstants), so interactive edits can be projected without
recomputing the population.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from pitcher_valuation.config import DEFAULT_CONFIG, ValuationConfig
from .impact import compute_impacts
from .pitcher_pool import (
    COMMITTED_KEYS,
    IMPACT_KEYS,
    IP_COLUMN,
    RATE_STATS,
    STATS,
    ZSCORE_KEYS,
    load_pitchers,
)
from .replacement import assign_values
from .stats import CatStats, compute_cat_stats, field_means
from .zscores import composite_score, rank_by_score, zscore_terms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValuationConstants:
    """Snapshot of one full pass, consumed by incremental projection."""
    rate_means: Mapping[str, Optional[float]]  # ERA, WHIP pool means
    impact_stats: Mapping[str, CatStats]  # stat -> mean/stdev of its impact value
    replacement_score: float
    positive_sum: float


@dataclass(frozen=True)
class ValuationResult:
    players: list[dict] = field(default_factory=list)  # sorted best-first
    constants: Optional[ValuationConstants] = None


def score_pitcher(
    stats: Mapping[str, float],
    ip: float,
    rate_means: Mapping[str, Optional[float]],
    impact_stats: Mapping[str, CatStats],
) -> tuple[dict[str, float], dict[str, float], float]:
    """Score one pitcher against fixed population statistics.

    Returns:
        (impacts, zscore_terms, total_zscore), the first two keyed by stat.
    """
    impacts = compute_impacts(stats, ip, rate_means)
    terms = zscore_terms(impacts, impact_stats)
    return impacts, terms, composite_score(terms)


def _set_score_fields(p: dict, impacts: Mapping[str, float], terms: Mapping[str, float], total: float) -> None:
    for stat in STATS:
        p[IMPACT_KEYS[stat]] = impacts[stat]
        p[ZSCORE_KEYS[stat]] = terms[stat]
    p["total_zscore"] = total


def calculate_base_values(
    raw_rows: Optional[Iterable[Mapping]],
    committed_adjustments: Optional[Mapping[str, float]] = None,
    pool_amount: Optional[float] = None,
    excluded_ids: Optional[Iterable] = None,
    config: ValuationConfig = DEFAULT_CONFIG,
) -> ValuationResult:
    """Value every identifiable pitcher from raw projections plus committed adjustments.

    Args:
        raw_rows: Projection records (PlayerId, Name, ERA, WHIP, W, SV, SO, IP).
        committed_adjustments: {"<PlayerId>-<stat>": delta} saved edits.
        pool_amount: Dollars to distribute; defaults to config.POOL_AMOUNT.
        excluded_ids: PlayerIds removed from the pool.  They are still scored
                      for display, but are worth $0 and never affect the stats.

    Returns:
        ValuationResult with players sorted by total_zscore (stable) and the
        frozen constants, or constants=None when no active pitchers exist.
    """
    if pool_amount is None:
        pool_amount = config.POOL_AMOUNT
    excluded = set(excluded_ids or ())

    pitchers = load_pitchers(raw_rows or [], committed_adjustments or {}, excluded)
    if not pitchers:
        logger.warning("No identifiable pitchers in input — nothing to value")
        return ValuationResult(players=[], constants=None)

    active = [p for p in pitchers if not p["is_excluded"]]
    if not active:
        logger.warning(f"All {len(pitchers)} pitchers are excluded — skipping valuation")
        zero = {stat: 0.0 for stat in STATS}
        for rank, p in enumerate(pitchers, 1):
            _set_score_fields(p, zero, zero, 0.0)
            p["value_over_replacement"] = 0.0
            p["value"] = 0.0
            p["overall_rank"] = rank
        return ValuationResult(players=pitchers, constants=None)

    # Rate-stat baselines from the active pool's committed stats
    committed_means = field_means(active, [COMMITTED_KEYS[s] for s in RATE_STATS])
    rate_means = {stat: committed_means[COMMITTED_KEYS[stat]] for stat in RATE_STATS}

    for p in pitchers:
        committed = {stat: p[COMMITTED_KEYS[stat]] for stat in STATS}
        impacts = compute_impacts(committed, p[IP_COLUMN], rate_means)
        for stat in STATS:
            p[IMPACT_KEYS[stat]] = impacts[stat]

    impact_cols = compute_cat_stats(active, [IMPACT_KEYS[s] for s in STATS])
    impact_stats = {stat: impact_cols[IMPACT_KEYS[stat]] for stat in STATS}

    # Active pitchers and excluded (shadow) pitchers share the same statistics
    for p in pitchers:
        impacts = {stat: p[IMPACT_KEYS[stat]] for stat in STATS}
        terms = zscore_terms(impacts, impact_stats)
        _set_score_fields(p, impacts, terms, composite_score(terms))

    ranked = rank_by_score(pitchers)
    repl, positive_sum = assign_values(ranked, pool_amount, config)
    for rank, p in enumerate(ranked, 1):
        p["overall_rank"] = rank

    logger.info(
        f"Valued {len(ranked)} pitchers ({len(active)} active, {len(ranked) - len(active)} excluded): "
        f"ERA mean {rate_means['ERA']:.3f}, WHIP mean {rate_means['WHIP']:.3f}"
    )

    constants = ValuationConstants(
        rate_means=MappingProxyType(dict(rate_means)),
        impact_stats=MappingProxyType(dict(impact_stats)),
        replacement_score=repl,
        positive_sum=positive_sum,
    )
    return ValuationResult(players=ranked, constants=constants)
