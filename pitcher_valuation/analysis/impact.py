"""Convert ERA/WHIP into IP-weighted "impact" so rate stats compare to counting stats.

ERA impact is runs prevented versus an average pitcher over the same innings:
(mean_era - era) * IP / 9.  WHIP impact is walks + hits prevented:
(mean_whip - whip) * IP.  Both are positive when the pitcher beats the pool
average, so every impact category reads higher-is-better.  Counting stats
(W, SV, SO) are their own impact.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .pitcher_pool import COUNTING_STATS


def era_impact(era: float, ip: float, mean_era: Optional[float]) -> float:
    if mean_era is None:
        return 0.0
    return (mean_era - era) * (ip / 9)


def whip_impact(whip: float, ip: float, mean_whip: Optional[float]) -> float:
    if mean_whip is None:
        return 0.0
    return (mean_whip - whip) * ip


def compute_impacts(
    stats: Mapping[str, float],
    ip: float,
    rate_means: Mapping[str, Optional[float]],
) -> dict[str, float]:
    """Map {stat: value} to {stat: impact} for all five categories.

    Args:
        stats: Effective stat values keyed by category name (ERA, WHIP, W, SV, SO).
        ip: Projected innings pitched; scales the rate-stat impacts.
        rate_means: Pool means for ERA and WHIP.
    """
    impacts = {
        "ERA": era_impact(stats["ERA"], ip, rate_means.get("ERA")),
        "WHIP": whip_impact(stats["WHIP"], ip, rate_means.get("WHIP")),
    }
    for stat in COUNTING_STATS:
        impacts[stat] = stats[stat]
    return impacts
