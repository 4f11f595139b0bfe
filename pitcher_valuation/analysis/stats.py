"""Population statistics over the active pitcher pool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

import numpy as np


@dataclass(frozen=True)
class CatStats:
    mean: Optional[float]
    stdev: Optional[float]


def field_means(rows: list[Mapping], fields: Iterable[str]) -> dict[str, Optional[float]]:
    """Arithmetic mean of each field over rows. None for an empty population."""
    means: dict[str, Optional[float]] = {}
    for field in fields:
        if not rows:
            means[field] = None
            continue
        values = np.array([r[field] for r in rows], dtype=float)
        means[field] = float(np.mean(values))
    return means


def compute_cat_stats(rows: list[Mapping], fields: Iterable[str]) -> dict[str, CatStats]:
    """Mean and population standard deviation (ddof=0) of each field over rows.

    A field whose values are all equal up to float rounding is flat (stdev 0).
    Rate impacts of a uniform ERA/WHIP pool are (mean - x) * IP with a mean
    that is off by rounding, so their raw spread is noise, not signal.
    """
    stats: dict[str, CatStats] = {}
    for field in fields:
        if not rows:
            stats[field] = CatStats(mean=None, stdev=None)
            continue
        values = np.array([r[field] for r in rows], dtype=float)
        if np.allclose(values, values[0]):
            stats[field] = CatStats(mean=float(np.mean(values)), stdev=0.0)
            continue
        stats[field] = CatStats(mean=float(np.mean(values)), stdev=float(np.std(values)))
    return stats
