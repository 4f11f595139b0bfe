"""Editable valuation state: committed/pending adjustments, exclusions, pool size.

ValuationSession is the only stateful piece.  It hands explicit snapshots of
its state to the pure engine functions and decides when a full pass is due:
on load, when the exclusion set changes, and after pending edits are saved.
Stat steps and pool-size changes only re-project against the frozen
constants of the last full pass.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from pitcher_valuation.analysis.adjustments import (
    STAT_STEPS,
    adjustments_from_rows,
    commit_pending,
    step_adjustment,
)
from pitcher_valuation.analysis.pitcher_pool import ID_COLUMN
from pitcher_valuation.analysis.projection import apply_display_adjustments
from pitcher_valuation.analysis.valuation import ValuationResult, calculate_base_values
from pitcher_valuation.config import ValuationConfig, load_config
from pitcher_valuation.stores import AdjustmentStore, ValueSnapshot, ValueSnapshotStore

logger = logging.getLogger(__name__)


class ValuationSession:
    """Tracks one user's edits over a fixed set of projection rows."""

    def __init__(
        self,
        raw_rows: Iterable[Mapping],
        committed: Optional[Mapping[str, float]] = None,
        excluded_ids: Optional[Iterable] = None,
        pool_amount: Optional[float] = None,
        config: Optional[ValuationConfig] = None,
    ) -> None:
        self.config = config or load_config()
        self.raw_rows: list[Mapping] = list(raw_rows)
        self.committed: dict[str, float] = dict(committed or {})
        self.pending: dict[str, float] = {}
        self.excluded_ids: set = set(excluded_ids or ())
        self.pool_amount: float = (
            self.config.POOL_AMOUNT if pool_amount is None else pool_amount
        )
        self.result = ValuationResult()
        self.recompute()

    @property
    def has_pending_changes(self) -> bool:
        return bool(self.pending)

    def load(self, adjustment_store: AdjustmentStore) -> ValuationResult:
        """Replace committed adjustments with the store's contents and revalue."""
        self.committed = adjustments_from_rows(adjustment_store.read_all())
        self.pending = {}
        logger.info(f"Loaded {len(self.committed)} committed adjustments")
        return self.recompute()

    def recompute(self) -> ValuationResult:
        self.result = calculate_base_values(
            self.raw_rows,
            self.committed,
            pool_amount=self.pool_amount,
            excluded_ids=self.excluded_ids,
            config=self.config,
        )
        return self.result

    def step(self, player_id, stat: str, direction: int = 1) -> None:
        """Nudge a stat's pending delta by one stepper increment (direction +1 / -1).

        Unknown stats raise ValueError from adjustment_key.
        """
        self.pending = step_adjustment(
            self.pending, self.committed, player_id, stat,
            STAT_STEPS.get(stat, 0) * direction,
            precision=self.config.DELTA_PRECISION,
        )

    def set_pool_amount(self, amount: float) -> None:
        if amount < 0:
            raise ValueError(f"Pool amount must be non-negative, got {amount}")
        self.pool_amount = amount

    def exclude(self, player_id) -> ValuationResult:
        self.excluded_ids.add(player_id)
        return self.recompute()

    def include(self, player_id) -> ValuationResult:
        self.excluded_ids.discard(player_id)
        return self.recompute()

    def toggle_exclusion(self, player_id) -> ValuationResult:
        if player_id in self.excluded_ids:
            return self.include(player_id)
        return self.exclude(player_id)

    def discard_pending(self) -> None:
        self.pending = {}

    def save(
        self,
        adjustment_store: AdjustmentStore,
        snapshot_store: Optional[ValueSnapshotStore] = None,
    ) -> int:
        """Persist pending edits, fold them into committed, and revalue.

        The store is written before local state changes, so a failing store
        leaves the pending edits in place.

        Returns:
            Number of adjustments written.
        """
        if not self.pending:
            return 0

        merged, rows = commit_pending(self.committed, self.pending)
        adjustment_store.batch_upsert(rows)
        self.committed = merged
        self.pending = {}
        self.recompute()
        logger.info(f"Saved {len(rows)} adjustments and recalculated values")

        if snapshot_store is not None:
            for snapshot in self.value_snapshots():
                snapshot_store.upsert(snapshot)
        return len(rows)

    def displayed_players(self) -> list[dict]:
        """Base values with pending edits projected on top, for rendering."""
        return apply_display_adjustments(
            self.result.players,
            self.pending,
            self.committed,
            self.result.constants,
            self.pool_amount,
        )

    def value_snapshots(self) -> list[ValueSnapshot]:
        return [
            ValueSnapshot(playerId=p[ID_COLUMN], value=p["value"])
            for p in self.displayed_players()
        ]
