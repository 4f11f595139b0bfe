"""Contracts for the external adjustment and value-snapshot stores.

The valuation engine never talks to storage itself.  ValuationSession reads
and writes through these protocols using the row shapes below, which match
the JSON the adjustments service speaks ({playerId, stat, delta}).
"""

from __future__ import annotations

from typing import Iterable, Literal, Protocol

from pydantic import BaseModel, ConfigDict

StatName = Literal["ERA", "WHIP", "W", "SV", "SO"]


class AdjustmentRow(BaseModel):
    playerId: str
    stat: StatName
    delta: float

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class ValueSnapshot(BaseModel):
    playerId: str
    value: float

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class AdjustmentStore(Protocol):
    def read_all(self) -> list[AdjustmentRow | dict]: ...

    def upsert(self, row: AdjustmentRow) -> None: ...

    def batch_upsert(self, rows: Iterable[AdjustmentRow]) -> None: ...


class ValueSnapshotStore(Protocol):
    def upsert(self, snapshot: ValueSnapshot) -> None: ...
