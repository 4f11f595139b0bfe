from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ValuationConfig:
    # Total auction dollars distributed across pitchers above replacement
    POOL_AMOUNT: float = 1500.0

    # 1-based rank of the replacement-level pitcher (201st = index 200)
    REPLACEMENT_RANK: int = 201

    # Replacement score used when no active pitchers remain
    EMPTY_POOL_REPLACEMENT: float = -1e9

    # Decimal places kept when a pending delta is stepped
    DELTA_PRECISION: int = 2

    def with_overrides(self, **kwargs: object) -> "ValuationConfig":
        return replace(self, **kwargs)


DEFAULT_CONFIG = ValuationConfig()


def load_config() -> ValuationConfig:
    """Build a config from defaults plus POOL_AMOUNT / REPLACEMENT_RANK env vars."""
    overrides: dict[str, object] = {}
    if os.environ.get("POOL_AMOUNT"):
        overrides["POOL_AMOUNT"] = float(os.environ["POOL_AMOUNT"])
    if os.environ.get("REPLACEMENT_RANK"):
        overrides["REPLACEMENT_RANK"] = int(os.environ["REPLACEMENT_RANK"])
    return DEFAULT_CONFIG.with_overrides(**overrides)
