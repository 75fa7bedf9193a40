from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PairState(str, Enum):
    UNMEASURED = "unmeasured"
    MEASURED = "measured"


@dataclass(frozen=True, kw_only=True)
class EntangledPair:
    """Snapshot of one pair of correlated particles.

    Notes:
    - Snapshots are immutable. The registry swaps in a new snapshot on measurement,
      so a reader holds either the unmeasured or the measured record, never a mix.
    - `particle1` / `particle2` are `None` until the pair is measured.
    """

    id: int
    creator: str
    particle1: int | None = None
    particle2: int | None = None
    measured: bool = False

    @property
    def state(self) -> PairState:
        return PairState.MEASURED if self.measured else PairState.UNMEASURED

    @property
    def is_anticorrelated(self) -> bool:
        if self.particle1 is None or self.particle2 is None:
            return False
        return self.particle1 != self.particle2
