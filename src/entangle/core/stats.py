from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .registry import PairRegistry


@dataclass(frozen=True)
class BitBalance:
    zeros: int
    ones: int

    @property
    def total(self) -> int:
        return self.zeros + self.ones

    @property
    def fraction_ones(self) -> float:
        if self.total == 0:
            return 0.0
        return float(self.ones) / float(self.total)

    @property
    def z_score(self) -> float:
        """Normal approximation of the deviation from a fair coin (0.0 when empty)."""
        n = self.total
        if n == 0:
            return 0.0
        return float((self.ones - 0.5 * n) / np.sqrt(0.25 * n))

    def looks_uniform(self, *, max_abs_z: float = 4.0) -> bool:
        return abs(self.z_score) <= max_abs_z


@dataclass(frozen=True)
class RegistrySummary:
    pairs: int
    measured: int
    unmeasured: int
    owners: int
    anticorrelated: int
    balance: BitBalance


def bit_balance(bits: Iterable[int]) -> BitBalance:
    arr = np.fromiter((int(b) for b in bits), dtype=np.int64)
    if arr.size and not np.all((arr == 0) | (arr == 1)):
        raise ValueError("bits must contain only 0 and 1")
    ones = int(arr.sum())
    return BitBalance(zeros=int(arr.size) - ones, ones=ones)


def summarize(registry: PairRegistry) -> RegistrySummary:
    pairs = registry.list_pairs()
    measured = [p for p in pairs if p.measured]
    return RegistrySummary(
        pairs=len(pairs),
        measured=len(measured),
        unmeasured=len(pairs) - len(measured),
        owners=len(registry.owners()),
        anticorrelated=sum(1 for p in measured if p.is_anticorrelated),
        balance=bit_balance(int(p.particle1) for p in measured if p.particle1 is not None),
    )
