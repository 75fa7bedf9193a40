from __future__ import annotations

from typing import Protocol, Self

from ..core.pairs import EntangledPair


class PairOps(Protocol):
    def measure(self, pair_id: int) -> int: ...
    def get(self, pair_id: int) -> EntangledPair: ...
    def verify(self, pair_id: int) -> bool: ...


class PairHandle(int):
    """A pair id that can act on its own pair.

    Behaves as a plain `int` everywhere an id is expected.
    """

    def __new__(cls, pair_id: int, *, ops: PairOps) -> Self:
        obj = int.__new__(cls, pair_id)
        obj._ops = ops
        return obj

    @property
    def id(self) -> int:
        return int(self)

    def measure(self) -> int:
        return self._ops.measure(self.id)

    def verify(self) -> bool:
        return self._ops.verify(self.id)

    def snapshot(self) -> EntangledPair:
        return self._ops.get(self.id)

    @property
    def measured(self) -> bool:
        return self.snapshot().measured

    def __repr__(self) -> str:
        return f"PairHandle({int(self)})"
