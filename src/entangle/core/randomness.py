from __future__ import annotations

from typing import Callable, Protocol

import numpy as np


class BitSource(Protocol):
    def draw_bit(self) -> int: ...


class NumpyBitSource:
    """Uniform bits from a numpy Generator.

    Without a seed the generator is initialised from OS entropy, so draws are not
    reproducible. Pass `seed` for deterministic runs.

    Generators are not thread-safe; the registry only draws while holding its lock.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def draw_bit(self) -> int:
        return int(self._rng.integers(0, 2))


class CallableBitSource:
    def __init__(self, fn: Callable[[], int]) -> None:
        self._fn = fn

    def draw_bit(self) -> int:
        return int(self._fn())
