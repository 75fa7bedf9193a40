from __future__ import annotations

import logging
import operator
import threading
from dataclasses import replace

from .errors import AlreadyMeasured, PairNotFound
from .pairs import EntangledPair
from .randomness import BitSource, NumpyBitSource

logger = logging.getLogger("entangle.registry")


class PairRegistry:
    """In-memory ledger of entangled pairs.

    One lock guards the pair table, the owner index, the id counter and the
    revision together. Reads take the same lock, so a pair is never observed
    mid-measurement.
    """

    def __init__(self, bit_source: BitSource | None = None) -> None:
        self._lock = threading.RLock()
        self._bit_source: BitSource = bit_source if bit_source is not None else NumpyBitSource()
        self._pairs: dict[int, EntangledPair] = {}
        self._owner_index: dict[str, list[int]] = {}
        self._next_id = 0
        self._revision = 0

    @staticmethod
    def _validate_pair_id(pair_id: int) -> int:
        if isinstance(pair_id, bool):
            raise TypeError(f"pair id must be an integer, got {pair_id!r}")
        try:
            return operator.index(pair_id)
        except TypeError as ex:
            raise TypeError(f"pair id must be an integer, got {pair_id!r}") from ex

    def _require_pair_locked(self, pair_id: int) -> EntangledPair:
        pid = self._validate_pair_id(pair_id)
        pair = self._pairs.get(pid)
        if pair is None:
            logger.info("Rejected lookup of unknown pair %d", pid)
            raise PairNotFound(pid)
        return pair

    def _draw_bit_locked(self) -> int:
        bit = int(self._bit_source.draw_bit())
        if bit not in (0, 1):
            raise ValueError(f"bit source returned {bit!r}, expected 0 or 1")
        return bit

    def revision(self) -> int:
        with self._lock:
            return self._revision

    def create(self, creator: str) -> int:
        if not isinstance(creator, str):
            raise TypeError(f"creator must be a string, got {type(creator).__name__}")
        if not creator.strip():
            raise ValueError("creator cannot be empty")

        with self._lock:
            pair_id = self._next_id
            self._next_id += 1
            self._pairs[pair_id] = EntangledPair(id=pair_id, creator=creator)
            self._owner_index.setdefault(creator, []).append(pair_id)
            self._revision += 1

        logger.debug("Created pair %d for %r", pair_id, creator)
        return pair_id

    def measure(self, pair_id: int) -> int:
        with self._lock:
            pair = self._require_pair_locked(pair_id)
            if pair.measured:
                logger.info("Rejected second measurement of pair %d", pair.id)
                raise AlreadyMeasured(pair.id)

            # Draw before touching the record so a failing source leaves it unmeasured.
            bit = self._draw_bit_locked()
            self._pairs[pair.id] = replace(pair, particle1=bit, particle2=1 - bit, measured=True)
            self._revision += 1

        logger.debug("Measured pair %d -> %d", pair.id, bit)
        return bit

    def get(self, pair_id: int) -> EntangledPair:
        with self._lock:
            return self._require_pair_locked(pair_id)

    def list_by_owner(self, owner: str) -> list[int]:
        with self._lock:
            return list(self._owner_index.get(owner, ()))

    def verify(self, pair_id: int) -> bool:
        with self._lock:
            return self._require_pair_locked(pair_id).is_anticorrelated

    def list_pairs(self) -> list[EntangledPair]:
        with self._lock:
            return [self._pairs[k] for k in sorted(self._pairs)]

    def owners(self) -> list[str]:
        with self._lock:
            return list(self._owner_index)

    def pair_count(self) -> int:
        with self._lock:
            return len(self._pairs)

    def __len__(self) -> int:
        return self.pair_count()

    def reset(self) -> None:
        """Drop all pairs and restart ids at 0. The revision keeps counting."""
        with self._lock:
            self._pairs.clear()
            self._owner_index.clear()
            self._next_id = 0
            self._revision += 1
        logger.info("Registry reset")
