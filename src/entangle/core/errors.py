from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    PAIR_NOT_FOUND = "ERR-PAIR-NOT-FOUND"
    ALREADY_MEASURED = "ERR-ALREADY-MEASURED"


class EntanglementError(Exception):
    """Base error for rejected registry operations."""

    kind: ErrorKind

    def __init__(self, pair_id: int, message: str) -> None:
        self.pair_id = pair_id
        super().__init__(message)


class PairNotFound(EntanglementError):
    kind = ErrorKind.PAIR_NOT_FOUND

    def __init__(self, pair_id: int) -> None:
        super().__init__(pair_id, f"{self.kind.value}: unknown pair {pair_id}")


class AlreadyMeasured(EntanglementError):
    kind = ErrorKind.ALREADY_MEASURED

    def __init__(self, pair_id: int) -> None:
        super().__init__(pair_id, f"{self.kind.value}: pair {pair_id} was already measured")


def error_for_kind(kind: ErrorKind | str, pair_id: int) -> EntanglementError:
    k = ErrorKind(kind)
    if k is ErrorKind.PAIR_NOT_FOUND:
        return PairNotFound(pair_id)
    return AlreadyMeasured(pair_id)
