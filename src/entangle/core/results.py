from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .errors import EntanglementError, ErrorKind, error_for_kind

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Success value or error kind of a registry call, without raising."""

    value: T | None = None
    error: ErrorKind | None = None
    pair_id: int | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise error_for_kind(self.error, int(self.pair_id if self.pair_id is not None else -1))
        return self.value  # type: ignore[return-value]


def attempt(fn: Callable[..., T], *args: object) -> Outcome[T]:
    try:
        return Outcome(value=fn(*args))
    except EntanglementError as ex:
        return Outcome(error=ex.kind, pair_id=ex.pair_id, message=str(ex))
