from __future__ import annotations

from .config import Settings
from .core import (
    AlreadyMeasured,
    EntangledPair,
    EntanglementError,
    ErrorKind,
    NumpyBitSource,
    Outcome,
    PairNotFound,
    PairRegistry,
    PairState,
    attempt,
)
from .runtime.server import EntangleServer, run
from .sdk import EntangleClient, PairHandle

__all__ = [
    "run",
    "Settings",
    "EntangleServer",
    "EntangleClient",
    "PairHandle",
    "PairRegistry",
    "EntangledPair",
    "PairState",
    "NumpyBitSource",
    "ErrorKind",
    "EntanglementError",
    "PairNotFound",
    "AlreadyMeasured",
    "Outcome",
    "attempt",
]
