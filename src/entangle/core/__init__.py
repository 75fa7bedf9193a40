from __future__ import annotations

from .errors import AlreadyMeasured, EntanglementError, ErrorKind, PairNotFound, error_for_kind
from .pairs import EntangledPair, PairState
from .randomness import BitSource, CallableBitSource, NumpyBitSource
from .registry import PairRegistry
from .results import Outcome, attempt
from .stats import BitBalance, RegistrySummary, bit_balance, summarize

__all__ = [
    "EntangledPair",
    "PairState",
    "PairRegistry",
    "BitSource",
    "NumpyBitSource",
    "CallableBitSource",
    "ErrorKind",
    "EntanglementError",
    "PairNotFound",
    "AlreadyMeasured",
    "error_for_kind",
    "Outcome",
    "attempt",
    "BitBalance",
    "RegistrySummary",
    "bit_balance",
    "summarize",
]
