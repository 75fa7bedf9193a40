from __future__ import annotations

from .client import EntangleClient
from .handles import PairHandle, PairOps

__all__ = ["EntangleClient", "PairHandle", "PairOps"]
