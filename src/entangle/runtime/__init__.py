from __future__ import annotations

from .server import EntangleServer, run

__all__ = ["EntangleServer", "run"]
