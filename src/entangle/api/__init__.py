from __future__ import annotations

from fastapi import FastAPI

from ..core.registry import PairRegistry
from .routes import mount_pairs_api


def create_api_app(registry: PairRegistry | None = None) -> FastAPI:
    """Build the HTTP app around `registry` (a fresh, empty one when omitted)."""

    reg = registry if registry is not None else PairRegistry()
    app = FastAPI(title="entangle", version="0.1.0")
    app.state.registry = reg

    mount_pairs_api(app, reg)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/events")
    def events() -> dict[str, int]:
        # Minimal polling endpoint.
        return {"revision": reg.revision()}

    @app.post("/api/reset")
    def reset_registry() -> dict[str, bool]:
        reg.reset()
        return {"ok": True}

    return app


__all__ = ["create_api_app", "mount_pairs_api"]
