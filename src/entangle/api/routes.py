from __future__ import annotations

import logging
from typing import Any, NoReturn

from fastapi import FastAPI, HTTPException

from ..core.errors import ErrorKind
from ..core.registry import PairRegistry
from ..core.results import Outcome, attempt
from ..core.stats import summarize
from .serializers import pair_to_dict, summary_to_dict

logger = logging.getLogger("entangle.api")

_STATUS_FOR_KIND: dict[ErrorKind, int] = {
    ErrorKind.PAIR_NOT_FOUND: 404,
    ErrorKind.ALREADY_MEASURED: 409,
}


def _raise_for_outcome(outcome: Outcome[Any]) -> NoReturn:
    if outcome.error is None:
        raise RuntimeError("cannot build an error response from a successful outcome")
    raise HTTPException(
        status_code=_STATUS_FOR_KIND[outcome.error],
        detail={"code": outcome.error.value, "pairId": outcome.pair_id, "message": outcome.message},
    )


def mount_pairs_api(app: FastAPI, registry: PairRegistry) -> None:
    """Mount the pair endpoints backed by `registry`."""

    @app.post("/api/pairs", status_code=201)
    def create_pair(body: dict) -> dict[str, int]:
        creator = body.get("creator")
        if not isinstance(creator, str):
            raise HTTPException(status_code=400, detail="creator must be a string")
        try:
            pair_id = registry.create(creator)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return {"id": pair_id}

    @app.get("/api/pairs")
    def list_pairs() -> list[dict[str, Any]]:
        return [pair_to_dict(p) for p in registry.list_pairs()]

    @app.get("/api/pairs/{pair_id}")
    def get_pair(pair_id: int) -> dict[str, Any]:
        res = attempt(registry.get, pair_id)
        if not res.ok:
            _raise_for_outcome(res)
        return pair_to_dict(res.unwrap())

    @app.post("/api/pairs/{pair_id}/measure")
    def measure_pair(pair_id: int) -> dict[str, int]:
        res = attempt(registry.measure, pair_id)
        if not res.ok:
            _raise_for_outcome(res)
        return {"id": pair_id, "value": int(res.unwrap())}

    @app.get("/api/pairs/{pair_id}/verify")
    def verify_pair(pair_id: int) -> dict[str, Any]:
        res = attempt(registry.verify, pair_id)
        if not res.ok:
            _raise_for_outcome(res)
        return {"id": pair_id, "entangled": bool(res.unwrap())}

    @app.get("/api/owners/pairs")
    def list_owner_pairs(owner: str) -> dict[str, Any]:
        return {"owner": owner, "pairIds": registry.list_by_owner(owner)}

    @app.get("/api/stats")
    def stats() -> dict[str, Any]:
        return summary_to_dict(summarize(registry))
