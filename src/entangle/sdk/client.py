from __future__ import annotations

import contextlib
from typing import Any, Iterator

import httpx

from ..core.errors import ErrorKind, error_for_kind
from ..core.pairs import EntangledPair
from ..api.serializers import pair_from_dict
from .handles import PairHandle


def _raise_for_response(res: httpx.Response, *, action: str) -> None:
    if res.status_code < 400:
        return

    detail: Any = None
    try:
        body = res.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = body.get("detail")

    if isinstance(detail, dict) and detail.get("code") in {k.value for k in ErrorKind}:
        raise error_for_kind(str(detail["code"]), int(detail.get("pairId", -1)))
    if res.status_code == 400:
        raise ValueError(str(detail) if detail is not None else res.text)
    raise RuntimeError(f"Failed to {action}: {res.status_code} {res.text}")


class EntangleClient:
    """HTTP client for a running entangle server.

    Mirrors the registry operations and re-raises `PairNotFound` / `AlreadyMeasured`
    from the server's error codes. Pass `http_client` to reuse an existing
    `httpx.Client` (for example a `fastapi.testclient.TestClient`).
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout_s = float(timeout_s)

    @contextlib.contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        if self._http_client is not None:
            yield self._http_client
            return
        with httpx.Client(base_url=self.base_url, timeout=self._timeout_s) as client:
            yield client

    def is_alive(self) -> bool:
        try:
            with self._client() as client:
                r = client.get("/healthz")
        except httpx.HTTPError:
            return False
        return r.status_code == 200 and bool(r.json().get("ok"))

    def create(self, creator: str) -> PairHandle:
        with self._client() as client:
            res = client.post("/api/pairs", json={"creator": creator})
        _raise_for_response(res, action="create pair")
        return PairHandle(int(res.json()["id"]), ops=self)

    def measure(self, pair_id: int) -> int:
        with self._client() as client:
            res = client.post(f"/api/pairs/{int(pair_id)}/measure")
        _raise_for_response(res, action="measure pair")
        return int(res.json()["value"])

    def get(self, pair_id: int) -> EntangledPair:
        with self._client() as client:
            res = client.get(f"/api/pairs/{int(pair_id)}")
        _raise_for_response(res, action="get pair")
        return pair_from_dict(res.json())

    def verify(self, pair_id: int) -> bool:
        with self._client() as client:
            res = client.get(f"/api/pairs/{int(pair_id)}/verify")
        _raise_for_response(res, action="verify pair")
        return bool(res.json()["entangled"])

    def list_by_owner(self, owner: str) -> list[int]:
        with self._client() as client:
            res = client.get("/api/owners/pairs", params={"owner": owner})
        _raise_for_response(res, action="list owner pairs")
        return [int(v) for v in res.json()["pairIds"]]

    def stats(self) -> dict[str, Any]:
        with self._client() as client:
            res = client.get("/api/stats")
        _raise_for_response(res, action="get stats")
        return res.json()

    def reset(self) -> None:
        with self._client() as client:
            res = client.post("/api/reset")
        _raise_for_response(res, action="reset registry")
