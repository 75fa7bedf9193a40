from __future__ import annotations

import contextlib
import logging
import socket
import threading
import time
from dataclasses import dataclass, field

import uvicorn

from ..api import create_api_app
from ..config import Settings
from ..core.pairs import EntangledPair
from ..core.randomness import NumpyBitSource
from ..core.registry import PairRegistry
from ..sdk.client import EntangleClient
from ..sdk.handles import PairHandle

logger = logging.getLogger("entangle.runtime")


@dataclass(frozen=True)
class EntangleServer:
    host: str
    port: int
    url: str
    registry: PairRegistry
    _server: uvicorn.Server | None = field(default=None, repr=False, compare=False)
    _thread: threading.Thread | None = field(default=None, repr=False, compare=False)

    def client(self) -> EntangleClient:
        return EntangleClient(self.url.rstrip("/"))

    def create(self, creator: str) -> PairHandle:
        """Create a pair directly in the served registry."""
        return PairHandle(self.registry.create(creator), ops=self.registry)

    def measure(self, pair_id: int) -> int:
        return self.registry.measure(pair_id)

    def get(self, pair_id: int) -> EntangledPair:
        return self.registry.get(pair_id)

    def verify(self, pair_id: int) -> bool:
        return self.registry.verify(pair_id)

    def list_by_owner(self, owner: str) -> list[int]:
        return self.registry.list_by_owner(owner)

    def stop(self, *, timeout_s: float = 5.0) -> None:
        """Ask uvicorn to exit and wait for the serving thread to release the port."""
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=timeout_s)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()


def _find_free_port(host: str) -> int:
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind((host, 0))
        return int(s.getsockname()[1])


def _wait_until_alive(client: EntangleClient, *, timeout_s: float) -> bool:
    deadline = time.monotonic() + timeout_s
    while time.monotonic() < deadline:
        if client.is_alive():
            return True
        time.sleep(0.05)
    return False


def run(
    *,
    host: str | None = None,
    port: int | None = None,
    registry: PairRegistry | None = None,
    settings: Settings | None = None,
    access_log: bool = False,
    startup_timeout_s: float = 5.0,
) -> EntangleServer:
    """Serve a registry over HTTP from a background thread.

    Explicit `host` / `port` win over `settings` (which default to the environment).
    `port=0` picks a free port. A new registry seeded from `settings.seed` is
    created when none is given.
    """

    cfg = settings if settings is not None else Settings.from_env()
    host_v = host if host is not None else cfg.host
    port_v = int(port) if port is not None else cfg.port
    if port_v == 0:
        port_v = _find_free_port(host_v)

    reg = registry if registry is not None else PairRegistry(NumpyBitSource(cfg.seed))
    app = create_api_app(reg)

    config = uvicorn.Config(app, host=host_v, port=port_v, log_level=cfg.log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    url = f"http://{host_v}:{port_v}/"
    if not _wait_until_alive(EntangleClient(url.rstrip("/"), timeout_s=0.5), timeout_s=startup_timeout_s):
        server.should_exit = True
        thread.join(timeout=startup_timeout_s)
        raise RuntimeError(f"entangle server did not start at {url}")

    logger.info("Serving entangle registry at %s", url)
    return EntangleServer(host=host_v, port=port_v, url=url, registry=reg, _server=server, _thread=thread)
