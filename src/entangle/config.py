from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def _parse_port(raw: str, *, field: str) -> int:
    try:
        port = int(raw)
    except ValueError as ex:
        raise ValueError(f"Invalid {field}: {raw!r}") from ex
    if not 0 <= port <= 65535:
        raise ValueError(f"Invalid {field}: {port} is outside 0-65535")
    return port


def _parse_seed(raw: str, *, field: str) -> int | None:
    s = raw.strip()
    if not s:
        return None
    try:
        seed = int(s)
    except ValueError as ex:
        raise ValueError(f"Invalid {field}: {raw!r}") from ex
    if seed < 0:
        raise ValueError(f"Invalid {field}: seed must be >= 0")
    return seed


def _parse_log_level(raw: str, *, field: str) -> str:
    level = raw.strip().lower()
    if level not in _LOG_LEVELS:
        raise ValueError(f"Invalid {field}: {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the server and CLI.

    Environment variables:
    - ENTANGLE_HOST: bind address (default 127.0.0.1)
    - ENTANGLE_PORT: port, 0 picks a free one (default 8000)
    - ENTANGLE_SEED: optional integer seed for measurements; unset means OS entropy
    - ENTANGLE_LOG_LEVEL: uvicorn / logging level (default info)
    """

    host: str = "127.0.0.1"
    port: int = 8000
    seed: int | None = None
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        default = cls()
        return cls(
            host=env.get("ENTANGLE_HOST", "").strip() or default.host,
            port=_parse_port(env["ENTANGLE_PORT"], field="ENTANGLE_PORT") if "ENTANGLE_PORT" in env else default.port,
            seed=_parse_seed(env.get("ENTANGLE_SEED", ""), field="ENTANGLE_SEED"),
            log_level=_parse_log_level(env["ENTANGLE_LOG_LEVEL"], field="ENTANGLE_LOG_LEVEL")
            if "ENTANGLE_LOG_LEVEL" in env
            else default.log_level,
        )
