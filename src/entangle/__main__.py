from __future__ import annotations

import argparse
import logging
import time

from .config import Settings
from .runtime.server import run


def main() -> None:
    env = Settings.from_env()

    p = argparse.ArgumentParser(prog="entangle", description="entangle: in-memory entangled pair registry")
    p.add_argument("--host", default=env.host)
    p.add_argument("--port", type=int, default=env.port)
    p.add_argument("--seed", type=int, default=env.seed, help="seed measurements for reproducible runs")
    p.add_argument("--log-level", default=env.log_level)
    args = p.parse_args()

    settings = Settings(host=args.host, port=args.port, seed=args.seed, log_level=args.log_level)
    logging.basicConfig(
        level=logging.DEBUG if settings.log_level in {"debug", "trace"} else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    srv = run(settings=settings)
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
