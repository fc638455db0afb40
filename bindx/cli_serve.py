import argparse
import logging

import uvicorn

from bindx.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bindx-serve",
        description="Serve extension association lookups over HTTP.",
    )
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.reload,
        help="Restart the server when the code changes",
    )
    args = parser.parse_args(argv)

    level = getattr(logging, settings.log_level, logging.WARNING)
    logging.getLogger("bindx").setLevel(level)
    uvicorn.run(
        "bindx.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=logging.getLevelName(level).lower(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
