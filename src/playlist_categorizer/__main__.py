"""Serve the playlist categorizer API with uvicorn."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from playlist_categorizer.config import get_settings


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="playlist_categorizer", description=__doc__)
    parser.add_argument("--host", default=settings.host, help="HTTP listen host")
    parser.add_argument("--port", type=int, default=settings.port, help="HTTP listen port")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"listening {args.host}:{args.port}")

    uvicorn.run(
        "playlist_categorizer.api.app:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
