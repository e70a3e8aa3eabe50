"""
Command-line entry point for serving the API.

Usage:
    sampleweb-serve --port 8000
    sampleweb-serve --host 127.0.0.1 --reload
"""

import argparse
import logging

from sampleweb.core.config import settings
from sampleweb.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SampleWeb Forecast API server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(level=settings.log_level)

    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("sampleweb.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
