"""
Command line entry point.

Usage::

    quotaday [--host HOST] [-p PORT]    # start the web server
    quotaday version                    # print the version and exit

Defaults for host and port come from the ``HOST`` and ``PORT``
environment variables (see ``quotaday_api.app.core.config``).
"""

import argparse
import logging
from typing import List, Optional

from uvicorn import Config, Server

from quotaday_api.app.core.config import settings
from quotaday_api.app.core.logging_config import setup_logging
from quotaday_api.app.core.version import version_string

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="quotaday", description="Start the Quotaday web server.")
    ap.add_argument("-p", "--port", type=int, default=settings.port, help="port to listen to")
    ap.add_argument("--host", default=settings.host, help="address to bind to")
    commands = ap.add_subparsers(dest="command")
    commands.add_parser("version", help="print the version and exit")
    return ap


def serve(host: str, port: int) -> None:
    """Run the API with uvicorn until interrupted."""
    from quotaday_api.app.main import create_app

    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting Quotaday %s on port %d", version_string(), port)
    # Logging is configured by setup_logging; requests are logged by our middleware.
    config = Config(
        app=create_app(settings),
        host=host,
        port=port,
        reload=False,
        log_config=None,
        access_log=False,
    )
    Server(config).run()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "version":
        print(version_string())
        return 0
    serve(args.host, args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
