#!/usr/bin/env python3
"""
grlx-lsp CLI

Starts the grlx language server, which reports missing include files and
resolves go-to-definition requests on include lines.
"""

import argparse
import logging
import sys
from pathlib import Path

from server import __version__, create_server
from server.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    LOG_LEVELS,
    ServerConfig,
    configure_logging,
)


logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="grlx-lsp",
        description="Language server for include references in grlx documents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  grlx-lsp                            # Serve over stdio
  grlx-lsp --tcp --port 2087          # Serve over TCP
  grlx-lsp --log-level debug --log-file /tmp/grlx-lsp.log
        """,
    )

    # Transport options
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Serve over TCP instead of stdio",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Address to bind with --tcp (default: {DEFAULT_HOST})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to bind with --tcp (default: {DEFAULT_PORT})",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Logging verbosity (default: warning)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file (default: stderr)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(args)


def build_config(parsed) -> ServerConfig:
    """Turn parsed arguments into a server configuration."""
    return ServerConfig(
        tcp=parsed.tcp,
        host=parsed.host,
        port=parsed.port,
        log_level=parsed.log_level,
        log_file=Path(parsed.log_file) if parsed.log_file else None,
    )


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    config = build_config(parsed)

    if not 0 < config.port < 65536:
        print(f"Error: '{config.port}' is not a valid port", file=sys.stderr)
        return 1

    try:
        configure_logging(config)
    except OSError as e:
        print(f"Error opening log file: {e}", file=sys.stderr)
        return 1

    server = create_server()
    logger.info("Starting grlx-lsp %s", __version__)

    if config.tcp:
        server.start_tcp(config.host, config.port)
    else:
        server.start_io()

    logger.info("Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
