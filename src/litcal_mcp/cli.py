from __future__ import annotations

import argparse
import logging

from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Liturgical Calendar MCP server command line interface.")
    parser.add_argument("--log-level", default=None, help="Override LITCAL_LOG_LEVEL (e.g. DEBUG).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp_parser = subparsers.add_parser("mcp", help="Start the MCP server exposing the calendar tools.")
    mcp_parser.add_argument("--transport", choices=("stdio", "http"), default="stdio")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    api_parser = subparsers.add_parser("api", help="Start the local FastAPI server exposing the same tools.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    logging.getLogger(__name__).info("Liturgical Calendar CLI starting (%s)", args.command)

    if args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(transport=args.transport, host=args.host, port=args.port)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
