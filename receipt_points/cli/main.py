#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Run a command handler that may call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt points service CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  serve [--host] [--port] [--config]
                             Start the receipt points HTTP server
  points <receipt.json> [--breakdown]
                             Score a receipt JSON file without registering it

Environment:
  RECEIPT_POINTS_HOST, RECEIPT_POINTS_PORT, RECEIPT_POINTS_LOG_LEVEL
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the receipt points HTTP server")
    serve_parser.add_argument("--host", default=None, help="Host to bind to (default: from settings, 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: from settings, 8080)")
    serve_parser.add_argument("--config", default=None, help="TOML settings file with a [server] table")

    # points command
    points_parser = subparsers.add_parser("points", help="Score a receipt JSON file")
    points_parser.add_argument("receipt", help="Path to receipt JSON file")
    points_parser.add_argument("--breakdown", action="store_true", help="Show points earned by each rule")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "serve":
        from receipt_points.cli.receipt import cmd_serve

        return _run_command(cmd_serve, args)
    elif args.command == "points":
        from receipt_points.cli.receipt import cmd_points

        return _run_command(cmd_points, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
