"""Receipt command handlers used by the unified CLI."""

import argparse
import sys
from pathlib import Path

from receipt_points.runtime import get_logger

logger = get_logger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server for receipt submission and points lookup."""
    import uvicorn

    from receipt_points.runtime import SettingsError, load_settings, set_log_level
    from receipt_points.runtime import receipt_server as server

    try:
        settings = load_settings(args.config)
    except SettingsError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    set_log_level(settings.log_level_value)

    print(f"Starting receipt points server on {host}:{port}")
    print(f"Endpoints: POST http://{host}:{port}/receipts/process | GET /receipts/<id>/points")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=host, port=port)


def cmd_points(args: argparse.Namespace) -> None:
    """Score a receipt JSON file and print the points."""
    from receipt_points.application.receipts.points import score_receipt_file
    from receipt_points.receipt.formatter import format_points_breakdown

    result = score_receipt_file(Path(args.receipt))

    if result.status != "ok":
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        sys.exit(1)

    assert result.receipt is not None and result.breakdown is not None
    if args.breakdown:
        print(format_points_breakdown(result.receipt, result.breakdown))
    else:
        print(result.breakdown.total)
