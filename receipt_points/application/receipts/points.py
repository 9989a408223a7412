"""Receipt submission and points redemption workflows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import ValidationError

from receipt_points.domain.points import PointsBreakdown, calculate_points_breakdown
from receipt_points.domain.receipt import Receipt
from receipt_points.receipt.payload import parse_receipt_json
from receipt_points.runtime.logging import get_logger
from receipt_points.runtime.receipt_registry import ReceiptNotFoundError, ReceiptRegistry

logger = get_logger(__name__)

RedemptionStatus = Literal["ok", "not_found"]
ScoreFileStatus = Literal["ok", "file_not_found", "read_error", "invalid_receipt"]


@dataclass(frozen=True)
class ReceiptSubmission:
    """Outcome of submitting a receipt."""

    receipt_id: str


@dataclass(frozen=True)
class PointsRedemption:
    """Outcome of redeeming a receipt id for points."""

    status: RedemptionStatus
    receipt_id: str
    points: int | None = None
    breakdown: PointsBreakdown | None = None
    error: str | None = None


@dataclass(frozen=True)
class ScoreReceiptFileResult:
    """Outcome of scoring a receipt JSON file without registering it."""

    status: ScoreFileStatus
    receipt: Receipt | None = None
    breakdown: PointsBreakdown | None = None
    error: str | None = None


def submit_receipt(registry: ReceiptRegistry, receipt: Receipt) -> ReceiptSubmission:
    """Register a receipt and return its new id."""
    receipt_id = registry.register(receipt)
    logger.info("Accepted receipt %s (%d items)", receipt_id, len(receipt.items))
    return ReceiptSubmission(receipt_id=receipt_id)


def redeem_points(registry: ReceiptRegistry, receipt_id: str) -> PointsRedemption:
    """Look up a receipt and score it. Scoring is recomputed on every call."""
    try:
        receipt = registry.lookup(receipt_id)
    except ReceiptNotFoundError as exc:
        logger.info("Points requested for unknown receipt %s", receipt_id)
        return PointsRedemption(status="not_found", receipt_id=receipt_id, error=str(exc))

    breakdown = calculate_points_breakdown(receipt)
    return PointsRedemption(
        status="ok",
        receipt_id=receipt_id,
        points=breakdown.total,
        breakdown=breakdown,
    )


def score_receipt_file(path: Path) -> ScoreReceiptFileResult:
    """Read a receipt JSON file and score it."""
    if not path.exists():
        return ScoreReceiptFileResult(status="file_not_found", error=f"Receipt file not found: {path}")

    try:
        raw = path.read_bytes()
    except OSError as exc:
        return ScoreReceiptFileResult(status="read_error", error=f"Cannot read receipt file {path}: {exc}")

    try:
        receipt = parse_receipt_json(raw)
    except ValidationError as exc:
        return ScoreReceiptFileResult(status="invalid_receipt", error=f"Invalid receipt format in {path}:\n{exc}")

    return ScoreReceiptFileResult(
        status="ok",
        receipt=receipt,
        breakdown=calculate_points_breakdown(receipt),
    )
