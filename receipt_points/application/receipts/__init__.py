"""Receipt workflows."""

from receipt_points.application.receipts.points import (
    PointsRedemption,
    ReceiptSubmission,
    ScoreReceiptFileResult,
    redeem_points,
    score_receipt_file,
    submit_receipt,
)

__all__ = [
    "ReceiptSubmission",
    "submit_receipt",
    "PointsRedemption",
    "redeem_points",
    "ScoreReceiptFileResult",
    "score_receipt_file",
]
