"""Core domain models and pure rules for the receipt points service.

This module provides:
- Receipt, ReceiptItem: submitted receipt models
- calculate_points, calculate_points_breakdown: the points rules
- allocate_receipt_id: receipt identifier allocation

Usage:
    from receipt_points.domain import Receipt, ReceiptItem, calculate_points
"""

from receipt_points.domain.identifiers import allocate_receipt_id
from receipt_points.domain.points import PointsBreakdown, calculate_points, calculate_points_breakdown
from receipt_points.domain.receipt import Receipt, ReceiptItem

__all__ = [
    "Receipt",
    "ReceiptItem",
    "PointsBreakdown",
    "calculate_points",
    "calculate_points_breakdown",
    "allocate_receipt_id",
]
