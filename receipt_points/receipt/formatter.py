"""Format points breakdowns for terminal output."""

from receipt_points.domain.points import PointsBreakdown
from receipt_points.domain.receipt import Receipt


def _format_rows_aligned(rows: list[tuple[str, str]], indent: str = "  ") -> list[str]:
    """
    Format (label, value) rows with labels left-aligned and values right-aligned.

    Args:
        rows: List of (label, value) tuples
        indent: Indentation prefix for each line

    Returns:
        List of formatted lines
    """
    if not rows:
        return []

    max_label_len = max(len(label) for label, _ in rows)
    max_value_len = max(len(value) for _, value in rows)
    return [f"{indent}{label.ljust(max_label_len)}  {value.rjust(max_value_len)}" for label, value in rows]


def format_points_breakdown(receipt: Receipt, breakdown: PointsBreakdown) -> str:
    """Render a receipt header, one line per rule, and the total."""
    lines = [
        f"Retailer: {receipt.retailer}",
        f"Purchased: {receipt.purchase_date} {receipt.purchase_time}",
        f"Total: {receipt.total} ({len(receipt.items)} items)",
        "",
    ]
    rows = [(name, str(points)) for name, points in breakdown.contributions]
    rows.append(("points", str(breakdown.total)))
    body = _format_rows_aligned(rows)
    # Separator above the total row
    width = max(len(line) for line in body)
    body.insert(len(body) - 1, "  " + "-" * (width - 2))
    lines.extend(body)
    return "\n".join(lines)
