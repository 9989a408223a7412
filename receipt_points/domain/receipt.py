"""Data models for submitted purchase receipts."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReceiptItem:
    """A single purchased line on a receipt."""

    short_description: str
    # Kept as submitted text; parsed to Decimal only while scoring.
    price: str


@dataclass(frozen=True)
class Receipt:
    """A purchase submission as accepted from a client."""

    retailer: str
    purchase_date: str  # YYYY-MM-DD
    purchase_time: str  # HH:MM, 24-hour
    total: str
    items: tuple[ReceiptItem, ...] = field(default_factory=tuple)
