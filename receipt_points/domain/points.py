"""Points rules for submitted receipts.

Every rule is a pure function from a Receipt to a non-negative number of
points. Rules are independent, so the total is simply their sum.

Amounts arrive as text and are parsed into ``Decimal``; multiple checks are
done on exact fractions. A value that does not parse falls back to the rule's
neutral input instead of failing the whole receipt:

- ``total`` / ``price``: ``Decimal("0")``
- ``purchaseDate``: no day, so no odd-day bonus
- ``purchaseTime``: no hour, so no afternoon bonus
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_CEILING, Decimal
from fractions import Fraction

from receipt_points.domain.receipt import Receipt

logger = logging.getLogger(__name__)

ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10

QUARTER = Decimal("0.25")
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
DESCRIPTION_LENGTH_DIVISOR = 3

AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# Decimal exponent bounds of a double; amounts outside them parse as 0.
MAX_AMOUNT_EXPONENT = 308
MIN_AMOUNT_EXPONENT = -324

# Half-open window: 14:00 counts, 16:00 does not.
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16

PointsRule = Callable[[Receipt], int]


@dataclass(frozen=True)
class PointsBreakdown:
    """Per-rule contributions for one scored receipt."""

    contributions: tuple[tuple[str, int], ...]

    @property
    def total(self) -> int:
        return sum(points for _, points in self.contributions)

    def as_dict(self) -> dict[str, int]:
        return dict(self.contributions)


def parse_amount(text: str) -> Decimal:
    """
    Parse a text amount, returning ``Decimal("0")`` when it does not parse.

    Accepted: plain decimal notation with an optional sign and exponent, such
    as ``"6.49"``, ``"-1"``, ``".5"`` or ``"1e3"``. Surrounding whitespace,
    digit separators, ``NaN``/``Infinity`` and magnitudes outside the
    double-precision range are all treated as unparseable.
    """
    if AMOUNT_PATTERN.fullmatch(text) is None:
        logger.debug("Unparseable amount %r treated as 0", text)
        return Decimal("0")
    value = Decimal(text)
    if value and not MIN_AMOUNT_EXPONENT <= value.adjusted() <= MAX_AMOUNT_EXPONENT:
        logger.debug("Out of range amount %r treated as 0", text)
        return Decimal("0")
    return value


def is_multiple_of(value: Decimal, step: Decimal) -> bool:
    """Exact multiple check; ``Decimal %`` raises once the quotient outgrows the context precision."""
    return Fraction(value) % Fraction(step) == 0


def parse_purchase_date(text: str) -> date | None:
    """Parse ``YYYY-MM-DD``; None when it is not a real calendar date."""
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        logger.debug("Unparseable purchase date %r", text)
        return None


def parse_purchase_hour(text: str) -> int | None:
    """Return the hour of a 24-hour ``HH:MM`` time, or None when it does not parse."""
    try:
        return datetime.strptime(text, "%H:%M").hour
    except ValueError:
        logger.debug("Unparseable purchase time %r", text)
        return None


def retailer_points(receipt: Receipt) -> int:
    """One point for every ASCII letter or digit in the retailer name."""
    return sum(1 for char in receipt.retailer if char.isascii() and char.isalnum())


def round_total_points(receipt: Receipt) -> int:
    """50 points if the total is a round dollar amount with no cents."""
    total = parse_amount(receipt.total)
    return ROUND_TOTAL_POINTS if is_multiple_of(total, Decimal(1)) else 0


def quarter_total_points(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    total = parse_amount(receipt.total)
    return QUARTER_TOTAL_POINTS if is_multiple_of(total, QUARTER) else 0


def item_pair_points(receipt: Receipt) -> int:
    """5 points for every two items on the receipt."""
    return len(receipt.items) // 2 * ITEM_PAIR_POINTS


def description_length_points(receipt: Receipt) -> int:
    """
    Price-based points for items whose trimmed description length is a multiple of 3.

    Length is counted in UTF-8 bytes, so ``"Crème"`` has length 6. Each
    qualifying item earns ``ceil(price * 0.2)``. An empty description does
    not qualify. Negative prices earn nothing rather than subtracting.
    """
    points = 0
    for item in receipt.items:
        length = len(item.short_description.strip().encode("utf-8", errors="surrogatepass"))
        if length == 0 or length % DESCRIPTION_LENGTH_DIVISOR != 0:
            continue
        price = parse_amount(item.price)
        earned = (price * DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING)
        points += max(0, int(earned))
    return points


def odd_day_points(receipt: Receipt) -> int:
    """6 points if the day in the purchase date is odd."""
    purchase_date = parse_purchase_date(receipt.purchase_date)
    if purchase_date is None:
        return 0
    return ODD_DAY_POINTS if purchase_date.day % 2 == 1 else 0


def afternoon_points(receipt: Receipt) -> int:
    """10 points if the purchase happened between 2:00pm and 4:00pm."""
    hour = parse_purchase_hour(receipt.purchase_time)
    if hour is None:
        return 0
    return AFTERNOON_POINTS if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR else 0


POINTS_RULES: tuple[tuple[str, PointsRule], ...] = (
    ("retailer", retailer_points),
    ("round_total", round_total_points),
    ("quarter_total", quarter_total_points),
    ("item_pairs", item_pair_points),
    ("description_length", description_length_points),
    ("odd_day", odd_day_points),
    ("afternoon", afternoon_points),
)


def calculate_points_breakdown(receipt: Receipt) -> PointsBreakdown:
    """Apply every rule in POINTS_RULES and keep each contribution."""
    contributions = tuple((name, rule(receipt)) for name, rule in POINTS_RULES)
    for name, points in contributions:
        if points:
            logger.debug("Rule %s awarded %d points", name, points)
    return PointsBreakdown(contributions=contributions)


def calculate_points(receipt: Receipt) -> int:
    """Return the total points earned by a receipt."""
    return calculate_points_breakdown(receipt).total
