"""
Point rules.

Each rule is a pure function ``(Receipt) -> int`` computed independently of
the others; the receipt's score is the sum over ``SCORING_RULES``.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal

from receipt_processor.schemas import Receipt
from receipt_processor.scoring.parsing import (
    parse_amount,
    parse_purchase_date,
    parse_purchase_time,
)

ALPHANUMERIC = re.compile(r"[A-Za-z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def retailer_name_points(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return len(ALPHANUMERIC.findall(receipt.retailer))


def round_dollar_points(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    total = parse_amount(receipt.total)
    if total == total.to_integral_value():
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(receipt: Receipt) -> int:
    """25 points if the total, in whole cents, is a multiple of 25."""
    cents = int(parse_amount(receipt.total) * 100)
    if cents % 25 == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pair_points(receipt: Receipt) -> int:
    """5 points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_length_points(receipt: Receipt) -> int:
    """ceil(price * 0.2) for every item whose trimmed description length is a multiple of 3.

    An empty description counts (length 0).  A negative price earns nothing.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_MULTIPLE:
            continue
        bonus = math.ceil(parse_amount(item.price) * DESCRIPTION_PRICE_MULTIPLIER)
        points += max(bonus, 0)
    return points


def odd_day_points(receipt: Receipt) -> int:
    """6 points if the day of the purchase date is odd."""
    purchased_on = parse_purchase_date(receipt.purchase_date)
    if purchased_on is not None and purchased_on.day % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_points(receipt: Receipt) -> int:
    """10 points if the purchase was made from 14:00 up to (not including) 16:00."""
    purchased_at = parse_purchase_time(receipt.purchase_time)
    if purchased_at is None:
        return 0
    if AFTERNOON_START_HOUR <= purchased_at.hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SCORING_RULES = {
    "retailer_name": retailer_name_points,
    "round_dollar": round_dollar_points,
    "quarter_multiple": quarter_multiple_points,
    "item_pairs": item_pair_points,
    "description_length": description_length_points,
    "odd_day": odd_day_points,
    "afternoon": afternoon_points,
}
