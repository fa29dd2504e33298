"""
Receipt scoring engine.

Runs every registered rule against a receipt and sums the contributions.
Scoring is pure and deterministic; unparseable amounts count as zero and
unparseable dates/times never earn their bonus.
"""
import logging

from receipt_processor.schemas import Receipt
from receipt_processor.scoring.rules import SCORING_RULES

logger = logging.getLogger(__name__)


def points_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return the contribution of each rule, keyed by rule name."""
    return {name: rule(receipt) for name, rule in SCORING_RULES.items()}


def calculate_points(receipt: Receipt) -> int:
    breakdown = points_breakdown(receipt)
    total = sum(breakdown.values())
    logger.debug("Scored %r: %d points %s", receipt.retailer, total, breakdown)
    return total
