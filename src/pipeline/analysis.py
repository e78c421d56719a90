"""
Location analysis.

Three independent read-only passes over merged records:
category statistics, the most reviewed location, and incomplete data.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional

from src.models.location import AnalysisResult, MergedLocation, Number
import config.settings as settings

logger = logging.getLogger(__name__)


def _to_float(value: Number) -> float:
    """Convert to float, saturating ints too large for a float to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _add(total: Number, value: Number) -> Number:
    # Exact int sums where possible; float arithmetic once an int overflows
    try:
        return total + value
    except OverflowError:
        return _to_float(total) + _to_float(value)


def _average(total: Number, count: int) -> float:
    try:
        return total / count
    except OverflowError:
        return _to_float(total) / count


def round_rating(value: float, decimals: int = settings.RATING_DECIMALS) -> float:
    """
    Round half away from zero on the exact binary value of `value`.

    Decimal(float) is exact, so 0.25 rounds to 0.3 and 0.35 (stored as
    0.34999...) also rounds to 0.3. Infinities and NaN are returned as is.
    """
    if not math.isfinite(value):
        return value

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Enough digits for every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def analyze_locations(locations: List[MergedLocation]) -> List[AnalysisResult]:
    """
    Aggregate complete records by category.

    Args:
        locations: Merged records (incomplete ones are skipped)

    Returns:
        One AnalysisResult per category, in first-seen order
    """
    totals: Dict[str, Dict] = {}

    for record in locations:
        if not record.is_complete:
            continue

        meta = record.metadata
        current = totals.setdefault(
            meta.type,
            {"count": 0, "total_rating": 0, "total_reviews": 0}
        )
        current["count"] += 1
        current["total_rating"] = _add(current["total_rating"], meta.rating)
        current["total_reviews"] = _add(current["total_reviews"], meta.reviews)

    results = [
        AnalysisResult(
            type=category,
            count=data["count"],
            average_rating=round_rating(_average(data["total_rating"], data["count"])),
            total_reviews=data["total_reviews"]
        )
        for category, data in totals.items()
    ]

    logger.info(f"Aggregated {len(results)} categories")
    return results


def find_location_with_most_reviews(
    locations: List[MergedLocation]
) -> Optional[MergedLocation]:
    """
    Return the complete record with the strictly greatest review count.

    Ties keep the earliest record. Returns None if no record has metadata.
    """
    best = None
    for record in locations:
        if not record.is_complete:
            continue
        if best is None or record.metadata.reviews > best.metadata.reviews:
            best = record
    return best


def find_incomplete_data(locations: List[MergedLocation]) -> List[MergedLocation]:
    """Return records without metadata, in original order."""
    return [record for record in locations if not record.is_complete]
