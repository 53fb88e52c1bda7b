"""
Points Scorer - Maps a total duration to a tiered score.

Scoring rule:
- the first hour is worth 6 points, even if it is not fully used
- the i-th additional full hour is worth 6 + 2*i (8, 10, 12, ...)
- a trailing partial hour is billed at the next tier's rate, prorated by
  the fraction of the hour used

Example: 2h30m = 6 + 8 + 10 x 0.5 = 19
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from timecalc.domain.models import MINUTES_PER_HOUR, PointsBreakdown

logger = logging.getLogger(__name__)

BASE_POINTS = 6
POINTS_STEP = 2


def _tier_rate(tier: int) -> int:
    return BASE_POINTS + POINTS_STEP * tier


def _round_points(value: float) -> float:
    """Round half-up to two decimals."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def points_breakdown(total_minutes: int) -> Optional[PointsBreakdown]:
    """
    Compute the score together with its components.

    Args:
        total_minutes: Aggregate duration flattened to minutes

    Returns:
        None when there is nothing to score, otherwise the breakdown

    Raises:
        ValueError: If total_minutes is negative
    """
    if total_minutes < 0:
        raise ValueError(f"Total minutes cannot be negative: {total_minutes}")
    if total_minutes == 0:
        return None

    raw_score = float(BASE_POINTS)
    tier_points = []
    partial_rate = None
    partial_fraction = 0.0

    remaining = total_minutes - MINUTES_PER_HOUR
    logger.debug(f"Scoring {total_minutes} minutes, {remaining} beyond the first hour")

    if remaining > 0:
        full_hours, extra_minutes = divmod(remaining, MINUTES_PER_HOUR)

        for tier in range(1, full_hours + 1):
            tier_points.append(_tier_rate(tier))
            raw_score += _tier_rate(tier)
            logger.debug(f"Hour {tier + 1}: +{_tier_rate(tier)} -> {raw_score}")

        if extra_minutes > 0:
            partial_rate = _tier_rate(full_hours + 1)
            partial_fraction = extra_minutes / MINUTES_PER_HOUR
            raw_score += partial_rate * partial_fraction
            logger.debug(f"Partial hour: {partial_rate} x {extra_minutes}/60 -> {raw_score}")

    score = _round_points(raw_score)
    return PointsBreakdown(
        total_minutes=total_minutes,
        base=BASE_POINTS,
        tier_points=tier_points,
        partial_rate=partial_rate,
        partial_fraction=partial_fraction,
        raw_score=raw_score,
        score=score,
    )


def calculate_points(total_minutes: int) -> Optional[float]:
    """Score for a total duration, or None when the total is zero."""
    breakdown = points_breakdown(total_minutes)
    return breakdown.score if breakdown is not None else None


def format_points(value: float) -> str:
    """
    Format a score without insignificant zeros.

    19.0 -> "19", 19.5 -> "19.5", 19.25 -> "19.25"
    """
    text = f"{value:.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
