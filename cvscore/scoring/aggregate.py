from __future__ import annotations

import math
from enum import Enum

from .constants import AggregateWeights, Thresholds


class Rating(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    NEEDS_IMPROVEMENT = "Needs Improvement"


class RegionalRelevance(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    LOW = "Low"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def overall_score(format_score: int, content_score: int, regional_score: int, weights: AggregateWeights) -> int:
    weighted = (
        weights.format * format_score
        + weights.content * content_score
        + weights.regional * regional_score
    )
    # Absorb float noise before rounding halves up.
    return max(0, min(100, round_half_up(round(weighted, 6))))


def classify_rating(score: int, thresholds: Thresholds) -> Rating:
    if score >= thresholds.excellent:
        return Rating.EXCELLENT
    if score >= thresholds.good:
        return Rating.GOOD
    if score >= thresholds.average:
        return Rating.AVERAGE
    return Rating.NEEDS_IMPROVEMENT


def classify_regional_relevance(score: int, thresholds: Thresholds) -> RegionalRelevance:
    if score >= thresholds.excellent:
        return RegionalRelevance.EXCELLENT
    if score >= thresholds.good:
        return RegionalRelevance.GOOD
    if score >= thresholds.average:
        return RegionalRelevance.AVERAGE
    return RegionalRelevance.LOW
