from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from cvscore.taxonomy.provider import (
    COMPLIANCE_STATUS_PATTERN,
    QUALIFICATION_LEVEL_PATTERN,
    REGIONAL_ABBREVIATIONS,
    REGIONAL_KEYWORD_CATEGORIES,
    REGIONAL_PROVINCES,
    TaxonomyProvider,
)

from .constants import RegionalPoints
from .skills import contains_whole_word

if TYPE_CHECKING:
    from .features import FeatureFlags


def regional_keywords(taxonomy: TaxonomyProvider) -> tuple[str, ...]:
    merged: dict[str, None] = {}
    for category in REGIONAL_KEYWORD_CATEGORIES:
        for term in taxonomy.terms(category):
            merged.setdefault(term, None)
    return tuple(merged)


def regional_abbreviations(taxonomy: TaxonomyProvider) -> tuple[str, ...]:
    return taxonomy.terms(REGIONAL_ABBREVIATIONS)


def count_regional_keywords(text: str, keywords: Iterable[str], abbreviations: Iterable[str] = ()) -> int:
    # Substring match: "b-bbee" also counts "bee".
    found = {keyword for keyword in keywords if keyword in text}
    found.update(term for term in abbreviations if contains_whole_word(text, term))
    return len(found)


def has_compliance_status_mention(text: str, taxonomy: TaxonomyProvider) -> bool:
    return bool(taxonomy.pattern(COMPLIANCE_STATUS_PATTERN).search(text))


def has_qualification_level_mention(text: str, taxonomy: TaxonomyProvider) -> bool:
    return bool(taxonomy.pattern(QUALIFICATION_LEVEL_PATTERN).search(text))


def has_regional_address_mention(text: str, taxonomy: TaxonomyProvider) -> bool:
    return any(contains_whole_word(text, name) for name in taxonomy.terms(REGIONAL_PROVINCES))


def score_regional(flags: FeatureFlags, points: RegionalPoints) -> int:
    keyword_points = min(points.keyword_cap, points.per_keyword * max(flags.regional_keyword_matches, 0))
    score = (
        keyword_points
        + (points.compliance_status if flags.has_compliance_status_mention else 0)
        + (points.qualification_level if flags.has_qualification_level_mention else 0)
        + (points.regional_address if flags.has_regional_address_mention else 0)
    )
    return max(0, min(100, score))
