from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable

from .constants import ContentPoints
from .skills import contains_whole_word

if TYPE_CHECKING:
    from .features import FeatureFlags

ACTION_VERBS: tuple[str, ...] = (
    "managed",
    "developed",
    "created",
    "implemented",
    "led",
    "designed",
    "improved",
    "increased",
    "reduced",
    "achieved",
)

_ACTION_VERB_RE = re.compile(r"\b(?:" + "|".join(ACTION_VERBS) + r")\b")
_QUANTIFIED_RE = re.compile(
    r"\b\d+(?:[.,]\d+)?\s?(?:%|percent\b)"
    r"|\b(?:increased|decreased|reduced|improved)\s+(?:by\s+)?(?:r\s?|\$|€|£)?\d"
)


def average_line_length(lines: Iterable[str]) -> float:
    lengths = [len(line) for line in lines]
    if not lengths:
        return 0.0
    return sum(lengths) / len(lengths)


def has_action_verbs(text: str) -> bool:
    return bool(_ACTION_VERB_RE.search(text))


def has_quantified_achievement(text: str) -> bool:
    return bool(_QUANTIFIED_RE.search(text))


def has_any_skill_keyword(text: str, skill_terms: Iterable[str]) -> bool:
    return any(contains_whole_word(text, term) for term in skill_terms)


def line_length_in_range(avg_length: float, points: ContentPoints) -> bool:
    return points.line_length_min_exclusive < avg_length < points.line_length_max_exclusive


def score_content(flags: FeatureFlags, points: ContentPoints) -> int:
    score = (
        (points.line_length if line_length_in_range(flags.average_line_length, points) else 0)
        + (points.action_verbs if flags.has_action_verbs else 0)
        + (points.quantified_achievement if flags.has_quantified_achievement else 0)
        + (points.skill_keyword if flags.has_any_skill_keyword else 0)
    )
    return max(0, min(100, score))
