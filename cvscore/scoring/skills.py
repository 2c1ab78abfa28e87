from __future__ import annotations

import random
import re
from functools import lru_cache
from typing import Iterable


@lru_cache(maxsize=512)
def whole_word_pattern(term: str) -> re.Pattern[str]:
    """Match ``term`` with no letter or digit directly before or after it."""
    return re.compile(rf"(?<![a-z0-9]){re.escape(term.lower())}(?![a-z0-9])", re.IGNORECASE)


def contains_whole_word(text: str, term: str) -> bool:
    return bool(whole_word_pattern(term).search(text))


def find_terms(text: str, terms: Iterable[str]) -> list[str]:
    return [term for term in terms if contains_whole_word(text, term)]


def extract_skills(
    text: str,
    terms: Iterable[str],
    *,
    cap: int,
    rng: random.Random | None = None,
) -> list[str]:
    found = find_terms(text, terms)
    (rng or random.Random()).shuffle(found)
    return found[: max(cap, 0)]
