from __future__ import annotations

import re
from collections import Counter
from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .constants import JobMatchSettings
from .skills import contains_whole_word, find_terms

_WORD_RE = re.compile(r"[a-z][a-z0-9+#.\-/]*[a-z0-9+#]|[a-z]")
_STOPWORDS = {
    "about",
    "ability",
    "able",
    "also",
    "candidate",
    "company",
    "experience",
    "from",
    "have",
    "into",
    "must",
    "other",
    "our",
    "position",
    "preferred",
    "required",
    "requirements",
    "responsibilities",
    "role",
    "should",
    "skills",
    "strong",
    "team",
    "that",
    "their",
    "this",
    "we",
    "well",
    "were",
    "what",
    "which",
    "will",
    "with",
    "within",
    "work",
    "working",
    "years",
    "your",
}


class JobRelevance(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class JobMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    match_score: int = Field(ge=0, le=100)
    relevance: JobRelevance
    matched_terms: tuple[str, ...] = ()
    missing_terms: tuple[str, ...] = ()


def _top_terms(text: str, min_length: int, limit: int) -> list[str]:
    tokens = [
        token.strip(".-/")
        for token in _WORD_RE.findall(text)
    ]
    tokens = [token for token in tokens if len(token) >= min_length and token not in _STOPWORDS]
    counts = Counter(tokens)
    return [term for term, _ in counts.most_common(limit)]


def reference_terms(job_description: str, skill_terms: Iterable[str], settings: JobMatchSettings) -> list[str]:
    text = job_description.strip().lower()
    skills = find_terms(text, skill_terms)
    if skills:
        return skills
    return _top_terms(text, settings.min_word_length, settings.max_reference_terms)


def classify_job_relevance(score: int, settings: JobMatchSettings) -> JobRelevance:
    if score >= settings.high_threshold:
        return JobRelevance.HIGH
    if score >= settings.medium_threshold:
        return JobRelevance.MEDIUM
    return JobRelevance.LOW


def match_job_description(
    cv_text: str,
    job_description: str | None,
    skill_terms: Iterable[str],
    settings: JobMatchSettings,
) -> JobMatch | None:
    """Keyword overlap between the normalized CV text and a job description.

    Reference terms are the taxonomy skills the job description names; when it
    names none, its most frequent content words are used instead. Returns None
    when no job description (or only whitespace) is given.
    """
    if not job_description or not job_description.strip():
        return None

    terms = reference_terms(job_description, skill_terms, settings)
    if not terms:
        return JobMatch(match_score=0, relevance=JobRelevance.LOW)

    matched = [term for term in terms if contains_whole_word(cv_text, term)]
    missing = [term for term in terms if term not in matched]
    score = int(100 * len(matched) / len(terms) + 0.5)
    return JobMatch(
        match_score=score,
        relevance=classify_job_relevance(score, settings),
        matched_terms=tuple(matched),
        missing_terms=tuple(missing),
    )
