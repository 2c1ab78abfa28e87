from __future__ import annotations

import logging
import random
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from cvscore.taxonomy import TaxonomyProvider, get_default_taxonomy_provider
from cvscore.taxonomy.provider import SKILLS

from .aggregate import (
    Rating,
    RegionalRelevance,
    classify_rating,
    classify_regional_relevance,
    overall_score,
)
from .constants import FeedbackCaps, ScoringConstants, load_scoring_constants
from .content import score_content
from .features import FeatureFlags, build_feature_flags
from .feedback import FeedbackContext, generate_feedback
from .job_match import JobMatch, match_job_description
from .normalize import normalize_text, validate_cv_text
from .regional import score_regional
from .skills import extract_skills
from .structure import score_format

logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    rating: Rating
    format_score: int = Field(ge=0, le=100)
    content_score: int = Field(ge=0, le=100)
    regional_context_score: int = Field(ge=0, le=100)
    regional_relevance: RegionalRelevance
    strengths: tuple[str, ...]
    improvements: tuple[str, ...]
    format_feedback: tuple[str, ...]
    skills_identified: tuple[str, ...]
    job_match: JobMatch | None = None


def analyze_cv(
    text: Any,
    *,
    job_description: str | None = None,
    taxonomy: TaxonomyProvider | None = None,
    constants: ScoringConstants | None = None,
    caps: FeedbackCaps | None = None,
    seed: int | None = None,
) -> AnalysisResult:
    """Score raw CV text.

    Raises ``CVTextValidationError`` for missing, non-string or blank text.
    ``seed`` fixes the order (and, past a cap, the subset) of the shuffled
    feedback and skill lists; without it every call draws a fresh order.
    """
    raw = validate_cv_text(text)
    taxonomy = taxonomy or get_default_taxonomy_provider()
    constants = constants or load_scoring_constants()
    caps = caps or constants.caps
    rng = random.Random(seed)

    normalized = normalize_text(raw)
    flags = build_feature_flags(normalized, taxonomy)

    format_score = score_format(flags, constants.format)
    content_score = score_content(flags, constants.content)
    regional_score = score_regional(flags, constants.regional)
    overall = overall_score(format_score, content_score, regional_score, constants.weights)

    feedback = generate_feedback(
        FeedbackContext(flags=flags, regional_context_score=regional_score, limits=constants.feedback),
        taxonomy,
        caps,
        rng,
    )
    skills = extract_skills(normalized.text, taxonomy.terms(SKILLS), cap=caps.skills, rng=rng)
    job_match = match_job_description(
        normalized.text,
        job_description,
        taxonomy.terms(SKILLS),
        constants.job_match,
    )

    result = AnalysisResult(
        overall_score=overall,
        rating=classify_rating(overall, constants.rating_thresholds),
        format_score=format_score,
        content_score=content_score,
        regional_context_score=regional_score,
        regional_relevance=classify_regional_relevance(regional_score, constants.relevance_thresholds),
        strengths=feedback.strengths,
        improvements=feedback.improvements,
        format_feedback=feedback.format_feedback,
        skills_identified=tuple(skills),
        job_match=job_match,
    )
    logger.debug(
        "cv_scored overall=%s format=%s content=%s regional=%s taxonomy=%s",
        overall,
        format_score,
        content_score,
        regional_score,
        taxonomy.version,
    )
    return result


def score_dimensions(text: str, taxonomy: TaxonomyProvider | None = None) -> tuple[FeatureFlags, dict[str, int]]:
    """Feature flags and the three dimension scores, without feedback or shuffling."""
    taxonomy = taxonomy or get_default_taxonomy_provider()
    constants = load_scoring_constants()
    flags = build_feature_flags(normalize_text(validate_cv_text(text)), taxonomy)
    return flags, {
        "format": score_format(flags, constants.format),
        "content": score_content(flags, constants.content),
        "regional": score_regional(flags, constants.regional),
    }
