from __future__ import annotations

import hashlib
import json
import logging
import time
from dataclasses import replace

from cvscore.core.config import settings
from cvscore.schemas.analysis import AnalyzeCVResponse, JobMatchResponse
from cvscore.scoring import AnalysisResult, analyze_cv, load_scoring_constants

logger = logging.getLogger(__name__)


def _short_hash(value: str | None) -> str | None:
    if not value:
        return None
    return hashlib.sha256(value.encode("utf-8", errors="ignore")).hexdigest()[:12]


def to_response(result: AnalysisResult) -> AnalyzeCVResponse:
    job_match = None
    if result.job_match is not None:
        job_match = JobMatchResponse(
            match_score=result.job_match.match_score,
            relevance=result.job_match.relevance.value,
            matched_terms=list(result.job_match.matched_terms),
            missing_terms=list(result.job_match.missing_terms),
        )
    return AnalyzeCVResponse(
        score=result.overall_score,
        rating=result.rating.value,
        format_score=result.format_score,
        content_score=result.content_score,
        strengths=list(result.strengths),
        weaknesses=list(result.improvements),
        suggestions=list(result.format_feedback),
        regional_context_score=result.regional_context_score,
        regional_relevance=result.regional_relevance.value,
        skills=list(result.skills_identified),
        job_match=job_match,
    )


def run_cv_analysis(text: str | None, job_description: str | None = None, *, source: str = "text") -> AnalyzeCVResponse:
    """Analyze CV text with the HTTP caps (3 strengths, 3 weaknesses, 2 suggestions, skills per settings)."""
    started_at = time.perf_counter()
    constants = load_scoring_constants()
    caps = replace(constants.caps, skills=settings.response_skills_cap)
    result = analyze_cv(text, job_description=job_description, constants=constants, caps=caps)
    logger.info(
        json.dumps(
            {
                "event": "cv_analysis",
                "source": source,
                "text_len": len(text or ""),
                "text_hash": _short_hash(text),
                "has_job_description": bool(job_description and job_description.strip()),
                "score": result.overall_score,
                "rating": result.rating.value,
                "regional_context_score": result.regional_context_score,
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return to_response(result)
