from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from cvscore.core.config.scoring import ScoringConfigError, get_scoring_config, lookup_value

_MISSING = object()


def _required(config: dict[str, Any], path: str) -> Any:
    value = lookup_value(config, path, _MISSING)
    if value is _MISSING:
        raise ScoringConfigError(f"Scoring config is missing required key '{path}'.")
    return value


def _int(config: dict[str, Any], path: str) -> int:
    value = _required(config, path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScoringConfigError(f"Scoring config key '{path}' must be a number, got {value!r}.")
    return int(value)


def _float(config: dict[str, Any], path: str) -> float:
    value = _required(config, path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScoringConfigError(f"Scoring config key '{path}' must be a number, got {value!r}.")
    return float(value)


@dataclass(frozen=True)
class FormatPoints:
    sections: int
    bullet_points: int
    contact_info: int
    date_ranges: int
    any_year: int


@dataclass(frozen=True)
class ContentPoints:
    line_length: int
    action_verbs: int
    quantified_achievement: int
    skill_keyword: int
    line_length_min_exclusive: float
    line_length_max_exclusive: float


@dataclass(frozen=True)
class RegionalPoints:
    per_keyword: int
    keyword_cap: int
    compliance_status: int
    qualification_level: int
    regional_address: int


@dataclass(frozen=True)
class Thresholds:
    excellent: int
    good: int
    average: int


@dataclass(frozen=True)
class AggregateWeights:
    format: float
    content: float
    regional: float


@dataclass(frozen=True)
class FeedbackCaps:
    strengths: int
    improvements: int
    format_feedback: int
    skills: int


@dataclass(frozen=True)
class FeedbackLimits:
    weak_regional_score: int
    strong_regional_keyword_count: int
    long_line_length: float
    long_text_chars: int
    short_text_chars: int


@dataclass(frozen=True)
class JobMatchSettings:
    min_word_length: int
    max_reference_terms: int
    high_threshold: int
    medium_threshold: int


@dataclass(frozen=True)
class ScoringConstants:
    version: str
    format: FormatPoints
    content: ContentPoints
    regional: RegionalPoints
    weights: AggregateWeights
    rating_thresholds: Thresholds
    relevance_thresholds: Thresholds
    feedback: FeedbackLimits
    caps: FeedbackCaps
    job_match: JobMatchSettings


def build_scoring_constants(config: dict[str, Any]) -> ScoringConstants:
    """Turn a parsed scoring YAML mapping into typed constants, failing on any missing key."""
    constants = ScoringConstants(
        version=str(config.get("version") or "unversioned"),
        format=FormatPoints(
            sections=_int(config, "format.points.sections"),
            bullet_points=_int(config, "format.points.bullet_points"),
            contact_info=_int(config, "format.points.contact_info"),
            date_ranges=_int(config, "format.points.date_ranges"),
            any_year=_int(config, "format.points.any_year"),
        ),
        content=ContentPoints(
            line_length=_int(config, "content.points.line_length"),
            action_verbs=_int(config, "content.points.action_verbs"),
            quantified_achievement=_int(config, "content.points.quantified_achievement"),
            skill_keyword=_int(config, "content.points.skill_keyword"),
            line_length_min_exclusive=_float(config, "content.line_length.min_exclusive"),
            line_length_max_exclusive=_float(config, "content.line_length.max_exclusive"),
        ),
        regional=RegionalPoints(
            per_keyword=_int(config, "regional.points.per_keyword"),
            keyword_cap=_int(config, "regional.points.keyword_cap"),
            compliance_status=_int(config, "regional.points.compliance_status"),
            qualification_level=_int(config, "regional.points.qualification_level"),
            regional_address=_int(config, "regional.points.regional_address"),
        ),
        weights=AggregateWeights(
            format=_float(config, "aggregate.weights.format"),
            content=_float(config, "aggregate.weights.content"),
            regional=_float(config, "aggregate.weights.regional"),
        ),
        rating_thresholds=Thresholds(
            excellent=_int(config, "aggregate.rating_thresholds.excellent"),
            good=_int(config, "aggregate.rating_thresholds.good"),
            average=_int(config, "aggregate.rating_thresholds.average"),
        ),
        relevance_thresholds=Thresholds(
            excellent=_int(config, "aggregate.relevance_thresholds.excellent"),
            good=_int(config, "aggregate.relevance_thresholds.good"),
            average=_int(config, "aggregate.relevance_thresholds.average"),
        ),
        feedback=FeedbackLimits(
            weak_regional_score=_int(config, "feedback.weak_regional_score"),
            strong_regional_keyword_count=_int(config, "feedback.strong_regional_keyword_count"),
            long_line_length=_float(config, "feedback.long_line_length"),
            long_text_chars=_int(config, "feedback.long_text_chars"),
            short_text_chars=_int(config, "feedback.short_text_chars"),
        ),
        caps=FeedbackCaps(
            strengths=_int(config, "feedback.caps.strengths"),
            improvements=_int(config, "feedback.caps.improvements"),
            format_feedback=_int(config, "feedback.caps.format_feedback"),
            skills=_int(config, "feedback.caps.skills"),
        ),
        job_match=JobMatchSettings(
            min_word_length=_int(config, "job_match.min_word_length"),
            max_reference_terms=_int(config, "job_match.max_reference_terms"),
            high_threshold=_int(config, "job_match.relevance_thresholds.high"),
            medium_threshold=_int(config, "job_match.relevance_thresholds.medium"),
        ),
    )
    _validate(constants)
    return constants


def _validate(constants: ScoringConstants) -> None:
    dimension_totals = {
        "format": sum(
            (
                constants.format.sections,
                constants.format.bullet_points,
                constants.format.contact_info,
                constants.format.date_ranges,
                constants.format.any_year,
            )
        ),
        "content": sum(
            (
                constants.content.line_length,
                constants.content.action_verbs,
                constants.content.quantified_achievement,
                constants.content.skill_keyword,
            )
        ),
        "regional": sum(
            (
                constants.regional.keyword_cap,
                constants.regional.compliance_status,
                constants.regional.qualification_level,
                constants.regional.regional_address,
            )
        ),
    }
    for name, total in dimension_totals.items():
        if total > 100:
            raise ScoringConfigError(f"Points of the '{name}' dimension add up to {total}, above 100.")

    weights = constants.weights
    if abs(weights.format + weights.content + weights.regional - 1.0) > 1e-6:
        raise ScoringConfigError("Aggregate weights must add up to 1.0.")

    for label, thresholds in (
        ("rating", constants.rating_thresholds),
        ("relevance", constants.relevance_thresholds),
    ):
        if not thresholds.excellent > thresholds.good > thresholds.average:
            raise ScoringConfigError(f"{label} thresholds must be strictly decreasing.")

    if constants.job_match.high_threshold <= constants.job_match.medium_threshold:
        raise ScoringConfigError("job_match.relevance_thresholds.high must be above medium.")
    if constants.job_match.max_reference_terms < 1:
        raise ScoringConfigError("job_match.max_reference_terms must be at least 1.")


@lru_cache(maxsize=1)
def load_scoring_constants() -> ScoringConstants:
    return build_scoring_constants(get_scoring_config())
