from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_TEXT_CHARS = 100000

RatingLabel = Literal["Excellent", "Good", "Average", "Needs Improvement"]
RegionalRelevanceLabel = Literal["Excellent", "Good", "Average", "Low"]
JobRelevanceLabel = Literal["High", "Medium", "Low"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeCVRequest(_CamelModel):
    text: str | None = Field(default=None, max_length=MAX_TEXT_CHARS)
    job_description: str | None = Field(default=None, max_length=MAX_TEXT_CHARS)


class AnalyzeResumeTextRequest(_CamelModel):
    resume_content: str | None = Field(default=None, max_length=MAX_TEXT_CHARS)
    job_description: str | None = Field(default=None, max_length=MAX_TEXT_CHARS)


class JobMatchResponse(_CamelModel):
    match_score: int = Field(ge=0, le=100)
    relevance: JobRelevanceLabel
    matched_terms: list[str] = Field(default_factory=list)
    missing_terms: list[str] = Field(default_factory=list)


class AnalyzeCVResponse(_CamelModel):
    score: int = Field(ge=0, le=100)
    rating: RatingLabel
    format_score: int = Field(ge=0, le=100)
    content_score: int = Field(ge=0, le=100)
    strengths: list[str] = Field(max_length=3)
    weaknesses: list[str] = Field(max_length=3)
    suggestions: list[str] = Field(max_length=2)
    regional_context_score: int = Field(ge=0, le=100)
    regional_relevance: RegionalRelevanceLabel
    skills: list[str]
    job_match: JobMatchResponse | None = None


class ErrorResponse(BaseModel):
    error: str
