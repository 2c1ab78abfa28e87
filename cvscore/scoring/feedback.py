from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Literal

from cvscore.taxonomy.provider import TaxonomyProvider

from .constants import FeedbackCaps, FeedbackLimits
from .features import FeatureFlags

Bucket = Literal["strengths", "improvements", "format_feedback"]


@dataclass(frozen=True)
class FeedbackContext:
    flags: FeatureFlags
    regional_context_score: int
    limits: FeedbackLimits

    @property
    def regional_is_weak(self) -> bool:
        return self.regional_context_score < self.limits.weak_regional_score


@dataclass(frozen=True)
class FeedbackRule:
    rule_id: str
    bucket: Bucket
    applies: Callable[[FeedbackContext], bool]
    message: str


@dataclass(frozen=True)
class Feedback:
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    format_feedback: tuple[str, ...] = ()


def build_rules(taxonomy: TaxonomyProvider) -> tuple[FeedbackRule, ...]:
    """Ordered rule table; regional wording comes from the taxonomy labels."""
    market = taxonomy.label("market_name")
    adjective = taxonomy.label("market_adjective")
    compliance = taxonomy.label("compliance_status")
    qualification = taxonomy.label("qualification_level")

    return (
        # strengths
        FeedbackRule("sections_present", "strengths", lambda c: c.flags.has_sections,
                     "Well-structured CV with clear sections"),
        FeedbackRule("bullets_present", "strengths", lambda c: c.flags.has_bullet_points,
                     "Effective use of bullet points improves readability"),
        FeedbackRule("action_verbs_present", "strengths", lambda c: c.flags.has_action_verbs,
                     "Uses strong action verbs to highlight achievements"),
        FeedbackRule("quantified_present", "strengths", lambda c: c.flags.has_quantified_achievement,
                     "Quantifies achievements with specific numbers"),
        FeedbackRule("skills_present", "strengths", lambda c: c.flags.has_any_skill_keyword,
                     "Contains relevant skills that ATS systems look for"),
        FeedbackRule("date_ranges_present", "strengths", lambda c: c.flags.has_date_ranges,
                     "Clear timeline of work experience"),
        FeedbackRule("compliance_present", "strengths", lambda c: c.flags.has_compliance_status_mention,
                     f"Includes {compliance}, important for {adjective} employers"),
        FeedbackRule("qualification_present", "strengths", lambda c: c.flags.has_qualification_level_mention,
                     f"Specifies {qualification} for qualifications"),
        FeedbackRule("address_present", "strengths", lambda c: c.flags.has_regional_address_mention,
                     f"Includes {adjective} location information"),
        FeedbackRule(
            "regional_keywords_strong",
            "strengths",
            lambda c: c.flags.regional_keyword_matches > c.limits.strong_regional_keyword_count,
            f"Well-optimized for the {adjective} job market",
        ),
        # improvements
        FeedbackRule("sections_missing", "improvements", lambda c: not c.flags.has_sections,
                     "Add clear section headings (Education, Experience, Skills)"),
        FeedbackRule("bullets_missing", "improvements", lambda c: not c.flags.has_bullet_points,
                     "Use bullet points to highlight achievements"),
        FeedbackRule("action_verbs_missing", "improvements", lambda c: not c.flags.has_action_verbs,
                     "Include strong action verbs to describe achievements"),
        FeedbackRule("quantified_missing", "improvements", lambda c: not c.flags.has_quantified_achievement,
                     "Quantify achievements with specific numbers"),
        FeedbackRule("skills_missing", "improvements", lambda c: not c.flags.has_any_skill_keyword,
                     "Add industry-relevant skills and keywords"),
        FeedbackRule("date_ranges_missing", "improvements", lambda c: not c.flags.has_date_ranges,
                     "Include clear date ranges for education and work experience"),
        FeedbackRule(
            "compliance_missing",
            "improvements",
            lambda c: not c.flags.has_compliance_status_mention and c.regional_is_weak,
            f"Consider adding {compliance} information if applicable",
        ),
        FeedbackRule(
            "qualification_missing",
            "improvements",
            lambda c: not c.flags.has_qualification_level_mention and c.regional_is_weak,
            f"Add {qualification} to your qualifications",
        ),
        FeedbackRule(
            "address_missing",
            "improvements",
            lambda c: not c.flags.has_regional_address_mention and c.regional_is_weak,
            f"Include your location in {market}",
        ),
        # format feedback
        FeedbackRule(
            "lines_too_long",
            "format_feedback",
            lambda c: c.flags.average_line_length > c.limits.long_line_length,
            "Shorten your bullet points to 1-2 lines each",
        ),
        FeedbackRule("contact_missing", "format_feedback", lambda c: not c.flags.has_contact_info,
                     "Add complete contact information (phone, email, LinkedIn)"),
        FeedbackRule(
            "text_too_long",
            "format_feedback",
            lambda c: c.flags.text_length > c.limits.long_text_chars,
            "Consider shortening your CV to 2-3 pages maximum",
        ),
        FeedbackRule(
            "text_too_short",
            "format_feedback",
            lambda c: c.flags.text_length < c.limits.short_text_chars,
            "Your CV may be too short - add more relevant details",
        ),
        FeedbackRule("years_missing", "format_feedback", lambda c: not c.flags.has_any_year,
                     "Add dates to your work experience and education sections"),
    )


def evaluate_rules(rules: tuple[FeedbackRule, ...], context: FeedbackContext) -> Feedback:
    buckets: dict[str, list[str]] = {"strengths": [], "improvements": [], "format_feedback": []}
    for rule in rules:
        if rule.applies(context):
            buckets[rule.bucket].append(rule.message)
    return Feedback(**{name: tuple(messages) for name, messages in buckets.items()})


def generate_feedback(
    context: FeedbackContext,
    taxonomy: TaxonomyProvider,
    caps: FeedbackCaps,
    rng: random.Random | None = None,
) -> Feedback:
    rng = rng or random.Random()
    feedback = evaluate_rules(build_rules(taxonomy), context)

    def _pick(messages: tuple[str, ...], cap: int) -> tuple[str, ...]:
        shuffled = list(messages)
        rng.shuffle(shuffled)
        return tuple(shuffled[: max(cap, 0)])

    return Feedback(
        strengths=_pick(feedback.strengths, caps.strengths),
        improvements=_pick(feedback.improvements, caps.improvements),
        format_feedback=_pick(feedback.format_feedback, caps.format_feedback),
    )
