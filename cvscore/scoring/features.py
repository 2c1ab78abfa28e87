from __future__ import annotations

from dataclasses import dataclass

from cvscore.taxonomy.provider import SKILLS, TaxonomyProvider

from . import content, regional, structure
from .normalize import NormalizedText


@dataclass(frozen=True)
class FeatureFlags:
    has_sections: bool
    has_bullet_points: bool
    has_contact_info: bool
    has_date_ranges: bool
    has_any_year: bool
    average_line_length: float
    has_action_verbs: bool
    has_quantified_achievement: bool
    has_any_skill_keyword: bool
    regional_keyword_matches: int
    has_compliance_status_mention: bool
    has_qualification_level_mention: bool
    has_regional_address_mention: bool
    text_length: int


def build_feature_flags(normalized: NormalizedText, taxonomy: TaxonomyProvider) -> FeatureFlags:
    text = normalized.text
    return FeatureFlags(
        has_sections=structure.has_sections(text),
        has_bullet_points=structure.has_bullet_points(text),
        has_contact_info=structure.has_contact_info(text),
        has_date_ranges=structure.has_date_ranges(text),
        has_any_year=structure.has_any_year(text),
        average_line_length=content.average_line_length(normalized.lines),
        has_action_verbs=content.has_action_verbs(text),
        has_quantified_achievement=content.has_quantified_achievement(text),
        has_any_skill_keyword=content.has_any_skill_keyword(text, taxonomy.terms(SKILLS)),
        regional_keyword_matches=regional.count_regional_keywords(
            text,
            regional.regional_keywords(taxonomy),
            regional.regional_abbreviations(taxonomy),
        ),
        has_compliance_status_mention=regional.has_compliance_status_mention(text, taxonomy),
        has_qualification_level_mention=regional.has_qualification_level_mention(text, taxonomy),
        has_regional_address_mention=regional.has_regional_address_mention(text, taxonomy),
        text_length=len(text),
    )
