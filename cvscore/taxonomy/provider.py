from __future__ import annotations

import re
from typing import Protocol

SKILLS = "skills"
REGIONAL_LOCATIONS = "regional_locations"
REGIONAL_LANGUAGES = "regional_languages"
REGIONAL_COMPLIANCE_TERMS = "regional_compliance_terms"
REGIONAL_INSTITUTIONS = "regional_institutions"
REGIONAL_PROVINCES = "regional_provinces"
REGIONAL_ABBREVIATIONS = "regional_abbreviations"

REGIONAL_KEYWORD_CATEGORIES: tuple[str, ...] = (
    REGIONAL_LOCATIONS,
    REGIONAL_LANGUAGES,
    REGIONAL_COMPLIANCE_TERMS,
    REGIONAL_INSTITUTIONS,
)

COMPLIANCE_STATUS_PATTERN = "compliance_status"
QUALIFICATION_LEVEL_PATTERN = "qualification_level"

REQUIRED_CATEGORIES: tuple[str, ...] = (SKILLS, REGIONAL_PROVINCES, *REGIONAL_KEYWORD_CATEGORIES)
# Short acronyms are matched as whole words; a taxonomy may leave them out.
OPTIONAL_CATEGORIES: tuple[str, ...] = (REGIONAL_ABBREVIATIONS,)
REQUIRED_PATTERNS: tuple[str, ...] = (COMPLIANCE_STATUS_PATTERN, QUALIFICATION_LEVEL_PATTERN)
REQUIRED_LABELS: tuple[str, ...] = (
    "market_name",
    "market_adjective",
    COMPLIANCE_STATUS_PATTERN,
    QUALIFICATION_LEVEL_PATTERN,
)


class TaxonomyProvider(Protocol):
    version: str
    market: str

    def terms(self, category: str) -> tuple[str, ...]:
        """Return the ordered, lower-cased terms of a category."""

    def pattern(self, name: str) -> re.Pattern[str]:
        """Return a compiled detector pattern by name."""

    def label(self, name: str) -> str:
        """Return a display label used in feedback messages."""
