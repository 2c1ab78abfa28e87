from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import FormatPoints

if TYPE_CHECKING:
    from .features import FeatureFlags

_MONTH = (
    r"(?:january|february|march|april|may|june|july|august|september|october|november|december"
    r"|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec)\b\.?"
)
_YEAR = r"(?:19|20)\d{2}"
_RANGE_SEP = r"\s*(?:-|–|—|to\b)\s*"
_RANGE_END = rf"(?:{_YEAR}|present|current|now)\b"

_SECTION_RE = re.compile(
    r"\b(?:education|experience|skills|qualifications|work history|employment|references|personal details)\b"
)
_BULLET_RE = re.compile(r"^\s*(?:[•◦▪▫●○■□◆◇▶►·]\s*|[-–—*]\s+)\S", re.MULTILINE)
_CONTACT_RE = re.compile(
    r"\b(?:e-?mail|phone|tel|telephone|mobile|cell|address|linkedin)\b"
    r"|[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}"
)
_DATE_RANGE_RE = re.compile(
    rf"\b{_MONTH}(?:\s*{_YEAR})?{_RANGE_SEP}(?:{_MONTH}\s*)?{_RANGE_END}"
    rf"|\b{_YEAR}{_RANGE_SEP}(?:{_MONTH}\s*)?{_RANGE_END}"
)
_ANY_YEAR_RE = re.compile(rf"\b{_YEAR}\b")


def has_sections(text: str) -> bool:
    return bool(_SECTION_RE.search(text))


def has_bullet_points(text: str) -> bool:
    return bool(_BULLET_RE.search(text))


def has_contact_info(text: str) -> bool:
    return bool(_CONTACT_RE.search(text))


def has_date_ranges(text: str) -> bool:
    return bool(_DATE_RANGE_RE.search(text))


def has_any_year(text: str) -> bool:
    return bool(_ANY_YEAR_RE.search(text))


def score_format(flags: FeatureFlags, points: FormatPoints) -> int:
    score = (
        (points.sections if flags.has_sections else 0)
        + (points.bullet_points if flags.has_bullet_points else 0)
        + (points.contact_info if flags.has_contact_info else 0)
        + (points.date_ranges if flags.has_date_ranges else 0)
        + (points.any_year if flags.has_any_year else 0)
    )
    return max(0, min(100, score))
