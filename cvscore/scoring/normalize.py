from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class CVTextValidationError(ValueError):
    pass


@dataclass(frozen=True)
class NormalizedText:
    text: str
    lines: tuple[str, ...]


def validate_cv_text(value: Any) -> str:
    if value is None:
        raise CVTextValidationError("CV text is required")
    if not isinstance(value, str):
        raise CVTextValidationError("CV text must be a string")
    if not value.strip():
        raise CVTextValidationError("CV text is required")
    return value


def normalize_text(raw: str) -> NormalizedText:
    """Trim, lower-case and split into non-empty lines."""
    text = (raw or "").lstrip("\ufeff").strip().lower()
    lines = tuple(line.strip() for line in _LINE_BREAK_RE.split(text) if line.strip())
    return NormalizedText(text=text, lines=lines)
