from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from .provider import (
    OPTIONAL_CATEGORIES,
    REQUIRED_CATEGORIES,
    REQUIRED_LABELS,
    REQUIRED_PATTERNS,
    TaxonomyProvider,
)


class LocalTaxonomy(TaxonomyProvider):
    """Keyword taxonomy loaded from a JSON file (bundled ``taxonomy.json`` by default)."""

    def __init__(self, taxonomy_path: str | Path | None = None) -> None:
        path = Path(taxonomy_path) if taxonomy_path else Path(__file__).with_name("taxonomy.json")
        raw = self._load_raw(path)
        self.path = path
        self.version = str(raw.get("version") or "unversioned")
        self.market = str(raw.get("market") or "unknown")
        self._categories = self._parse_categories(raw.get("categories"), path)
        self._patterns = self._compile_patterns(raw.get("patterns"), path)
        self._labels = self._parse_labels(raw.get("labels"), path)

    @staticmethod
    def _load_raw(path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except OSError as exc:
            raise RuntimeError(f"Failed to read taxonomy '{path}': {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"Invalid JSON in taxonomy '{path}': {exc}") from exc
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid taxonomy '{path}': expected a top-level object.")
        return raw

    @staticmethod
    def _parse_categories(raw: Any, path: Path) -> dict[str, tuple[str, ...]]:
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid taxonomy '{path}': 'categories' must be an object.")

        categories: dict[str, tuple[str, ...]] = {}
        for name, values in raw.items():
            if not isinstance(values, list):
                raise RuntimeError(f"Invalid taxonomy '{path}': category '{name}' must be a list.")
            seen: dict[str, None] = {}
            for value in values:
                term = str(value).strip().lower()
                if term:
                    seen.setdefault(term, None)
            categories[str(name)] = tuple(seen)

        missing = [name for name in REQUIRED_CATEGORIES if name not in categories]
        if missing:
            raise RuntimeError(f"Invalid taxonomy '{path}': missing categories {missing}.")
        for name in OPTIONAL_CATEGORIES:
            categories.setdefault(name, ())
        return categories

    @staticmethod
    def _compile_patterns(raw: Any, path: Path) -> dict[str, re.Pattern[str]]:
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid taxonomy '{path}': 'patterns' must be an object.")

        patterns: dict[str, re.Pattern[str]] = {}
        for name, source in raw.items():
            try:
                patterns[str(name)] = re.compile(str(source), re.IGNORECASE)
            except re.error as exc:
                raise RuntimeError(f"Invalid taxonomy '{path}': pattern '{name}' does not compile: {exc}") from exc

        missing = [name for name in REQUIRED_PATTERNS if name not in patterns]
        if missing:
            raise RuntimeError(f"Invalid taxonomy '{path}': missing patterns {missing}.")
        return patterns

    @staticmethod
    def _parse_labels(raw: Any, path: Path) -> dict[str, str]:
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid taxonomy '{path}': 'labels' must be an object.")
        labels = {str(name): str(value).strip() for name, value in raw.items() if str(value).strip()}
        missing = [name for name in REQUIRED_LABELS if name not in labels]
        if missing:
            raise RuntimeError(f"Invalid taxonomy '{path}': missing labels {missing}.")
        return labels

    def terms(self, category: str) -> tuple[str, ...]:
        try:
            return self._categories[category]
        except KeyError:
            raise KeyError(f"Unknown taxonomy category '{category}'") from None

    def pattern(self, name: str) -> re.Pattern[str]:
        try:
            return self._patterns[name]
        except KeyError:
            raise KeyError(f"Unknown taxonomy pattern '{name}'") from None

    def label(self, name: str) -> str:
        try:
            return self._labels[name]
        except KeyError:
            raise KeyError(f"Unknown taxonomy label '{name}'") from None
