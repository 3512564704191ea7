from __future__ import annotations

import json
import re
from pathlib import Path

from .provider import KeywordProvider


class LocalKeywordTaxonomy(KeywordProvider):
    """Keyword taxonomy backed by a JSON file of regex alternations.

    Matching runs over the whole text: the technology categories first in file
    order, then years-of-experience phrases, then degree words, then the
    soft-skill vocabulary by plain substring.
    """

    def __init__(self, keywords_path: str | Path | None = None) -> None:
        path = Path(keywords_path) if keywords_path else Path(__file__).with_name("keywords.json")
        raw = self._load(path)
        self._categories: dict[str, re.Pattern[str]] = {
            str(name): re.compile(pattern, re.IGNORECASE)
            for name, pattern in raw.get("categories", {}).items()
        }
        self._extra_patterns: list[re.Pattern[str]] = [
            re.compile(raw[key], re.IGNORECASE)
            for key in ("experience_years", "degrees")
            if raw.get(key)
        ]
        self._soft_skills: tuple[str, ...] = tuple(
            str(skill).strip().lower() for skill in raw.get("soft_skills", []) if str(skill).strip()
        )

    @staticmethod
    def _load(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid keyword taxonomy '{path}': expected a top-level mapping.")
        return raw

    @property
    def category_names(self) -> list[str]:
        return list(self._categories)

    @property
    def soft_skills(self) -> tuple[str, ...]:
        return self._soft_skills

    def find_keywords(self, text: str) -> list[str]:
        found: dict[str, None] = {}
        patterns = [*self._categories.values(), *self._extra_patterns]
        for pattern in patterns:
            for match in pattern.finditer(text):
                found.setdefault(match.group(0).lower(), None)

        lowered = text.lower()
        for skill in self._soft_skills:
            if skill in lowered:
                found.setdefault(skill, None)
        return list(found)
