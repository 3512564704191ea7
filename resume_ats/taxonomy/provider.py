from __future__ import annotations

from typing import Protocol


class KeywordProvider(Protocol):
    def find_keywords(self, text: str) -> list[str]:
        """Return lowercase keywords found in text, deduplicated in order of discovery."""
