"""Line segmentation shared by the resume and job description extractors.

A section header is a short line containing one of the known section words.
The length cap keeps prose that merely mentions "experience" from closing a
section.
"""

from __future__ import annotations

from .text import contains_any

SECTION_KEYWORDS = (
    "education",
    "experience",
    "skills",
    "projects",
    "certifications",
    "summary",
    "objective",
    "employment",
    "work history",
    "portfolio",
)
MAX_HEADER_LENGTH = 30


def split_lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def is_new_section(line: str) -> bool:
    return len(line) < MAX_HEADER_LENGTH and contains_any(line, SECTION_KEYWORDS)


def find_section(lines: list[str], keywords: tuple[str, ...]) -> int | None:
    for index, line in enumerate(lines):
        if contains_any(line, keywords):
            return index
    return None


def section_lines(lines: list[str], start: int) -> list[str]:
    collected: list[str] = []
    for line in lines[start + 1 :]:
        if is_new_section(line):
            break
        collected.append(line)
    return collected


def find_section_lines(lines: list[str], keywords: tuple[str, ...]) -> list[str] | None:
    """Return the body of the first section whose header matches, or None if absent."""
    start = find_section(lines, keywords)
    if start is None:
        return None
    return section_lines(lines, start)
