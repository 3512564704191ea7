from .sections import (
    SECTION_KEYWORDS,
    find_section,
    find_section_lines,
    is_new_section,
    section_lines,
    split_lines,
)
from .text import contains_any, dedupe, is_bullet_like, strip_bullet_prefix

__all__ = [
    "SECTION_KEYWORDS",
    "split_lines",
    "is_new_section",
    "find_section",
    "section_lines",
    "find_section_lines",
    "contains_any",
    "dedupe",
    "is_bullet_like",
    "strip_bullet_prefix",
]
