from __future__ import annotations

import logging
import re

from resume_ats.schemas import JobDescription
from resume_ats.segment import contains_any, split_lines, strip_bullet_prefix
from resume_ats.segment.text import JOB_BULLETS, is_bullet_like
from resume_ats.taxonomy import KeywordProvider, get_default_keyword_provider

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Software Developer"
DEFAULT_COMPANY = "Tech Company"

_TITLE_PATTERNS = (
    re.compile(r"^(.*?)\s*-\s*job", re.IGNORECASE),
    re.compile(r"^job title:\s*(.*)", re.IGNORECASE),
    re.compile(r"^position:\s*(.*)", re.IGNORECASE),
    re.compile(r"^role:\s*(.*)", re.IGNORECASE),
)
_COMPANY_PATTERNS = (
    re.compile(r"company:\s*(.*)", re.IGNORECASE),
    re.compile(r"employer:\s*(.*)", re.IGNORECASE),
    re.compile(r"organization:\s*(.*)", re.IGNORECASE),
)
_TITLE_SCAN_LINES = 5
_COMPANY_SCAN_LINES = 10

_REQUIREMENT_MARKERS = (
    "requirements",
    "qualifications",
    "skills",
    "experience",
    "must have",
    "required",
    "essential",
    "responsibilities",
)
_SECTION_EXIT_MARKERS = ("benefits", "salary", "about us", "company culture")


def _first_capture(lines: list[str], patterns: tuple[re.Pattern[str], ...]) -> str | None:
    for line in lines:
        for pattern in patterns:
            match = pattern.search(line)
            if match:
                return match.group(1).strip()
    return None


def extract_title(lines: list[str]) -> str:
    head = lines[:_TITLE_SCAN_LINES]
    title = _first_capture(head, _TITLE_PATTERNS)
    if title is not None:
        return title
    for line in head:
        if 6 <= len(line) <= 99:
            return line
    return DEFAULT_TITLE


def extract_company(lines: list[str]) -> str:
    company = _first_capture(lines[:_COMPANY_SCAN_LINES], _COMPANY_PATTERNS)
    return company if company is not None else DEFAULT_COMPANY


def extract_requirements(lines: list[str]) -> list[str]:
    requirements: list[str] = []
    in_requirements_section = False

    for line in lines:
        # Header lines toggle the state and are never requirements themselves.
        if contains_any(line, _REQUIREMENT_MARKERS):
            in_requirements_section = True
            continue
        if not in_requirements_section:
            continue
        if contains_any(line, _SECTION_EXIT_MARKERS):
            in_requirements_section = False
            continue

        if is_bullet_like(line, JOB_BULLETS):
            item = strip_bullet_prefix(line)
            if item:
                requirements.append(item)
        elif 11 <= len(line) <= 199:
            requirements.append(line)

    return requirements


def extract_job_description(raw_text: str, *, keywords: KeywordProvider | None = None) -> JobDescription:
    """Structure a pasted job posting; unknown title/company fall back to placeholders."""
    provider = keywords or get_default_keyword_provider()
    text = raw_text or ""
    lines = split_lines(text)
    job = JobDescription(
        title=extract_title(lines),
        company=extract_company(lines),
        description=text,
        requirements=extract_requirements(lines),
        keywords=provider.find_keywords(text),
    )
    logger.debug(
        "job_extract lines=%d requirements=%d keywords=%d",
        len(lines),
        len(job.requirements),
        len(job.keywords),
    )
    return job
