from __future__ import annotations

import logging
import re
from typing import Any

from resume_ats.schemas import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    PartialProfile,
    PersonalInfo,
    ProjectEntry,
    Skills,
)
from resume_ats.segment import (
    contains_any,
    find_section_lines,
    is_bullet_like,
    split_lines,
    strip_bullet_prefix,
)

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[A-Za-z\s]+$")
_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_SKILL_SPLIT_RE = re.compile(r"[,|•\-]")

_NAME_EXCLUDES = ("resume", "cv")
_SUMMARY_HEADERS = ("summary", "objective", "profile", "about")
_EDUCATION_HEADERS = ("education", "academic", "qualification")
_EXPERIENCE_HEADERS = ("experience", "employment", "work history", "professional")
_PROJECT_HEADERS = ("projects", "portfolio")
_SKILL_HEADERS = ("skills", "technical skills", "competencies")
_CERTIFICATION_HEADERS = ("certifications", "certificates", "credentials")
_ADDITIONAL_HEADERS = ("additional", "other", "awards", "achievements", "volunteer")

_INSTITUTION_MARKERS = ("University", "College", "Institute")
_DEGREE_MARKERS = ("Bachelor", "Master", "PhD")

_MIN_EXPERIENCE_HEADING = 10
_MIN_PROJECT_HEADING = 6
_MIN_CERTIFICATION_LENGTH = 6


def _first_match(lines: list[str], pattern: re.Pattern[str]) -> str:
    for line in lines:
        match = pattern.search(line)
        if match:
            return match.group(0)
    return ""


def _extract_name(lines: list[str]) -> str:
    for line in lines:
        if contains_any(line, _NAME_EXCLUDES):
            continue
        if 4 <= len(line) <= 49 and _NAME_RE.match(line):
            return line
    return ""


def _extract_personal_info(lines: list[str]) -> PersonalInfo:
    fields: dict[str, Any] = {
        "full_name": _extract_name(lines),
        "email": _first_match(lines, _EMAIL_RE),
        "phone": _first_match(lines, _PHONE_RE),
        "location": "",
    }
    # Only set when present so merging keeps a value typed in by hand.
    linkedin = next((line for line in lines if "linkedin" in line.lower()), None)
    if linkedin is not None:
        fields["linkedin"] = linkedin
    return PersonalInfo(**fields)


def _extract_summary(lines: list[str]) -> str:
    body = find_section_lines(lines, _SUMMARY_HEADERS)
    if body is None:
        return ""
    return " ".join(body).strip()


def _extract_education(lines: list[str]) -> list[EducationEntry]:
    body = find_section_lines(lines, _EDUCATION_HEADERS)
    entries: list[EducationEntry] = []
    if body is None:
        return entries

    current: dict[str, str] = {}

    def flush() -> None:
        nonlocal current
        # A degree seen before any institution stays with the next institution.
        if current.get("institution"):
            entries.append(EducationEntry(id=f"edu{len(entries) + 1}", **current))
            current = {}

    for line in body:
        if any(marker in line for marker in _INSTITUTION_MARKERS):
            flush()
            current["institution"] = line
        elif any(marker in line for marker in _DEGREE_MARKERS):
            current["degree"] = line

    flush()
    return entries


def _group_bulleted(body: list[str], min_heading: int) -> list[tuple[str, list[str]]]:
    """Group section lines into (heading, bullets) pairs.

    A non-bullet line of at least ``min_heading`` characters opens a group;
    bullet lines append to the open group. Bullets seen before any heading
    attach to the first heading.
    """
    groups: list[tuple[str, list[str]]] = []
    heading = ""
    bullets: list[str] = []

    for line in body:
        if is_bullet_like(line):
            bullets.append(strip_bullet_prefix(line))
        elif len(line) >= min_heading:
            if heading:
                groups.append((heading, bullets))
                bullets = []
            heading = line

    if heading:
        groups.append((heading, bullets))
    return groups


def _extract_experience(lines: list[str]) -> list[ExperienceEntry]:
    body = find_section_lines(lines, _EXPERIENCE_HEADERS)
    entries: list[ExperienceEntry] = []
    if body is None:
        return entries

    current: dict[str, Any] = {"achievements": []}

    def flush() -> None:
        nonlocal current
        # A heading without a company keeps collecting until one names it.
        if current.get("company"):
            entries.append(ExperienceEntry(id=f"exp{len(entries) + 1}", **current))
            current = {"achievements": []}

    for line in body:
        if is_bullet_like(line):
            current["achievements"].append(strip_bullet_prefix(line))
        elif len(line) >= _MIN_EXPERIENCE_HEADING:
            flush()
            parts = [part.strip() for part in line.split("|")]
            if len(parts) >= 2:
                current["position"], current["company"] = parts[0], parts[1]
            else:
                current["company"] = line

    flush()
    return entries


def _extract_projects(lines: list[str]) -> list[ProjectEntry]:
    body = find_section_lines(lines, _PROJECT_HEADERS)
    if body is None:
        return []
    return [
        ProjectEntry(id=f"proj{index}", name=name, achievements=achievements)
        for index, (name, achievements) in enumerate(_group_bulleted(body, _MIN_PROJECT_HEADING), start=1)
    ]


def _extract_skills(lines: list[str]) -> Skills:
    body = find_section_lines(lines, _SKILL_HEADERS)
    if body is None:
        return Skills(technical=[], soft=[])

    technical: list[str] = []
    for line in body:
        technical.extend(token.strip() for token in _SKILL_SPLIT_RE.split(line) if token.strip())
    # Soft skills are never inferred from uploaded text; they are entered by hand.
    return Skills(technical=technical, soft=[])


def _extract_certifications(lines: list[str]) -> list[CertificationEntry]:
    body = find_section_lines(lines, _CERTIFICATION_HEADERS)
    if body is None:
        return []
    names = [line for line in body if len(line) >= _MIN_CERTIFICATION_LENGTH]
    return [CertificationEntry(id=f"cert{index}", name=name) for index, name in enumerate(names, start=1)]


def _extract_additional_info(lines: list[str]) -> str:
    body = find_section_lines(lines, _ADDITIONAL_HEADERS)
    if body is None:
        return ""
    return " ".join(body).strip()


def extract_resume(raw_text: str) -> PartialProfile:
    """Build a profile fragment from plain resume text.

    Every sub-extractor runs independently over the same trimmed line list and
    falls back to its empty value when its section is missing.
    """
    lines = split_lines(raw_text)
    profile = PartialProfile(
        personal_info=_extract_personal_info(lines),
        summary=_extract_summary(lines),
        education=_extract_education(lines),
        experience=_extract_experience(lines),
        projects=_extract_projects(lines),
        skills=_extract_skills(lines),
        certifications=_extract_certifications(lines),
        additional_info=_extract_additional_info(lines),
    )
    logger.debug(
        "resume_extract lines=%d education=%d experience=%d projects=%d skills=%d",
        len(lines),
        len(profile.education or []),
        len(profile.experience or []),
        len(profile.projects or []),
        len(profile.skills.technical if profile.skills else []),
    )
    return profile
