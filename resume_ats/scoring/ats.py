from __future__ import annotations

import math
import re

from pydantic import BaseModel, Field

from resume_ats.core.scoring import format_penalty, get_scoring_value
from resume_ats.schemas import ATSScore, JobDescription, Profile

_DIGIT_RE = re.compile(r"\d")


class KeywordMatch(BaseModel):
    score: int = Field(ge=0, le=100)
    missing: list[str] = Field(default_factory=list)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def profile_text(profile: Profile) -> str:
    """Flatten the searchable parts of a profile into one space-joined string."""
    parts: list[str] = [profile.summary]
    for exp in profile.experience:
        parts.extend([exp.company, exp.position, exp.description, *exp.achievements])
    for project in profile.projects:
        parts.extend([project.name, project.description, *project.technologies, *project.achievements])
    parts.extend(profile.skills.technical)
    parts.extend(profile.skills.soft)
    for cert in profile.certifications:
        parts.extend([cert.name, cert.organization])
    parts.append(profile.additional_info)
    return " ".join(part for part in parts if part)


def keyword_match(profile: Profile, job: JobDescription) -> KeywordMatch:
    haystack = profile_text(profile).lower()
    required = [keyword.lower() for keyword in job.keywords]
    if not required:
        return KeywordMatch(score=int(get_scoring_value("keywords.empty_job_score", 100)), missing=[])

    missing = [keyword for keyword in required if keyword not in haystack]
    matched = len(required) - len(missing)
    return KeywordMatch(score=_clamp(round_half_up(100 * matched / len(required))), missing=missing)


def format_score(profile: Profile) -> int:
    score = int(get_scoring_value("format.base", 100))
    info = profile.personal_info

    if not info.full_name:
        score -= format_penalty("missing_full_name", 10)
    if not info.email:
        score -= format_penalty("missing_email", 10)
    if not info.phone:
        score -= format_penalty("missing_phone", 5)
    if not profile.summary:
        score -= format_penalty("missing_summary", 10)
    if not profile.experience:
        score -= format_penalty("no_experience", 15)
    if not profile.skills.technical:
        score -= format_penalty("no_technical_skills", 10)

    for exp in profile.experience:
        if not exp.company or not exp.position:
            score -= format_penalty("experience_missing_company_or_position", 5)
        if not exp.achievements:
            score -= format_penalty("experience_without_achievements", 3)

    return _clamp(score)


def build_suggestions(profile: Profile, missing_keywords: list[str]) -> list[str]:
    suggestions: list[str] = []
    preview = int(get_scoring_value("keywords.suggestion_preview", 5))
    min_skills = int(get_scoring_value("suggestions.min_technical_skills", 5))

    if missing_keywords:
        suggestions.append(f"Add these missing keywords: {', '.join(missing_keywords[:preview])}")
    if not profile.summary:
        suggestions.append("Add a professional summary section")
    if not profile.experience:
        suggestions.append("Add work experience with quantified achievements")
    if len(profile.skills.technical) < min_skills:
        suggestions.append("Include more relevant technical skills")

    quantified = any(
        _DIGIT_RE.search(achievement)
        for exp in profile.experience
        for achievement in exp.achievements
    )
    if not quantified:
        suggestions.append("Add quantified achievements (numbers, percentages, metrics)")
    return suggestions


def score_profile(profile: Profile, job: JobDescription) -> ATSScore:
    """Score a profile against a job description.

    ``overall`` is the half-up rounded mean of the keyword and format scores.
    The function reads only its arguments and the cached scoring config.
    """
    keywords = keyword_match(profile, job)
    fmt = format_score(profile)
    return ATSScore(
        overall=round_half_up((keywords.score + fmt) / 2),
        keyword_match=keywords.score,
        format_score=fmt,
        missing_keywords=keywords.missing,
        suggestions=build_suggestions(profile, keywords.missing),
    )
