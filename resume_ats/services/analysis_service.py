from __future__ import annotations

import logging

from resume_ats.extract import extract_job_description, extract_resume
from resume_ats.profile import empty_profile, is_ready_for_scoring, merge_upload
from resume_ats.schemas import (
    AnalyzeResponse,
    JobDescription,
    PartialProfile,
    Profile,
    ScoreResponse,
)
from resume_ats.scoring import score_profile

logger = logging.getLogger(__name__)


def run_resume_extract(text: str) -> PartialProfile:
    partial = extract_resume(text)
    logger.info(
        "resume_extracted chars=%d experience=%d education=%d skills=%d",
        len(text),
        len(partial.experience or []),
        len(partial.education or []),
        len(partial.skills.technical if partial.skills else []),
    )
    return partial


def run_job_extract(text: str) -> JobDescription:
    job = extract_job_description(text)
    logger.info(
        "job_extracted chars=%d requirements=%d keywords=%d",
        len(text),
        len(job.requirements),
        len(job.keywords),
    )
    return job


def run_merge(profile: Profile, upload: PartialProfile) -> Profile:
    return merge_upload(profile, upload)


def run_score(profile: Profile, job: JobDescription) -> ScoreResponse:
    if not is_ready_for_scoring(profile, job):
        logger.info("ats_score_skipped reason=missing_name_or_job_text")
        return ScoreResponse(ready=False, score=None)

    score = score_profile(profile, job)
    logger.info(
        "ats_scored overall=%d keyword_match=%d format=%d missing=%d",
        score.overall,
        score.keyword_match,
        score.format_score,
        len(score.missing_keywords),
    )
    return ScoreResponse(ready=True, score=score)


def run_analyze(resume_text: str, job_description_text: str) -> AnalyzeResponse:
    profile = run_merge(empty_profile(), run_resume_extract(resume_text))
    job = run_job_extract(job_description_text)
    scored = run_score(profile, job)
    return AnalyzeResponse(profile=profile, job_description=job, ready=scored.ready, score=scored.score)
