from __future__ import annotations

from pydantic import BaseModel, Field

from resume_ats.core.config import settings

from .job import JobDescription
from .profile import PartialProfile, Profile
from .score import ATSScore


class TextRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_text_chars)


class MergeRequest(BaseModel):
    profile: Profile = Field(default_factory=Profile)
    upload: PartialProfile


class ScoreRequest(BaseModel):
    profile: Profile
    job_description: JobDescription


class ScoreResponse(BaseModel):
    ready: bool
    score: ATSScore | None = None


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=settings.max_text_chars)
    job_description_text: str = Field(min_length=1, max_length=settings.max_text_chars)


class AnalyzeResponse(BaseModel):
    profile: Profile
    job_description: JobDescription
    ready: bool
    score: ATSScore | None = None
