from .api import AnalyzeRequest, AnalyzeResponse, MergeRequest, ScoreRequest, ScoreResponse, TextRequest
from .job import JobDescription
from .profile import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    PartialProfile,
    PersonalInfo,
    Profile,
    ProjectEntry,
    Skills,
)
from .score import ATSScore

__all__ = [
    "PersonalInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "CertificationEntry",
    "Skills",
    "Profile",
    "PartialProfile",
    "JobDescription",
    "ATSScore",
    "TextRequest",
    "MergeRequest",
    "ScoreRequest",
    "ScoreResponse",
    "AnalyzeRequest",
    "AnalyzeResponse",
]
