from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from resume_ats.segment.text import dedupe


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PersonalInfo(_Frozen):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    portfolio: str | None = None
    github: str | None = None


class EducationEntry(_Frozen):
    id: str
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: date | None = None
    end_date: date | None = None
    gpa: str = ""
    location: str = ""
    achievements: str = ""


class ExperienceEntry(_Frozen):
    id: str
    company: str = ""
    position: str = ""
    start_date: date | None = None
    current: bool = False
    end_date: date | None = None
    location: str = ""
    description: str = ""
    achievements: list[str] = Field(default_factory=list)

    @field_validator("end_date")
    @classmethod
    def _drop_end_date_when_current(cls, value: date | None, info: ValidationInfo) -> date | None:
        # An ongoing role has no end date; `current` is validated first.
        if info.data.get("current"):
            return None
        return value


class ProjectEntry(_Frozen):
    id: str
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    start_date: date | None = None
    end_date: date | None = None
    url: str = ""
    github: str = ""
    achievements: list[str] = Field(default_factory=list)

    @field_validator("technologies")
    @classmethod
    def _dedupe_technologies(cls, value: list[str]) -> list[str]:
        return dedupe(value)


class CertificationEntry(_Frozen):
    id: str
    name: str = ""
    organization: str = ""
    issue_date: date | None = None
    expiration_date: date | None = None
    credential_id: str | None = None
    credential_url: str | None = None


class Skills(_Frozen):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)

    @field_validator("technical", "soft")
    @classmethod
    def _dedupe_skills(cls, value: list[str]) -> list[str]:
        return dedupe(value)


class Profile(_Frozen):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    skills: Skills = Field(default_factory=Skills)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    additional_info: str = ""


class PartialProfile(_Frozen):
    """Profile fragment produced by resume extraction; ``None`` marks an absent field."""

    personal_info: PersonalInfo | None = None
    summary: str | None = None
    education: list[EducationEntry] | None = None
    experience: list[ExperienceEntry] | None = None
    projects: list[ProjectEntry] | None = None
    skills: Skills | None = None
    certifications: list[CertificationEntry] | None = None
    additional_info: str | None = None
