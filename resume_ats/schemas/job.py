from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    company: str = ""
    description: str = ""
    requirements: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
