from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ATSScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    keyword_match: int = Field(ge=0, le=100)
    format_score: int = Field(ge=0, le=100)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
