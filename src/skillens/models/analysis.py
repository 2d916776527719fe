"""Pydantic models for the analysis request/response boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AnalysisResult(BaseModel):
    score: int = Field(ge=0, le=100)
    suggestions: tuple[str, ...] = ()  # unique, in the order the rules fired

    model_config = {"frozen": True}

    @field_validator("suggestions")
    @classmethod
    def reject_duplicates(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("suggestions must be unique")
        return v


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(default="", alias="resumeText")

    model_config = {"populate_by_name": True}

    @field_validator("resume_text", mode="before")
    @classmethod
    def none_as_empty(cls, v: object) -> object:
        return "" if v is None else v
