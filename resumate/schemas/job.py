from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import CamelModel


class JobRequirements(CamelModel):
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    required_experience: str | None = None

    @field_validator("required_skills", "preferred_skills", "keywords", "tools", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
