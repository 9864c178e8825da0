from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from .base import CamelModel


class SectionType(str, Enum):
    HEADER = "header"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    WORK_EXPERIENCE = "work-experience"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    PROJECTS = "projects"
    ACHIEVEMENTS = "achievements"
    LANGUAGES = "languages"
    VOLUNTEERING = "volunteering"
    PUBLICATIONS = "publications"
    AWARDS = "awards"
    REFERENCES = "references"
    DAY_IN_LIFE = "dayInLife"
    PHILOSOPHY = "philosophy"
    STRENGTHS = "strengths"
    PASSIONS = "passions"
    INTERESTS = "interests"
    CONFERENCES = "conferences"
    PATENTS = "patents"
    CUSTOM = "custom"


EXPERIENCE_SECTION_TYPES = frozenset({SectionType.EXPERIENCE, SectionType.WORK_EXPERIENCE})


class SectionContent(CamelModel):
    text: str | None = None
    items: list[dict[str, Any]] | None = None


class Section(CamelModel):
    type: SectionType = SectionType.CUSTOM
    title: str = ""
    content: SectionContent = Field(default_factory=SectionContent)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> SectionType:
        if isinstance(value, SectionType):
            return value
        try:
            return SectionType(str(value).strip())
        except ValueError:
            return SectionType.CUSTOM

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        return SectionContent() if value is None else value

    @property
    def is_experience(self) -> bool:
        return self.type in EXPERIENCE_SECTION_TYPES


class ResumeDocument(CamelModel):
    sections: list[Section] = Field(default_factory=list)

    def experience_items(self) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        for section in self.sections:
            if section.is_experience:
                items.extend(section.content.items or [])
        return items
