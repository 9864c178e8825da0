from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CamelModel

Priority = Literal["critical", "high", "medium", "low"]
Grade = Literal["A", "B", "C", "D", "F"]


class TermMatch(CamelModel):
    percentage: float = Field(ge=0.0, le=100.0)
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)


class ExperienceMatch(CamelModel):
    percentage: float = Field(ge=0.0, le=100.0)
    total_years: float = 0.0
    required_years: int = 0
    details: str = ""


class MatchBreakdown(CamelModel):
    required_skills: int = Field(ge=0, le=100)
    preferred_skills: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    tools: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)


class MatchedTerms(CamelModel):
    required_skills: list[str] = Field(default_factory=list)
    preferred_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)


class MatchGaps(CamelModel):
    missing_required_skills: list[str] = Field(default_factory=list)
    missing_preferred_skills: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    missing_tools: list[str] = Field(default_factory=list)


class Recommendation(CamelModel):
    priority: Priority
    type: str
    title: str | None = None
    description: str
    action: str
    impact: str
    skills: list[str] | None = None
    keywords: list[str] | None = None
    tools: list[str] | None = None


class MatchResult(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    breakdown: MatchBreakdown
    matched: MatchedTerms
    gaps: MatchGaps
    recommendations: list[Recommendation] = Field(default_factory=list)
    grade: Grade
    experience: ExperienceMatch | None = None
