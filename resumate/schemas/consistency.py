from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import CamelModel
from .match import Grade

BulletPunctuation = Literal["with-period", "without-period"]


class ConsistencyIssue(CamelModel):
    type: str
    severity: str
    location: str
    text: str
    message: str
    suggestion: str
    source: str = "builtin"
    past_verbs: list[str] | None = None
    present_verbs: list[str] | None = None
    primary_format: str | None = None
    inconsistent_format: str | None = None
    primary_style: str | None = None
    inconsistent_style: str | None = None
    pattern: BulletPunctuation | None = None


class ConsistencyScores(CamelModel):
    tense: int = Field(default=100, ge=0, le=100)
    dates: int = Field(default=100, ge=0, le=100)
    formatting: int = Field(default=100, ge=0, le=100)
    punctuation: int = Field(default=100, ge=0, le=100)
    overall: int = Field(default=100, ge=0, le=100)


class DatePattern(CamelModel):
    format: str
    count: int = Field(ge=1)
    example: str


class BulletPattern(CamelModel):
    style: str
    count: int = Field(ge=1)


class PunctuationPattern(CamelModel):
    bullet_punctuation: BulletPunctuation
    with_period: int = Field(ge=0)
    without_period: int = Field(ge=0)


class ConsistencyPatterns(CamelModel):
    dates: list[DatePattern] = Field(default_factory=list)
    bullets: list[BulletPattern] = Field(default_factory=list)
    punctuation: PunctuationPattern | None = None


class ConsistencyRecommendation(CamelModel):
    type: str
    priority: Literal["high", "medium", "low"]
    message: str
    action: str
    example: str | None = None


class ConsistencyResult(CamelModel):
    issues: list[ConsistencyIssue] = Field(default_factory=list)
    scores: ConsistencyScores = Field(default_factory=ConsistencyScores)
    patterns: ConsistencyPatterns = Field(default_factory=ConsistencyPatterns)
    recommendations: list[ConsistencyRecommendation] = Field(default_factory=list)
    failed_checks: list[str] = Field(default_factory=list)


class ConsistencySummary(CamelModel):
    total_issues: int = Field(ge=0)
    scores: ConsistencyScores
    issues_by_type: dict[str, int] = Field(default_factory=dict)
    recommendations: list[ConsistencyRecommendation] = Field(default_factory=list)
    patterns: ConsistencyPatterns
    grade: Grade
