from __future__ import annotations

from typing import Any

from pydantic import Field

from resumate.core.config import settings

from .base import CamelModel
from .consistency import ConsistencyResult
from .job import JobRequirements
from .match import Grade, MatchResult
from .resume import ResumeDocument


class AnalyzerScores(CamelModel):
    overall: int = Field(ge=0, le=100)


class AnalyzerResult(CamelModel):
    """Result handed over by an external tone or proofreading analyzer."""

    scores: AnalyzerScores
    issues: list[dict[str, Any]] = Field(default_factory=list)
    recommendations: list[dict[str, Any]] = Field(default_factory=list)


class PolishReport(CamelModel):
    polish_score: int = Field(ge=0, le=100)
    grade: Grade
    components: list[str] = Field(default_factory=list)
    match: MatchResult | None = None
    consistency: ConsistencyResult | None = None
    tone: AnalyzerResult | None = None
    proofread: AnalyzerResult | None = None


class JobMatchRequest(CamelModel):
    resume: ResumeDocument
    job: JobRequirements


class ConsistencyRequest(CamelModel):
    text: str = Field(default="", max_length=settings.max_content_chars)


class ReportRequest(CamelModel):
    text: str = Field(default="", max_length=settings.max_content_chars)
    resume: ResumeDocument | None = None
    job: JobRequirements | None = None
    tone_result: AnalyzerResult | None = None
    proofread_result: AnalyzerResult | None = None
