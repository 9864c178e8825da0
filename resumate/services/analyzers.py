from __future__ import annotations

from typing import Any, Protocol

from resumate.schemas.report import AnalyzerResult


class ToneAnalyzer(Protocol):
    async def analyze_tone(self, text: str, context: dict[str, Any] | None = None) -> AnalyzerResult:
        """Return tone scores for resume text; backed by an external service."""


class ProofreadAnalyzer(Protocol):
    async def proofread(self, text: str) -> AnalyzerResult:
        """Return spelling and grammar scores for resume text."""
