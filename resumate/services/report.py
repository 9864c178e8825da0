from __future__ import annotations

import logging
from typing import Any

from resumate.core.scoring import get_scoring_value
from resumate.features import letter_grade, round_score
from resumate.schemas.consistency import ConsistencyResult
from resumate.schemas.job import JobRequirements
from resumate.schemas.match import MatchResult
from resumate.schemas.report import AnalyzerResult, PolishReport
from resumate.schemas.resume import ResumeDocument
from resumate.services.analyzers import ProofreadAnalyzer, ToneAnalyzer
from resumate.services.consistency import ConsistencyChecker
from resumate.services.errors import AnalysisInputError
from resumate.services.job_match import score_job_match

logger = logging.getLogger(__name__)

_DEFAULT_REPORT_WEIGHTS = {
    "proofread": 0.4,
    "tone": 0.3,
    "consistency": 0.3,
    "match": 0.0,
}


def report_weights() -> dict[str, float]:
    configured = get_scoring_value("report.weights", {}) or {}
    return {key: float(configured.get(key, default)) for key, default in _DEFAULT_REPORT_WEIGHTS.items()}


def aggregate_report(
    *,
    match_result: MatchResult | None = None,
    consistency_result: ConsistencyResult | None = None,
    tone_result: AnalyzerResult | None = None,
    proofread_result: AnalyzerResult | None = None,
) -> PolishReport:
    """Blend whichever sub-results are present into one polish score.

    Missing sub-results drop their weight without renormalizing, so the score reflects
    only the analyses that actually ran.
    """
    weights = report_weights()
    present: dict[str, float] = {}
    if proofread_result is not None:
        present["proofread"] = proofread_result.scores.overall
    if tone_result is not None:
        present["tone"] = tone_result.scores.overall
    if consistency_result is not None:
        present["consistency"] = consistency_result.scores.overall
    if match_result is not None:
        present["match"] = match_result.overall_score

    total = sum(score * weights[name] for name, score in present.items())
    polish_score = max(0, min(100, round_score(total)))
    return PolishReport(
        polish_score=polish_score,
        grade=letter_grade(polish_score),
        components=list(present),
        match=match_result,
        consistency=consistency_result,
        tone=tone_result,
        proofread=proofread_result,
    )


class ReportAggregator:
    """Runs the core analyses plus any injected external analyzers, then aggregates."""

    def __init__(
        self,
        *,
        tone_analyzer: ToneAnalyzer | None = None,
        proofread_analyzer: ProofreadAnalyzer | None = None,
        consistency_checker: ConsistencyChecker | None = None,
    ) -> None:
        self._tone_analyzer = tone_analyzer
        self._proofread_analyzer = proofread_analyzer
        self._consistency_checker = consistency_checker or ConsistencyChecker()

    def aggregate(
        self,
        *,
        match_result: MatchResult | None = None,
        consistency_result: ConsistencyResult | None = None,
        tone_result: AnalyzerResult | None = None,
        proofread_result: AnalyzerResult | None = None,
    ) -> PolishReport:
        return aggregate_report(
            match_result=match_result,
            consistency_result=consistency_result,
            tone_result=tone_result,
            proofread_result=proofread_result,
        )

    async def analyze(
        self,
        text: str,
        *,
        resume: ResumeDocument | None = None,
        job: JobRequirements | None = None,
        context: dict[str, Any] | None = None,
        tone_result: AnalyzerResult | None = None,
        proofread_result: AnalyzerResult | None = None,
    ) -> PolishReport:
        if not text or not text.strip():
            raise AnalysisInputError("Content is required for the polish report.")

        if proofread_result is None and self._proofread_analyzer is not None:
            proofread_result = await self._safe_external("proofread", self._proofread_analyzer.proofread(text))
        if tone_result is None and self._tone_analyzer is not None:
            tone_result = await self._safe_external("tone", self._tone_analyzer.analyze_tone(text, context or {}))

        consistency_result = self._consistency_checker.check(text)
        match_result = score_job_match(resume, job) if resume is not None and job is not None else None

        report = self.aggregate(
            match_result=match_result,
            consistency_result=consistency_result,
            tone_result=tone_result,
            proofread_result=proofread_result,
        )
        logger.info("polish_report_built score=%s components=%s", report.polish_score, report.components)
        return report

    @staticmethod
    async def _safe_external(name: str, pending: Any) -> AnalyzerResult | None:
        try:
            return await pending
        except Exception as exc:
            logger.warning("external_analyzer_failed analyzer=%s: %s", name, exc)
            return None
