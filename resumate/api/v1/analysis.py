from fastapi import APIRouter, HTTPException, Request

from resumate.core.rate_limit import rate_limit
from resumate.schemas.consistency import ConsistencyResult, ConsistencySummary
from resumate.schemas.match import MatchResult
from resumate.schemas.report import ConsistencyRequest, JobMatchRequest, PolishReport, ReportRequest
from resumate.services.consistency import ConsistencyChecker
from resumate.services.errors import AnalysisInputError
from resumate.services.job_match import score_job_match
from resumate.services.report import ReportAggregator

router = APIRouter()


def _raise_input_error(exc: AnalysisInputError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analysis/job-match", response_model=MatchResult)
@rate_limit()
async def analysis_job_match(request: Request, payload: JobMatchRequest):
    _ = request
    try:
        return score_job_match(payload.resume, payload.job)
    except AnalysisInputError as exc:
        _raise_input_error(exc)


@router.post("/analysis/consistency", response_model=ConsistencyResult)
@rate_limit()
async def analysis_consistency(request: Request, payload: ConsistencyRequest):
    _ = request
    try:
        return ConsistencyChecker().check(payload.text)
    except AnalysisInputError as exc:
        _raise_input_error(exc)


@router.post("/analysis/consistency/summary", response_model=ConsistencySummary)
@rate_limit()
async def analysis_consistency_summary(request: Request, payload: ConsistencyRequest):
    _ = request
    checker = ConsistencyChecker()
    try:
        return checker.summarize(checker.check(payload.text))
    except AnalysisInputError as exc:
        _raise_input_error(exc)


@router.post("/analysis/report", response_model=PolishReport)
@rate_limit()
async def analysis_report(request: Request, payload: ReportRequest):
    _ = request
    try:
        return await ReportAggregator().analyze(
            payload.text,
            resume=payload.resume,
            job=payload.job,
            tone_result=payload.tone_result,
            proofread_result=payload.proofread_result,
        )
    except AnalysisInputError as exc:
        _raise_input_error(exc)
