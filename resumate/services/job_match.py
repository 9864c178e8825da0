from __future__ import annotations

import logging
from datetime import datetime

from resumate.core.scoring import get_scoring_value
from resumate.features import experience_match, extract_resume_text, letter_grade, match_terms, round_score
from resumate.schemas.job import JobRequirements
from resumate.schemas.match import (
    MatchBreakdown,
    MatchedTerms,
    MatchGaps,
    MatchResult,
    Recommendation,
    TermMatch,
)
from resumate.schemas.resume import ResumeDocument
from resumate.services.errors import AnalysisInputError

logger = logging.getLogger(__name__)

_DEFAULT_WEIGHTS = {
    "required_skills": 0.35,
    "preferred_skills": 0.15,
    "keywords": 0.25,
    "tools": 0.15,
    "experience": 0.10,
}


def match_weights() -> dict[str, float]:
    configured = get_scoring_value("matching.weights", {}) or {}
    return {key: float(configured.get(key, default)) for key, default in _DEFAULT_WEIGHTS.items()}


def weighted_score(percentages: dict[str, float]) -> float:
    weights = match_weights()
    return sum(percentages[key] * weight for key, weight in weights.items())


def _preview(terms: list[str]) -> str:
    limit = int(get_scoring_value("matching.recommendations.description_limit", 5))
    return ", ".join(terms[:limit])


def build_recommendations(gaps: MatchGaps, score: float) -> list[Recommendation]:
    recommendations: list[Recommendation] = []

    if gaps.missing_required_skills:
        recommendations.append(
            Recommendation(
                priority="high",
                type="required_skills",
                title="Add Missing Required Skills",
                description=(
                    "The job requires these skills that are not clearly visible in your resume: "
                    f"{_preview(gaps.missing_required_skills)}"
                ),
                action="Add these skills to your Skills section or incorporate them into your experience descriptions",
                impact="high",
                skills=list(gaps.missing_required_skills),
            )
        )

    if gaps.missing_keywords:
        recommendations.append(
            Recommendation(
                priority="medium",
                type="keywords",
                title="Incorporate Missing Keywords",
                description=f"Important keywords from the job description: {_preview(gaps.missing_keywords)}",
                action="Naturally incorporate these keywords into your bullet points and descriptions",
                impact="medium",
                keywords=list(gaps.missing_keywords),
            )
        )

    if gaps.missing_tools:
        recommendations.append(
            Recommendation(
                priority="medium",
                type="tools",
                title="Add Relevant Tools and Technologies",
                description=f"The job mentions these tools: {_preview(gaps.missing_tools)}",
                action="Add a Tools/Technologies section or mention them in context of your work",
                impact="medium",
                tools=list(gaps.missing_tools),
            )
        )

    if gaps.missing_preferred_skills:
        recommendations.append(
            Recommendation(
                priority="low",
                type="preferred_skills",
                title="Highlight Preferred Skills",
                description=(
                    "Consider highlighting these preferred skills if you have them: "
                    f"{_preview(gaps.missing_preferred_skills)}"
                ),
                action="Add any matching preferred skills to stand out from other candidates",
                impact="low",
                skills=list(gaps.missing_preferred_skills),
            )
        )

    critical_below = float(get_scoring_value("matching.recommendations.critical_below", 50))
    high_below = float(get_scoring_value("matching.recommendations.high_below", 70))
    if score < critical_below:
        recommendations.insert(
            0,
            Recommendation(
                priority="critical",
                type="overall",
                title="Significant Resume Tailoring Needed",
                description=(
                    f"Your resume match is below {critical_below:g}%. "
                    "Consider whether this role aligns with your experience."
                ),
                action="Review the job requirements carefully and tailor your resume significantly",
                impact="critical",
            ),
        )
    elif score < high_below:
        recommendations.insert(
            0,
            Recommendation(
                priority="high",
                type="overall",
                title="Resume Needs Moderate Tailoring",
                description="Your resume shows some alignment but needs improvement to be competitive.",
                action="Focus on highlighting relevant skills and experiences",
                impact="high",
            ),
        )

    return recommendations


def _category_matches(resume_lower: str, job: JobRequirements) -> dict[str, TermMatch]:
    categories = {
        "required_skills": job.required_skills,
        "preferred_skills": job.preferred_skills,
        "keywords": job.keywords,
        "tools": job.tools,
    }
    # Independent units: no category reads another's result.
    return {name: match_terms(resume_lower, terms) for name, terms in categories.items()}


def score_job_match(
    resume: ResumeDocument | None,
    job: JobRequirements | None,
    *,
    now: datetime | None = None,
) -> MatchResult:
    """Score how well a resume covers a job's skills, keywords, tools and experience."""
    if resume is None:
        raise AnalysisInputError("Resume data is required for job matching.")
    if job is None:
        raise AnalysisInputError("Job requirements are required for job matching.")

    resume_lower = extract_resume_text(resume).lower()
    categories = _category_matches(resume_lower, job)
    experience = experience_match(resume, job.required_experience, now=now)

    percentages = {name: match.percentage for name, match in categories.items()}
    percentages["experience"] = experience.percentage
    overall = weighted_score(percentages)

    gaps = MatchGaps(
        missing_required_skills=categories["required_skills"].missing,
        missing_preferred_skills=categories["preferred_skills"].missing,
        missing_keywords=categories["keywords"].missing,
        missing_tools=categories["tools"].missing,
    )

    result = MatchResult(
        overall_score=round_score(overall),
        breakdown=MatchBreakdown(**{name: round_score(value) for name, value in percentages.items()}),
        matched=MatchedTerms(**{name: match.matched for name, match in categories.items()}),
        gaps=gaps,
        recommendations=build_recommendations(gaps, overall),
        grade=letter_grade(overall),
        experience=experience,
    )
    logger.info(
        "job_match_scored overall=%s grade=%s missing_required=%s",
        result.overall_score,
        result.grade,
        len(gaps.missing_required_skills),
    )
    return result
