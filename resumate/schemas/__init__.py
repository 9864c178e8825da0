from .base import CamelModel
from .consistency import (
    BulletPattern,
    ConsistencyIssue,
    ConsistencyPatterns,
    ConsistencyRecommendation,
    ConsistencyResult,
    ConsistencyScores,
    ConsistencySummary,
    DatePattern,
    PunctuationPattern,
)
from .job import JobRequirements
from .match import (
    ExperienceMatch,
    MatchBreakdown,
    MatchedTerms,
    MatchGaps,
    MatchResult,
    Recommendation,
    TermMatch,
)
from .report import (
    AnalyzerResult,
    AnalyzerScores,
    ConsistencyRequest,
    JobMatchRequest,
    PolishReport,
    ReportRequest,
)
from .resume import EXPERIENCE_SECTION_TYPES, ResumeDocument, Section, SectionContent, SectionType

__all__ = [
    "CamelModel",
    "SectionType",
    "EXPERIENCE_SECTION_TYPES",
    "SectionContent",
    "Section",
    "ResumeDocument",
    "JobRequirements",
    "TermMatch",
    "ExperienceMatch",
    "MatchBreakdown",
    "MatchedTerms",
    "MatchGaps",
    "Recommendation",
    "MatchResult",
    "ConsistencyIssue",
    "ConsistencyScores",
    "DatePattern",
    "BulletPattern",
    "PunctuationPattern",
    "ConsistencyPatterns",
    "ConsistencyRecommendation",
    "ConsistencyResult",
    "ConsistencySummary",
    "AnalyzerScores",
    "AnalyzerResult",
    "PolishReport",
    "JobMatchRequest",
    "ConsistencyRequest",
    "ReportRequest",
]
