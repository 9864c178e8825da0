from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field

from resumate.core.scoring import get_scoring_value
from resumate.features import letter_grade, round_score
from resumate.schemas.consistency import (
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
from resumate.services.errors import AnalysisInputError

logger = logging.getLogger(__name__)

# Declaration order is the tie-break when two formats or styles have the same count.
DATE_FORMATS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("MM/YYYY", re.compile(r"\b(0[1-9]|1[0-2])/\d{4}\b")),
    ("YYYY-MM", re.compile(r"\b\d{4}-(0[1-9]|1[0-2])\b")),
    (
        "Month YYYY",
        re.compile(
            r"\b(January|February|March|April|May|June|July|August|September|October|November|December)\s+\d{4}\b",
            re.IGNORECASE,
        ),
    ),
    ("Mon YYYY", re.compile(r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\.?\s+\d{4}\b", re.IGNORECASE)),
    ("MM/DD/YYYY", re.compile(r"\b(0[1-9]|1[0-2])/(0[1-9]|[12]\d|3[01])/\d{4}\b")),
)

BULLET_STYLES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("dash", re.compile(r"^[ \t]*-[ \t]+", re.MULTILINE)),
    ("asterisk", re.compile(r"^[ \t]*\*[ \t]+", re.MULTILINE)),
    ("bullet", re.compile(r"^[ \t]*•[ \t]+", re.MULTILINE)),
    ("number", re.compile(r"^[ \t]*\d+\.[ \t]+", re.MULTILINE)),
)

PAST_TENSE_RE = re.compile(
    r"\b(led|managed|developed|created|built|implemented|delivered|achieved|improved|reduced|increased|designed|executed|launched|established|coordinated)\b",
    re.IGNORECASE,
)
PRESENT_TENSE_RE = re.compile(
    r"\b(lead|manage|develop|create|build|implement|deliver|achieve|improve|reduce|increase|design|execute|launch|establish|coordinate|leads|manages|develops|creates|builds)\b",
    re.IGNORECASE,
)

_SECTION_HEADER_RE = re.compile(r"^[A-Z\s]{3,}$|^#{1,3}\s+[A-Z]")
_SECTION_HEADER_MAX_LEN = 50
_CURRENT_ROLE_MARKERS = ("present", "current", "ongoing", "now")

_PUNCTUATED_BULLET_RE = re.compile(r"^\s*[-•*]\s+")
_ENDS_WITH_PERIOD_RE = re.compile(r"[.!?]$")
_ENDS_WITHOUT_PERIOD_RE = re.compile(r"[^.!?]$")
_SPACING_RUN_RE = re.compile(r" {2,}")

_CAPS_HEADER_RE = re.compile(r"^[A-Z\s]{4,}$", re.MULTILINE)
_LEADING_WHITESPACE_RE = re.compile(r"^\s*")


@dataclass(slots=True)
class _Section:
    header: str
    body: str = ""
    is_current: bool = False


@dataclass(slots=True)
class _CheckOutcome:
    issues: list[ConsistencyIssue] = field(default_factory=list)
    dates: list[DatePattern] = field(default_factory=list)
    bullets: list[BulletPattern] = field(default_factory=list)
    punctuation: PunctuationPattern | None = None


def split_sections(text: str) -> list[_Section]:
    """Split text at header-looking lines; text before the first header is dropped."""
    sections: list[_Section] = []
    current: _Section | None = None
    for line in text.split("\n"):
        trimmed = line.strip()
        if _SECTION_HEADER_RE.search(trimmed) and len(trimmed) < _SECTION_HEADER_MAX_LEN:
            if current is not None:
                sections.append(current)
            lowered = trimmed.lower()
            current = _Section(
                header=trimmed,
                is_current=any(marker in lowered for marker in _CURRENT_ROLE_MARKERS),
            )
        elif current is not None:
            current.body += line + "\n"
    if current is not None:
        sections.append(current)
    return sections


def _by_count(patterns: list) -> list:
    # sorted() is stable, so equal counts keep declaration order.
    return sorted(patterns, key=lambda pattern: -pattern.count)


def _severity_weights() -> tuple[dict[str, float], float]:
    weights = get_scoring_value("consistency.severity_weights", {}) or {}
    default = float(get_scoring_value("consistency.default_severity_weight", 3))
    return {str(key): float(value) for key, value in weights.items()}, default


def _dimension_for(issue_type: str) -> str:
    if "tense" in issue_type:
        return "tense"
    if "date" in issue_type:
        return "dates"
    if "punctuation" in issue_type or "spacing" in issue_type:
        return "punctuation"
    return "formatting"


def calculate_scores(issues: list[ConsistencyIssue]) -> ConsistencyScores:
    """Deduct a severity weight per issue from its dimension, clamp, then blend."""
    weights, default_weight = _severity_weights()
    raw = {"tense": 100.0, "dates": 100.0, "formatting": 100.0, "punctuation": 100.0}
    for issue in issues:
        raw[_dimension_for(issue.type)] -= weights.get(issue.severity, default_weight)

    clamped = {name: max(0.0, min(100.0, value)) for name, value in raw.items()}
    blend = get_scoring_value("consistency.dimension_weights", {}) or {}
    overall = (
        clamped["tense"] * float(blend.get("tense", 0.35))
        + clamped["dates"] * float(blend.get("dates", 0.25))
        + clamped["formatting"] * float(blend.get("formatting", 0.25))
        + clamped["punctuation"] * float(blend.get("punctuation", 0.15))
    )
    return ConsistencyScores(
        tense=round_score(clamped["tense"]),
        dates=round_score(clamped["dates"]),
        formatting=round_score(clamped["formatting"]),
        punctuation=round_score(clamped["punctuation"]),
        overall=round_score(overall),
    )


class ConsistencyChecker:
    """Tense, date, bullet, punctuation and layout consistency checks for resume text.

    Holds no state beyond the module-level pattern tables, so one instance can be
    shared or a fresh one built per call.
    """

    def check(self, text: str | None) -> ConsistencyResult:
        if not text or not text.strip():
            raise AnalysisInputError("Content is required for consistency checking.")

        checks: tuple[tuple[str, Callable[[str], _CheckOutcome]], ...] = (
            ("tense", self.check_tense),
            ("dates", self.check_dates),
            ("bullets", self.check_bullets),
            ("punctuation", self.check_punctuation),
            ("formatting", self.check_formatting),
        )

        issues: list[ConsistencyIssue] = []
        patterns = ConsistencyPatterns()
        failed: list[str] = []
        for name, run in checks:
            try:
                outcome = run(text)
            except Exception as exc:
                logger.warning("consistency_check_failed check=%s: %s", name, exc)
                failed.append(name)
                continue
            issues.extend(outcome.issues)
            if name == "dates":
                patterns.dates = outcome.dates
            elif name == "bullets":
                patterns.bullets = outcome.bullets
            elif name == "punctuation":
                patterns.punctuation = outcome.punctuation

        scores = calculate_scores(issues)
        result = ConsistencyResult(
            issues=issues,
            scores=scores,
            patterns=patterns,
            recommendations=self.recommendations(issues, patterns),
            failed_checks=failed,
        )
        logger.info(
            "consistency_checked overall=%s issues=%s failed=%s",
            scores.overall,
            len(issues),
            failed,
        )
        return result

    def check_tense(self, text: str) -> _CheckOutcome:
        low = float(get_scoring_value("consistency.tense.mixed_ratio_min", 0.2))
        high = float(get_scoring_value("consistency.tense.mixed_ratio_max", 0.8))
        sample_chars = int(get_scoring_value("consistency.tense.sample_chars", 60))

        outcome = _CheckOutcome()
        for section in split_sections(text):
            past = PAST_TENSE_RE.findall(section.body)
            present = PRESENT_TENSE_RE.findall(section.body)
            if not past or not present:
                continue
            past_ratio = len(past) / (len(past) + len(present))
            if not low < past_ratio < high:
                continue
            outcome.issues.append(
                ConsistencyIssue(
                    type="tense_inconsistency",
                    severity="high",
                    location=section.header or "Section",
                    text=section.body[:sample_chars] + "...",
                    message=f"Mixed tenses detected ({len(past)} past, {len(present)} present)",
                    suggestion=(
                        "Use present tense for current positions"
                        if section.is_current
                        else "Use past tense for previous positions"
                    ),
                    past_verbs=past[:3],
                    present_verbs=present[:3],
                )
            )
        return outcome

    def check_dates(self, text: str) -> _CheckOutcome:
        found: list[DatePattern] = []
        for name, regex in DATE_FORMATS:
            matches = list(regex.finditer(text))
            if matches:
                found.append(DatePattern(format=name, count=len(matches), example=matches[0].group(0)))

        outcome = _CheckOutcome(dates=found)
        if len(found) <= 1:
            return outcome

        ranked = _by_count(found)
        outcome.dates = ranked
        primary = ranked[0]
        for other in ranked[1:]:
            outcome.issues.append(
                ConsistencyIssue(
                    type="date_format_inconsistency",
                    severity="medium",
                    location=f"Found {other.count} instances",
                    text=other.example,
                    message=(
                        f'Inconsistent date format: "{other.format}" ({other.count} times) differs from '
                        f'primary format "{primary.format}" ({primary.count} times)'
                    ),
                    suggestion=f"Use consistent date format throughout. Recommend: {primary.format}",
                    primary_format=primary.format,
                    inconsistent_format=other.format,
                )
            )
        return outcome

    def check_bullets(self, text: str) -> _CheckOutcome:
        found: list[BulletPattern] = []
        for name, regex in BULLET_STYLES:
            count = sum(1 for _ in regex.finditer(text))
            if count:
                found.append(BulletPattern(style=name, count=count))

        outcome = _CheckOutcome(bullets=found)
        if len(found) <= 1:
            return outcome

        ranked = _by_count(found)
        outcome.bullets = ranked
        primary = ranked[0]
        for other in ranked[1:]:
            outcome.issues.append(
                ConsistencyIssue(
                    type="bullet_style_inconsistency",
                    severity="low",
                    location=f"Found {other.count} instances",
                    text=f"{other.style} bullets",
                    message=(
                        f'Inconsistent bullet style: "{other.style}" ({other.count} times) differs from '
                        f'primary "{primary.style}" ({primary.count} times)'
                    ),
                    suggestion=f"Use consistent bullet style throughout. Recommend: {primary.style}",
                    primary_style=primary.style,
                    inconsistent_style=other.style,
                )
            )
        return outcome

    def check_punctuation(self, text: str) -> _CheckOutcome:
        threshold = float(get_scoring_value("consistency.punctuation.minority_threshold", 0.2))
        max_runs = int(get_scoring_value("consistency.punctuation.spacing_max_runs", 3))

        outcome = _CheckOutcome()
        lines = [line for line in text.split("\n") if line.strip()]
        bullet_lines = [line for line in lines if _PUNCTUATED_BULLET_RE.match(line)]

        if bullet_lines:
            with_period = 0
            without_period = 0
            for line in bullet_lines:
                trimmed = line.strip()
                if _ENDS_WITH_PERIOD_RE.search(trimmed):
                    with_period += 1
                elif _ENDS_WITHOUT_PERIOD_RE.search(trimmed):
                    without_period += 1

            pattern = "with-period" if with_period > without_period else "without-period"
            minority = without_period if with_period > without_period else with_period
            outcome.punctuation = PunctuationPattern(
                bullet_punctuation=pattern,
                with_period=with_period,
                without_period=without_period,
            )

            if minority > 0 and minority / len(bullet_lines) > threshold:
                outcome.issues.append(
                    ConsistencyIssue(
                        type="punctuation_inconsistency",
                        severity="low",
                        location=f"{minority} of {len(bullet_lines)} bullets",
                        text="Bullet punctuation",
                        message=(
                            f"Inconsistent bullet punctuation: {with_period} bullets end with periods, "
                            f"{without_period} do not"
                        ),
                        suggestion=(
                            "Add periods to all bullet points for consistency"
                            if pattern == "with-period"
                            else "Remove periods from all bullet points for consistency"
                        ),
                        pattern=pattern,
                    )
                )

        spacing_runs = len(_SPACING_RUN_RE.findall(text))
        if spacing_runs > max_runs:
            outcome.issues.append(
                ConsistencyIssue(
                    type="spacing_inconsistency",
                    severity="low",
                    location=f"{spacing_runs} locations",
                    text="Multiple spaces",
                    message=f"Found {spacing_runs} instances of multiple consecutive spaces",
                    suggestion="Replace multiple spaces with single spaces",
                )
            )
        return outcome

    def check_formatting(self, text: str) -> _CheckOutcome:
        max_indent_levels = int(get_scoring_value("consistency.formatting.max_indent_levels", 3))
        outcome = _CheckOutcome()

        headers = _CAPS_HEADER_RE.findall(text)
        if len(headers) > 1:
            all_caps = [header for header in headers if header == header.upper()]
            mixed_case = [header for header in headers if header != header.upper()]
            if all_caps and mixed_case:
                outcome.issues.append(
                    ConsistencyIssue(
                        type="header_capitalization_inconsistency",
                        severity="medium",
                        location=f"{len(headers)} headers",
                        text=", ".join(headers[:2]),
                        message="Inconsistent header capitalization (mix of ALL CAPS and Title Case)",
                        suggestion="Use consistent capitalization for all section headers",
                    )
                )

        indent_widths: set[int] = set()
        for line in text.split("\n"):
            if line.strip() and line.startswith(" "):
                indent_widths.add(len(_LEADING_WHITESPACE_RE.match(line).group(0)))

        if len(indent_widths) > max_indent_levels:
            outcome.issues.append(
                ConsistencyIssue(
                    type="indentation_inconsistency",
                    severity="low",
                    location="Throughout document",
                    text=f"{len(indent_widths)} different indent levels",
                    message=f"Found {len(indent_widths)} different indentation levels",
                    suggestion="Use consistent indentation (recommend 2 or 4 spaces)",
                )
            )
        return outcome

    @staticmethod
    def recommendations(
        issues: list[ConsistencyIssue],
        patterns: ConsistencyPatterns,
    ) -> list[ConsistencyRecommendation]:
        recommendations: list[ConsistencyRecommendation] = []

        if len(patterns.dates) > 1:
            primary = _by_count(patterns.dates)[0]
            recommendations.append(
                ConsistencyRecommendation(
                    type="date_format",
                    priority="medium",
                    message=f"Standardize all dates to {primary.format} format",
                    action="Convert all dates to consistent format",
                    example=primary.example,
                )
            )

        if len(patterns.bullets) > 1:
            primary_style = _by_count(patterns.bullets)[0]
            recommendations.append(
                ConsistencyRecommendation(
                    type="bullet_style",
                    priority="low",
                    message=f"Standardize all bullets to {primary_style.style} style",
                    action="Convert all bullets to consistent style",
                )
            )

        if patterns.punctuation is not None:
            recommendations.append(
                ConsistencyRecommendation(
                    type="punctuation",
                    priority="low",
                    message=(
                        "Add periods to all bullet points"
                        if patterns.punctuation.bullet_punctuation == "with-period"
                        else "Remove periods from all bullet points"
                    ),
                    action="Standardize bullet punctuation",
                )
            )

        if any(issue.type == "tense_inconsistency" for issue in issues):
            recommendations.append(
                ConsistencyRecommendation(
                    type="tense",
                    priority="high",
                    message="Use past tense for previous positions, present tense for current role",
                    action="Review and correct verb tenses in each section",
                )
            )

        return recommendations

    @staticmethod
    def summarize(result: ConsistencyResult) -> ConsistencySummary:
        return ConsistencySummary(
            total_issues=len(result.issues),
            scores=result.scores,
            issues_by_type=dict(Counter(issue.type for issue in result.issues)),
            recommendations=result.recommendations,
            patterns=result.patterns,
            grade=letter_grade(result.scores.overall),
        )


def check_consistency(text: str | None) -> ConsistencyResult:
    return ConsistencyChecker().check(text)
