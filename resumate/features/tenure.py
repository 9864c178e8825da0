from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any

import dateparser

from resumate.schemas.match import ExperienceMatch
from resumate.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25
_SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60
_REQUIRED_YEARS_RE = re.compile(r"(\d+)[\s-]*(?:years?|yrs?)", re.IGNORECASE)
_DATEPARSER_SETTINGS = {
    "PREFER_DAY_OF_MONTH": "first",
    "PREFER_MONTH_OF_YEAR": "first",
    "RETURN_AS_TIMEZONE_AWARE": False,
}


def _is_open_end(value: Any) -> bool:
    if value is None:
        return True
    text = str(value).strip()
    return not text or text.lower() == "present"


def parse_date(value: Any) -> datetime | None:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = dateparser.parse(text, settings=_DATEPARSER_SETTINGS)
    except (ValueError, TypeError, OverflowError) as exc:
        logger.debug("date_parse_failed value=%r: %s", text, exc)
        return None
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None)


def elapsed_years(start: Any, end: Any = None, *, now: datetime | None = None) -> float:
    """Years between two date strings; ``end`` of None or "present" means now.

    Never negative, and a missing or unparsable bound yields 0.0 instead of raising.
    """
    start_date = parse_date(start)
    if start_date is None:
        return 0.0

    if _is_open_end(end):
        end_date = now or datetime.now()
    else:
        end_date = parse_date(end)
        if end_date is None:
            return 0.0

    years = (end_date - start_date).total_seconds() / _SECONDS_PER_YEAR
    return max(0.0, years)


def total_tenure_years(resume: ResumeDocument, *, now: datetime | None = None) -> float:
    # Overlapping positions are summed, not merged.
    total = 0.0
    for item in resume.experience_items():
        total += elapsed_years(item.get("startDate"), item.get("endDate"), now=now)
    return total


def required_years(requirement: str | None) -> int | None:
    if not requirement:
        return None
    match = _REQUIRED_YEARS_RE.search(requirement)
    if match is None:
        return None
    years = int(match.group(1))
    return years if years > 0 else None


def experience_match(
    resume: ResumeDocument,
    required_experience: str | None,
    *,
    now: datetime | None = None,
) -> ExperienceMatch:
    if not required_experience:
        return ExperienceMatch(percentage=100.0, details="No specific requirement")

    total = total_tenure_years(resume, now=now)
    needed = required_years(required_experience)
    if needed is None:
        return ExperienceMatch(
            percentage=100.0,
            total_years=total,
            required_years=0,
            details=f"{total:.1f} years found, no numeric requirement",
        )

    percentage = min(total / needed * 100, 100.0)
    return ExperienceMatch(
        percentage=percentage,
        total_years=total,
        required_years=needed,
        details=f"{total:.1f} years found, {needed} required",
    )
