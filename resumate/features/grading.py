from __future__ import annotations

import math

from resumate.core.scoring import get_scoring_value

_DEFAULT_THRESHOLDS: tuple[tuple[float, str], ...] = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def round_score(value: float) -> int:
    """Round half up, so 62.5 presents as 63."""
    return int(math.floor(value + 0.5))


def _thresholds() -> list[tuple[float, str]]:
    raw = get_scoring_value("grading.thresholds", None)
    if not raw:
        return list(_DEFAULT_THRESHOLDS)
    return [(float(minimum), str(letter)) for minimum, letter in raw]


def letter_grade(score: float) -> str:
    """Step function shared by the match scorer, consistency checker and polish report."""
    for minimum, letter in _thresholds():
        if score >= minimum:
            return letter
    return str(get_scoring_value("grading.fallback", "F"))
