from __future__ import annotations

import re
from collections.abc import Sequence

from resumate.schemas.match import TermMatch


def term_pattern(term: str) -> re.Pattern[str]:
    # Lookarounds act as \b for word-character edges and still match terms such as
    # "C++" or ".NET" whose edges are symbols.
    return re.compile(rf"(?<!\w){re.escape(term.strip().lower())}(?!\w)", re.IGNORECASE)


def match_terms(haystack_lower: str, terms: Sequence[str] | None) -> TermMatch:
    """Literal, case-insensitive, word-boundary presence test for each term.

    No terms means nothing can be missing, so the match is 100%.
    """
    if not terms:
        return TermMatch(percentage=100.0, matched=[], missing=[], total=0)

    matched: list[str] = []
    missing: list[str] = []
    for term in terms:
        if term.strip() and term_pattern(term).search(haystack_lower):
            matched.append(term)
        else:
            missing.append(term)

    return TermMatch(
        percentage=len(matched) / len(terms) * 100,
        matched=matched,
        missing=missing,
        total=len(terms),
    )
