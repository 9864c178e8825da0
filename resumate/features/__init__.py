from .grading import letter_grade, round_score
from .tenure import elapsed_years, experience_match, parse_date, required_years, total_tenure_years
from .term_matcher import match_terms, term_pattern
from .text_extractor import extract_resume_text

__all__ = [
    "extract_resume_text",
    "parse_date",
    "elapsed_years",
    "total_tenure_years",
    "required_years",
    "experience_match",
    "match_terms",
    "term_pattern",
    "letter_grade",
    "round_score",
]
