import sys
import unittest
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumate.features import (  # noqa: E402
    elapsed_years,
    experience_match,
    parse_date,
    required_years,
    total_tenure_years,
)
from resumate.schemas import ResumeDocument  # noqa: E402


def _resume_with_jobs(*jobs, section_type="experience"):
    return ResumeDocument.model_validate(
        {
            "sections": [
                {
                    "type": section_type,
                    "title": "Experience",
                    "content": {"items": [{"startDate": start, "endDate": end} for start, end in jobs]},
                }
            ]
        }
    )


class ElapsedYearsTests(unittest.TestCase):
    def test_iso_dates(self):
        self.assertAlmostEqual(elapsed_years("2020-01-01", "2022-01-01"), 2.0, places=2)

    def test_month_name_dates(self):
        self.assertAlmostEqual(elapsed_years("January 2020", "January 2021"), 1.0, places=2)

    def test_year_only_date_starts_in_january(self):
        self.assertEqual(parse_date("2019"), datetime(2019, 1, 1))
        self.assertAlmostEqual(elapsed_years("2019", "present", now=datetime(2026, 10, 18)), 7.8, places=1)

    def test_never_negative(self):
        self.assertEqual(elapsed_years("2022-01-01", "2020-01-01"), 0.0)

    def test_missing_or_unparsable_start_is_zero(self):
        self.assertEqual(elapsed_years(None, "2020-01-01"), 0.0)
        self.assertEqual(elapsed_years("", "2020-01-01"), 0.0)
        self.assertEqual(elapsed_years("zzzz", "2020-01-01"), 0.0)

    def test_present_resolves_to_now(self):
        now = datetime(2023, 1, 1)
        self.assertAlmostEqual(elapsed_years("2020-01-01", "Present", now=now), 3.0, places=2)
        self.assertAlmostEqual(elapsed_years("2020-01-01", "PRESENT", now=now), 3.0, places=2)
        self.assertAlmostEqual(elapsed_years("2020-01-01", None, now=now), 3.0, places=2)

    def test_present_without_explicit_now(self):
        expected = (datetime.now() - datetime(2020, 1, 1)).total_seconds() / (365.25 * 24 * 3600)
        self.assertAlmostEqual(elapsed_years("2020-01-01", "present"), expected, places=3)


class RequiredYearsTests(unittest.TestCase):
    def test_first_number_before_years(self):
        self.assertEqual(required_years("5+ years of Python, 2 years of Go"), 5)
        self.assertEqual(required_years("Minimum 3-yrs experience"), 3)
        self.assertEqual(required_years("1 year in a similar role"), 1)

    def test_no_numeric_requirement(self):
        self.assertIsNone(required_years("Senior level"))
        self.assertIsNone(required_years(None))
        self.assertIsNone(required_years("0 years"))


class ExperienceMatchTests(unittest.TestCase):
    NOW = datetime(2024, 1, 1)

    def test_overlapping_jobs_are_summed(self):
        resume = _resume_with_jobs(("2018-01-01", "2020-01-01"), ("2019-01-01", "2021-01-01"))
        self.assertAlmostEqual(total_tenure_years(resume, now=self.NOW), 4.0, places=3)

        result = experience_match(resume, "5 years of backend work", now=self.NOW)
        self.assertAlmostEqual(result.percentage, 80.0, places=1)
        self.assertEqual(result.required_years, 5)

    def test_capped_at_one_hundred(self):
        resume = _resume_with_jobs(("2010-01-01", "Present"))
        result = experience_match(resume, "3 years", now=self.NOW)
        self.assertEqual(result.percentage, 100.0)

    def test_work_experience_sections_count(self):
        resume = _resume_with_jobs(("2020-01-01", "2022-01-01"), section_type="work-experience")
        self.assertAlmostEqual(total_tenure_years(resume, now=self.NOW), 2.0, places=2)

    def test_other_sections_are_ignored(self):
        resume = _resume_with_jobs(("2010-01-01", "2014-01-01"), section_type="education")
        self.assertEqual(total_tenure_years(resume, now=self.NOW), 0.0)

    def test_no_requirement_is_full_score(self):
        resume = _resume_with_jobs()
        self.assertEqual(experience_match(resume, None).percentage, 100.0)
        self.assertEqual(experience_match(resume, "").percentage, 100.0)
        self.assertEqual(experience_match(resume, "Senior engineer").percentage, 100.0)

    def test_bad_date_does_not_abort(self):
        resume = _resume_with_jobs(("not-a-real-date-zz", "2020-01-01"), ("2020-01-01", "2022-01-01"))
        result = experience_match(resume, "4 years", now=self.NOW)
        self.assertAlmostEqual(result.percentage, 50.0, places=0)


if __name__ == "__main__":
    unittest.main()
