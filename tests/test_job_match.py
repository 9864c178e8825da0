import sys
import unittest
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumate.schemas import JobRequirements, MatchGaps, ResumeDocument  # noqa: E402
from resumate.services.errors import AnalysisInputError  # noqa: E402
from resumate.services.job_match import build_recommendations, match_weights, score_job_match  # noqa: E402


def _text_resume(text):
    return ResumeDocument.model_validate({"sections": [{"type": "summary", "title": "", "content": {"text": text}}]})


class JobMatchScoringTests(unittest.TestCase):
    def test_missing_required_skill_scenario(self):
        resume = _text_resume("Led engineering team. - Built system.\n- Deployed service\n")
        job = JobRequirements.model_validate(
            {"requiredSkills": ["Python"], "preferredSkills": [], "keywords": [], "tools": [], "requiredExperience": None}
        )

        result = score_job_match(resume, job)

        self.assertEqual(result.breakdown.required_skills, 0)
        self.assertEqual(result.breakdown.preferred_skills, 100)
        self.assertEqual(result.breakdown.experience, 100)
        self.assertEqual(result.overall_score, 65)
        self.assertEqual(result.grade, "D")
        self.assertEqual(result.gaps.missing_required_skills, ["Python"])
        self.assertEqual([rec.type for rec in result.recommendations], ["overall", "required_skills"])
        self.assertEqual(result.recommendations[0].priority, "high")

    def test_partial_match_is_weighted(self):
        resume = ResumeDocument.model_validate(
            {
                "sections": [
                    {
                        "type": "skills",
                        "title": "Skills",
                        "content": {"items": [{"name": "Core", "skills": ["Python", "Docker", "AWS"]}]},
                    }
                ]
            }
        )
        job = JobRequirements.model_validate(
            {
                "requiredSkills": ["Python", "Go"],
                "preferredSkills": ["AWS"],
                "tools": ["Docker", "Kubernetes"],
            }
        )

        result = score_job_match(resume, job)

        self.assertEqual(result.breakdown.required_skills, 50)
        self.assertEqual(result.breakdown.tools, 50)
        self.assertEqual(result.overall_score, 75)
        self.assertEqual(result.grade, "C")
        self.assertEqual(result.matched.required_skills, ["Python"])
        self.assertEqual(result.matched.preferred_skills, ["AWS"])
        self.assertEqual([rec.type for rec in result.recommendations], ["required_skills", "tools"])

        weights = match_weights()
        recomputed = sum(getattr(result.breakdown, name) * weight for name, weight in weights.items())
        self.assertLessEqual(abs(recomputed - result.overall_score), 1)

    def test_experience_requirement_feeds_breakdown(self):
        resume = ResumeDocument.model_validate(
            {
                "sections": [
                    {
                        "type": "experience",
                        "title": "Experience",
                        "content": {"items": [{"company": "Acme", "startDate": "2020-01-01", "endDate": "2022-01-01"}]},
                    }
                ]
            }
        )
        job = JobRequirements.model_validate({"requiredExperience": "4+ years building services"})

        result = score_job_match(resume, job, now=datetime(2024, 1, 1))

        self.assertEqual(result.breakdown.experience, 50)
        self.assertEqual(result.experience.required_years, 4)
        self.assertEqual(result.overall_score, 95)
        self.assertEqual(result.grade, "A")
        self.assertEqual(result.recommendations, [])

    def test_missing_inputs_raise(self):
        job = JobRequirements()
        with self.assertRaises(AnalysisInputError):
            score_job_match(None, job)
        with self.assertRaises(AnalysisInputError):
            score_job_match(_text_resume("text"), None)


class RecommendationTests(unittest.TestCase):
    def test_order_and_truncation(self):
        gaps = MatchGaps(
            missing_required_skills=["A", "B", "C", "D", "E", "F", "G"],
            missing_preferred_skills=["Rust"],
            missing_keywords=["agile"],
            missing_tools=["Terraform"],
        )

        recommendations = build_recommendations(gaps, 40.0)

        self.assertEqual(
            [rec.type for rec in recommendations],
            ["overall", "required_skills", "keywords", "tools", "preferred_skills"],
        )
        self.assertEqual(recommendations[0].priority, "critical")
        required = recommendations[1]
        self.assertTrue(required.description.endswith("A, B, C, D, E"))
        self.assertNotIn("F", required.description.split(":")[-1])
        self.assertEqual(required.skills, ["A", "B", "C", "D", "E", "F", "G"])
        self.assertEqual([rec.priority for rec in recommendations[1:]], ["high", "medium", "medium", "low"])

    def test_overall_thresholds(self):
        empty = MatchGaps()
        self.assertEqual(build_recommendations(empty, 70.0), [])
        self.assertEqual(build_recommendations(empty, 69.9)[0].priority, "high")
        self.assertEqual(build_recommendations(empty, 49.9)[0].priority, "critical")


if __name__ == "__main__":
    unittest.main()
