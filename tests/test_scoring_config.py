import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumate.core.config import settings  # noqa: E402
from resumate.core.scoring import get_scoring_config, get_scoring_value, reset_scoring_config_cache  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("matching.weights.required_skills"), 0.35)
        self.assertEqual(get_scoring_value("consistency.severity_weights.high"), 10)

    def test_match_weights_sum_to_one(self):
        weights = get_scoring_value("matching.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0, places=9)

    def test_consistency_blend_sums_to_one(self):
        weights = get_scoring_value("consistency.dimension_weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0, places=9)

    def test_missing_path_returns_default(self):
        self.assertIsNone(get_scoring_value("matching.weights.salary"))
        self.assertEqual(get_scoring_value("nope.nothing", 7), 7)
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")


class ScoringConfigOverrideTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        reset_scoring_config_cache()
        self.addCleanup(reset_scoring_config_cache)

    def _use_path(self, path):
        patcher = patch("resumate.core.scoring.settings", replace(settings, scoring_config_path=str(path)))
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_override_path_replaces_bundled_config(self):
        path = Path(self.tmp.name) / "scoring.yaml"
        path.write_text("grading:\n  thresholds:\n    - [50, A]\n  fallback: F\n", encoding="utf-8")
        self._use_path(path)

        self.assertEqual(get_scoring_value("grading.thresholds"), [[50, "A"]])
        self.assertIsNone(get_scoring_value("matching.weights"))

    def test_cache_is_kept_until_reset(self):
        path = Path(self.tmp.name) / "scoring.yaml"
        path.write_text("report:\n  weights:\n    tone: 0.5\n", encoding="utf-8")
        self._use_path(path)
        self.assertEqual(get_scoring_value("report.weights.tone"), 0.5)

        path.write_text("report:\n  weights:\n    tone: 0.9\n", encoding="utf-8")
        self.assertEqual(get_scoring_value("report.weights.tone"), 0.5)

        reset_scoring_config_cache()
        self.assertEqual(get_scoring_value("report.weights.tone"), 0.9)

    def test_missing_or_invalid_file_raises(self):
        self._use_path(Path(self.tmp.name) / "absent.yaml")
        with self.assertRaises(RuntimeError):
            get_scoring_config()

        broken = Path(self.tmp.name) / "broken.yaml"
        broken.write_text("- just\n- a list\n", encoding="utf-8")
        reset_scoring_config_cache()
        with patch("resumate.core.scoring.settings", replace(settings, scoring_config_path=str(broken))):
            with self.assertRaises(RuntimeError):
                get_scoring_config()


if __name__ == "__main__":
    unittest.main()
