import unittest
import sys
import tempfile
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core import scoring  # noqa: E402
from resume_ats.core.scoring import format_penalty, get_scoring_config, get_scoring_value  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("format.penalties.missing_email"), 10)
        self.assertEqual(get_scoring_value("format.penalties.no_experience"), 15)
        self.assertEqual(get_scoring_value("suggestions.min_technical_skills"), 5)

    def test_missing_paths_return_default(self):
        self.assertIsNone(get_scoring_value("format.penalties.unknown"))
        self.assertEqual(get_scoring_value("format.base.deeper", 7), 7)
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")

    def test_format_penalty_reads_penalty_table(self):
        self.assertEqual(format_penalty("missing_phone"), 5)
        self.assertEqual(format_penalty("experience_without_achievements"), 3)
        self.assertEqual(format_penalty("unknown_gap", 4), 4)

    def test_unreadable_config_raises_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            broken = Path(tmp) / "scoring.yaml"
            broken.write_text("- just\n- a list\n", encoding="utf-8")
            missing = Path(tmp) / "absent.yaml"
            for path in (broken, missing):
                with self.subTest(path=path.name):
                    get_scoring_config.cache_clear()
                    try:
                        with mock.patch.object(scoring, "SCORING_CONFIG_PATH", path):
                            with self.assertRaises(RuntimeError):
                                get_scoring_config()
                    finally:
                        get_scoring_config.cache_clear()
        self.assertEqual(format_penalty("missing_email"), 10)


if __name__ == "__main__":
    unittest.main()
