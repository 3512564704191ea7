import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.taxonomy import get_default_keyword_provider  # noqa: E402
from resume_ats.taxonomy.local_taxonomy import LocalKeywordTaxonomy  # noqa: E402


class KeywordTaxonomyTests(unittest.TestCase):
    def test_default_taxonomy_categories(self):
        taxonomy = LocalKeywordTaxonomy()
        self.assertEqual(
            taxonomy.category_names,
            ["languages", "frameworks", "databases", "cloud", "tools", "methodologies"],
        )
        self.assertIn("problem solving", taxonomy.soft_skills)

    def test_default_provider_is_cached(self):
        self.assertIs(get_default_keyword_provider(), get_default_keyword_provider())

    def test_categories_run_before_experience_and_soft_skills(self):
        taxonomy = LocalKeywordTaxonomy()
        found = taxonomy.find_keywords("Teamwork matters. 3 years exp in Scrum and Java")
        self.assertEqual(found, ["java", "scrum", "3 years exp", "teamwork"])

    def test_custom_taxonomy_file(self):
        payload = {
            "categories": {"data": "\\b(spark|airflow)\\b"},
            "soft_skills": ["mentoring"],
        }
        tmp_file = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False, encoding="utf-8")
        tmp_path = Path(tmp_file.name)
        try:
            json.dump(payload, tmp_file)
            tmp_file.close()

            taxonomy = LocalKeywordTaxonomy(tmp_path)
            self.assertEqual(taxonomy.find_keywords("Airflow, Spark and Mentoring; Python"), ["airflow", "spark", "mentoring"])
        finally:
            if tmp_path.exists():
                tmp_path.unlink()


if __name__ == "__main__":
    unittest.main()
