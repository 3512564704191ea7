import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_ats.core.rate_limit import limiter  # noqa: E402
from resume_ats.main import app  # noqa: E402


class AnalysisApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.limiter_was_enabled = limiter.enabled
        limiter.enabled = False
        cls.client = TestClient(app)
        cls.resume_text = (
            "Jane Doe\n"
            "jane@example.com\n"
            "555-123-4567\n"
            "Summary\n"
            "Backend engineer focused on APIs.\n"
            "Experience\n"
            "Engineer | Acme Corp\n"
            "- Reduced latency by 30%\n"
            "Skills\n"
            "Python, Docker, SQL, AWS, Go\n"
        )
        cls.job_text = "Backend Engineer - Job\nCompany: Initech\nRequirements:\n- Python\n- Kubernetes\n"

    @classmethod
    def tearDownClass(cls):
        limiter.enabled = cls.limiter_was_enabled

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_resume_extract_contract(self):
        response = self.client.post("/v1/resume/extract", json={"text": self.resume_text})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["personal_info"]["full_name"], "Jane Doe")
        self.assertEqual(body["experience"][0]["company"], "Acme Corp")
        self.assertEqual(body["experience"][0]["achievements"], ["Reduced latency by 30%"])
        self.assertEqual(body["skills"]["technical"], ["Python", "Docker", "SQL", "AWS", "Go"])

    def test_job_extract_contract(self):
        response = self.client.post("/v1/job/extract", json={"text": self.job_text})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "Backend Engineer")
        self.assertEqual(body["company"], "Initech")
        self.assertEqual(body["requirements"], ["Python", "Kubernetes"])
        self.assertEqual(body["keywords"], ["python", "kubernetes"])
        self.assertEqual(body["description"], self.job_text)

    def test_merge_keeps_manual_linkedin(self):
        upload = self.client.post("/v1/resume/extract", json={"text": self.resume_text}).json()
        profile = {"personal_info": {"full_name": "Old", "linkedin": "https://linkedin.com/in/jane"}}
        response = self.client.post("/v1/profile/merge", json={"profile": profile, "upload": upload})
        self.assertEqual(response.status_code, 200)
        info = response.json()["personal_info"]
        self.assertEqual(info["full_name"], "Jane Doe")
        self.assertEqual(info["linkedin"], "https://linkedin.com/in/jane")

    def test_score_requires_candidate_name(self):
        job = self.client.post("/v1/job/extract", json={"text": self.job_text}).json()
        response = self.client.post("/v1/ats/score", json={"profile": {}, "job_description": job})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ready": False, "score": None})

    def test_analyze_end_to_end(self):
        response = self.client.post(
            "/v1/ats/analyze",
            json={"resume_text": self.resume_text, "job_description_text": self.job_text},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["ready"])
        score = body["score"]
        self.assertEqual(score["keyword_match"], 50)
        self.assertEqual(score["format_score"], 100)
        self.assertEqual(score["overall"], 75)
        self.assertEqual(score["missing_keywords"], ["kubernetes"])
        self.assertEqual(score["suggestions"], ["Add these missing keywords: kubernetes"])

    def test_repeated_calls_are_not_throttled_when_limiter_disabled(self):
        for _ in range(61):
            response = self.client.post("/v1/job/extract", json={"text": self.job_text})
            self.assertEqual(response.status_code, 200)

    def test_analyze_rejects_empty_text(self):
        response = self.client.post("/v1/ats/analyze", json={"resume_text": "", "job_description_text": "x"})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
