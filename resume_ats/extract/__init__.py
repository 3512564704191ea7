from .job import extract_job_description
from .resume import extract_resume

__all__ = ["extract_resume", "extract_job_description"]
