from .state import empty_job_description, empty_profile, is_ready_for_scoring, merge_upload

__all__ = ["empty_profile", "empty_job_description", "merge_upload", "is_ready_for_scoring"]
