from __future__ import annotations

from typing import Any

from resume_ats.schemas import JobDescription, PartialProfile, PersonalInfo, Profile, Skills

# Sub-records merged field by field; every other top-level field is replaced whole.
_KEYWISE_FIELDS = {"personal_info": PersonalInfo, "skills": Skills}


def empty_profile() -> Profile:
    return Profile()


def empty_job_description() -> JobDescription:
    return JobDescription()


def merge_upload(profile: Profile, upload: PartialProfile) -> Profile:
    """Apply an extracted resume on top of the current profile.

    Fields absent from ``upload`` keep their current value. ``personal_info``
    and ``skills`` merge key by key using only the non-null keys the upload
    set, so a LinkedIn URL typed by hand survives an upload that found none.
    """
    merged: dict[str, Any] = profile.model_dump()
    for name in PartialProfile.model_fields:
        value = getattr(upload, name)
        if value is None:
            continue
        if name in _KEYWISE_FIELDS:
            updates = value.model_dump(include=value.model_fields_set, exclude_none=True)
            merged[name] = {**merged[name], **updates}
        elif isinstance(value, list):
            merged[name] = [item.model_dump() for item in value]
        else:
            merged[name] = value
    return Profile.model_validate(merged)


def is_ready_for_scoring(profile: Profile, job: JobDescription) -> bool:
    return bool(job.description.strip()) and bool(profile.personal_info.full_name)
