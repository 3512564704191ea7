from fastapi import APIRouter, Request

from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas import JobDescription, MergeRequest, PartialProfile, Profile, TextRequest
from resume_ats.services.analysis_service import run_job_extract, run_merge, run_resume_extract

router = APIRouter()


@router.post("/resume/extract", response_model=PartialProfile)
@rate_limit()
async def resume_extract(request: Request, payload: TextRequest):
    _ = request
    return run_resume_extract(payload.text)


@router.post("/job/extract", response_model=JobDescription)
@rate_limit()
async def job_extract(request: Request, payload: TextRequest):
    _ = request
    return run_job_extract(payload.text)


@router.post("/profile/merge", response_model=Profile)
@rate_limit()
async def profile_merge(request: Request, payload: MergeRequest):
    _ = request
    return run_merge(payload.profile, payload.upload)
