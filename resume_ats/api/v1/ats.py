from fastapi import APIRouter, Request

from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas import AnalyzeRequest, AnalyzeResponse, ScoreRequest, ScoreResponse
from resume_ats.services.analysis_service import run_analyze, run_score

router = APIRouter()


@router.post("/ats/score", response_model=ScoreResponse)
@rate_limit()
async def ats_score(request: Request, payload: ScoreRequest):
    _ = request
    return run_score(payload.profile, payload.job_description)


@router.post("/ats/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def ats_analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    return run_analyze(payload.resume_text, payload.job_description_text)
