import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import JobMatchRequest, KeywordMatchRequest, SemanticMatchRequest
from models.responses import JobMatchResponse, KeywordMatchResponse, SemanticMatchResult
from services import pdf_parser
from services.job_matcher import match_job
from services.keyword_matcher import compute_keyword_score
from services.semantic_matcher import compute_semantic_match

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/match/keywords", response_model=KeywordMatchResponse)
@limiter.limit(settings.rate_limit)
def match_keywords(request: Request, body: KeywordMatchRequest):
    return KeywordMatchResponse(
        score=compute_keyword_score(body.resume_skills, body.job_skills)
    )


@router.post("/match/semantic", response_model=SemanticMatchResult)
@limiter.limit(settings.rate_limit)
def match_semantic(request: Request, body: SemanticMatchRequest):
    return compute_semantic_match(body.resume_text, body.job_description)


@router.post("/match", response_model=JobMatchResponse)
@limiter.limit(settings.rate_limit)
def match(request: Request, body: JobMatchRequest):
    return match_job(body.resume, body.job)


@router.post("/match/upload", response_model=SemanticMatchResult)
@limiter.limit(settings.rate_limit)
async def match_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception as e:
        logger.warning("PDF extraction failed for %s: %s", resume_file.filename, e)
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    if len(resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too long (max {settings.max_resume_chars} chars)",
        )

    return compute_semantic_match(resume_text, job_description)
