from fastapi import APIRouter, File, Request, UploadFile

from api import generators, jobs
from api.dependencies import limiter
from config import settings
from models.responses import ErrorResponse, HealthResponse, ResumeListResponse, ResumeResponse
from services import resume_service
from services.errors import InvalidUpload
from services.pdf_parser import PDF_MEDIA_TYPE
from services.store import get_resume_store

# Every JobHuntError is rendered by the handler in main.py with this body
ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (400, 404, 409, 429, 502, 503, 504)
}

router = APIRouter(prefix="/api", responses=ERROR_RESPONSES)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        message="JobHunt API is running",
        llm_configured=settings.llm_configured,
        provider_configured=settings.provider_configured,
        store=get_resume_store().backend,
    )


@router.post(
    "/resume/upload",
    response_model=ResumeResponse,
    response_model_exclude={"data": {"raw_text"}},
)
@limiter.limit(settings.llm_rate_limit)
async def upload_resume(request: Request, resume: UploadFile | None = File(None)):
    if resume is None:
        raise InvalidUpload("No file uploaded")

    # Validate media type
    if resume.content_type != PDF_MEDIA_TYPE:
        raise InvalidUpload("Only PDF files are allowed")

    # Read and validate size
    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise InvalidUpload(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    record = await resume_service.process_resume(content, resume.filename or "")
    return ResumeResponse(message="Resume uploaded and parsed successfully", data=record)


@router.get(
    "/resume/{resume_id}",
    response_model=ResumeResponse,
    response_model_exclude={"data": {"raw_text"}},
)
def get_resume(resume_id: str):
    return ResumeResponse(data=resume_service.get_resume(resume_id))


@router.get(
    "/resume",
    response_model=ResumeListResponse,
    response_model_exclude={"data": {"__all__": {"raw_text"}}},
)
def list_resumes():
    return ResumeListResponse(data=resume_service.list_resumes())


router.include_router(jobs.router)
router.include_router(generators.router)
