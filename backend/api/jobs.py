from fastapi import APIRouter, Depends, Query

from api.dependencies import get_listings_client
from config import settings
from models.requests import SaveJobRequest, StatusUpdateRequest
from models.responses import (
    ApplicationListResponse,
    ApplicationResponse,
    MessageResponse,
    SearchResponse,
)
from models.schemas.application import ApplicationStatus
from models.schemas.search import JobListing, SearchFilters
from services import job_search, resume_service, search_planner, tracker
from services.errors import InvalidRequest
from services.jsearch_client import JSearchClient

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/search", response_model=SearchResponse)
async def search_jobs(
    resume_id: str | None = Query(None, alias="resumeId"),
    skills: str | None = Query(None, description="Comma-separated skills"),
    raw_text: str = Query("", alias="rawText", max_length=10000),
    location: str = "",
    remote: bool = False,
    page: int = Query(1, ge=1),
    query: str | None = Query(None, description="Manual search query"),
    experience: str | None = Query(None, description="Experience level filter"),
    job_type: str | None = Query(None, alias="jobType"),
    date_posted: str = Query("month", alias="datePosted"),
    client: JSearchClient = Depends(get_listings_client),
):
    search_skills: list[str] = []
    experience_keywords: list[str] = []

    if resume_id:
        record = resume_service.get_resume(resume_id)
        search_skills = list(record.skills)
        experience_keywords = record.ai_analysis.experience_keywords()
        raw_text = record.raw_text

    if not search_skills and skills:
        search_skills = [s.strip() for s in skills.split(",") if s.strip()]

    if not search_skills and not (query and query.strip()):
        raise InvalidRequest("No skills or search query provided")

    location = location.strip()
    plan = await search_planner.plan_search(
        skills=search_skills,
        experience=experience_keywords,
        raw_text=raw_text,
        query=query,
        location=location,
        seniority=experience,
    )
    filters = SearchFilters(
        location=location,
        remote=remote,
        employment_type=job_type,
        experience=experience,
        date_posted=date_posted,
        page=page,
    )
    result = await job_search.search_jobs(
        plan, search_skills, filters, client, num_pages=settings.search_num_pages
    )

    return SearchResponse(
        count=len(result.listings),
        skills=search_skills,
        ai_analysis=plan,
        data=result.listings,
        page=result.page,
        raw_count=result.raw_count,
        exhausted=result.exhausted,
    )


@router.post("/save", response_model=ApplicationResponse)
def save_job(body: SaveJobRequest):
    listing = JobListing.model_validate(body.model_dump(exclude={"resume_id"}))
    application = tracker.save_job(listing, resume_id=body.resume_id)
    return ApplicationResponse(message="Job saved successfully", data=application)


@router.get("/saved", response_model=ApplicationListResponse)
def saved_jobs(status: ApplicationStatus | None = None):
    applications = tracker.list_applications(status)
    return ApplicationListResponse(count=len(applications), data=applications)


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
def update_status(application_id: str, body: StatusUpdateRequest):
    application = tracker.update_status(application_id, body.status, body.notes)
    return ApplicationResponse(data=application)


@router.delete("/{application_id}", response_model=MessageResponse)
def delete_job(application_id: str):
    tracker.delete_application(application_id)
    return MessageResponse(message="Job removed")
