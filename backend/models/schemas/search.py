"""Search plan, job listings and search pages."""

from typing import Literal

from pydantic import Field

from models.schemas.base import CamelModel

PlanSource = Literal["manual", "ai", "skills"]


class SearchPlan(CamelModel):
    """Immutable per-request search strategy."""
    model_config = {"frozen": True}

    search_string: str
    job_titles: list[str] = []
    queries: list[str] = []
    top_skills: list[str] = []
    seniority: str = "mid"
    source: PlanSource = "skills"

    @property
    def manual(self) -> bool:
        return self.source == "manual"


class JobListing(CamelModel):
    external_id: str
    title: str = ""
    company: str = ""
    company_logo: str | None = None
    location: str = ""
    description: str = ""
    salary: str = "Not specified"
    job_type: str | None = None
    remote: bool = False
    apply_link: str | None = None
    posted_at: str | None = None
    match_score: int = Field(0, ge=0, le=100)
    required_skills: list[str] = []


class SearchFilters(CamelModel):
    location: str = ""
    remote: bool = False
    employment_type: str | None = None
    experience: str | None = None
    date_posted: str = "month"
    page: int = Field(1, ge=1)


class SearchPage(CamelModel):
    """One provider call worth of listings, already scored, filtered and sorted."""
    listings: list[JobListing] = []
    plan: SearchPlan
    page: int = 1
    raw_count: int = 0
    exhausted: bool = False
