"""Job search aggregation: provider request, mapping, scoring, filtering, pagination.

search_jobs() handles one provider call and returns a SearchPage.
SearchSession accumulates pages for a caller doing search + "load more".
"""

import asyncio
import logging
from dataclasses import dataclass, field

from models.schemas.search import JobListing, SearchFilters, SearchPage, SearchPlan
from services import match_scorer, search_planner
from services.jsearch_client import JSearchClient

logger = logging.getLogger(__name__)

# A page with fewer raw results than this is taken to be the last one.
# Approximate: the provider may return a short page and still have more later.
EXHAUSTION_THRESHOLD = 5


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------

def _thousands(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def format_salary(
    min_salary: float | None, max_salary: float | None, currency: str | None = "USD"
) -> str:
    currency = currency or "USD"
    if not min_salary and not max_salary:
        return "Not specified"
    if min_salary and max_salary:
        return f"{currency} {_thousands(min_salary)} - {_thousands(max_salary)}"
    if min_salary:
        return f"{currency} {_thousands(min_salary)}+"
    return f"Up to {currency} {_thousands(max_salary)}"


def _format_location(hit: dict) -> str:
    city = hit.get("job_city")
    if city:
        return f"{city}, {hit.get('job_state') or hit.get('job_country') or ''}".rstrip(", ")
    return hit.get("job_country") or "Remote"


def map_listing(hit: dict, skills: list[str], top_skills: list[str]) -> JobListing:
    """Map one raw provider record to a scored JobListing."""
    title = hit.get("job_title") or ""
    description = hit.get("job_description") or ""
    return JobListing(
        external_id=str(hit.get("job_id") or ""),
        title=title,
        company=hit.get("employer_name") or "",
        company_logo=hit.get("employer_logo"),
        location=_format_location(hit),
        description=description,
        salary=format_salary(
            hit.get("job_min_salary"), hit.get("job_max_salary"), hit.get("job_salary_currency")
        ),
        job_type=hit.get("job_employment_type"),
        remote=bool(hit.get("job_is_remote")),
        apply_link=hit.get("job_apply_link"),
        posted_at=hit.get("job_posted_at_datetime_utc"),
        match_score=match_scorer.score_listing(title, description, skills, top_skills),
        required_skills=list(hit.get("job_required_skills") or []),
    )


# ---------------------------------------------------------------------------
# Filtering / de-duplication
# ---------------------------------------------------------------------------

def matches_location(listing: JobListing, location: str) -> bool:
    """True if the listing shares a comma-delimited location part, or is remote."""
    if listing.remote:
        return True
    parts = [p.strip() for p in location.lower().split(",")]
    job_location = (listing.location or "").lower()
    job_city = job_location.split(",")[0].strip()
    return any(part in job_location or job_city in part for part in parts)


def filter_by_location(listings: list[JobListing], location: str) -> list[JobListing]:
    if not location.strip():
        return listings
    return [job for job in listings if matches_location(job, location)]


def dedupe(listings: list[JobListing], seen: set[str] | None = None) -> list[JobListing]:
    """Drop listings whose external_id is in ``seen`` or repeats within the list."""
    seen = set(seen or ())
    unique = []
    for job in listings:
        if job.external_id in seen:
            continue
        seen.add(job.external_id)
        unique.append(job)
    return unique


# ---------------------------------------------------------------------------
# One search call
# ---------------------------------------------------------------------------

def build_provider_params(
    plan: SearchPlan, filters: SearchFilters, num_pages: int
) -> dict[str, str]:
    params = {
        "query": plan.search_string,
        "page": str(filters.page),
        "num_pages": str(num_pages),
        "date_posted": filters.date_posted or "month",
        "remote_jobs_only": "true" if filters.remote else "false",
    }
    if filters.experience:
        params["job_requirements"] = filters.experience
    if filters.employment_type:
        params["employment_types"] = filters.employment_type
    return params


async def search_jobs(
    plan: SearchPlan,
    skills: list[str],
    filters: SearchFilters,
    client: JSearchClient,
    num_pages: int = 1,
) -> SearchPage:
    """Fetch, score, sort and filter one page of listings for ``plan``.

    Raises ConfigurationMissing / ProviderError from the provider unchanged.
    """
    params = build_provider_params(plan, filters, num_pages)
    logger.info("Search query: %s", plan.search_string)
    logger.info(
        "Filters: experience=%s job_type=%s date_posted=%s remote=%s page=%d",
        filters.experience, filters.employment_type, filters.date_posted,
        filters.remote, filters.page,
    )

    hits = await client.search(params)
    logger.info("Provider returned %d jobs", len(hits))

    listings = [map_listing(hit, skills, plan.top_skills) for hit in hits]
    # sorted() is stable, so equal scores keep provider order
    listings = sorted(listings, key=lambda job: job.match_score, reverse=True)

    if not plan.manual:
        listings = filter_by_location(listings, filters.location)
        logger.info("Jobs after location filter: %d", len(listings))

    return SearchPage(
        listings=listings,
        plan=plan,
        page=filters.page,
        raw_count=len(hits),
        exhausted=len(hits) < EXHAUSTION_THRESHOLD,
    )


# ---------------------------------------------------------------------------
# Client-side session: search + load more
# ---------------------------------------------------------------------------

@dataclass
class SearchRequest:
    skills: list[str] = field(default_factory=list)
    experience: list[str] = field(default_factory=list)
    raw_text: str = ""
    query: str | None = None
    location: str = ""
    remote: bool = False
    employment_type: str | None = None
    experience_level: str | None = None
    date_posted: str = "month"

    def filters(self, page: int) -> SearchFilters:
        return SearchFilters(
            location=self.location,
            remote=self.remote,
            employment_type=self.employment_type,
            experience=self.experience_level,
            date_posted=self.date_posted,
            page=page,
        )


class SearchSession:
    """Accumulated listings across one search and its "load more" calls.

    Invariant: ``listings`` never holds two entries with the same external_id.
    Calls on one session are serialized by an internal lock.
    """

    def __init__(self, client: JSearchClient, num_pages: int = 1) -> None:
        self._client = client
        self._num_pages = num_pages
        self._lock = asyncio.Lock()
        self.request: SearchRequest | None = None
        self.plan: SearchPlan | None = None
        self.listings: list[JobListing] = []
        self.page = 1
        self.exhausted = False

    async def _fetch(self, plan: SearchPlan, request: SearchRequest, page: int) -> SearchPage:
        return await search_jobs(
            plan,
            request.skills,
            request.filters(page),
            self._client,
            num_pages=self._num_pages,
        )

    async def search(self, request: SearchRequest) -> list[JobListing]:
        """Fresh search: replaces accumulated listings with page 1.

        Session state changes only once page 1 has been fetched; if planning or
        the provider call raises, the previous search stays in place.
        """
        async with self._lock:
            plan = await search_planner.plan_search(
                skills=request.skills,
                experience=request.experience,
                raw_text=request.raw_text,
                query=request.query,
                location=request.location,
                seniority=request.experience_level,
            )
            result = await self._fetch(plan, request, 1)
            self.request = request
            self.plan = plan
            self.listings = dedupe(result.listings)
            self.page = 2
            self.exhausted = result.exhausted
            return list(self.listings)

    async def load_more(self) -> list[JobListing]:
        """Fetch the next page and append listings not already held.

        Returns only the newly appended listings.
        """
        async with self._lock:
            if self.request is None:
                raise RuntimeError("load_more() called before search()")
            if self.exhausted:
                return []
            result = await self._fetch(self.plan, self.request, self.page)
            seen = {job.external_id for job in self.listings}
            fresh = dedupe(result.listings, seen)
            self.listings.extend(fresh)
            self.page += 1
            if result.exhausted:
                self.exhausted = True
            return fresh
