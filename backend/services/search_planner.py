"""Turn a manual query or resume-derived skills into a SearchPlan.

Manual queries are used verbatim. Otherwise the LLM proposes job titles,
search queries, seniority and top skills; if it can't, the plan is built
from the raw skill list so a search can always proceed.
"""

import logging

from models.schemas.search import SearchPlan
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

MAX_JOB_TITLES = 5
MAX_QUERIES = 3
MAX_TOP_SKILLS = 5
TITLE_JOIN = " OR "


def _str_list(value, limit: int) -> list[str] | None:
    """Keep non-empty strings from a list; None if the value isn't a list."""
    if not isinstance(value, list):
        return None
    return [v.strip() for v in value if isinstance(v, str) and v.strip()][:limit]


def _with_location(search_string: str, location: str) -> str:
    location = (location or "").strip()
    return f"{search_string} in {location}" if location else search_string


def select_search_string(job_titles: list[str], queries: list[str], skills: list[str]) -> str:
    """First two titles OR-joined, else the first query, else the first three skills."""
    if job_titles:
        return TITLE_JOIN.join(job_titles[:2])
    if queries:
        return queries[0]
    return " ".join(skills[:3])


def manual_plan(
    query: str, skills: list[str], location: str = "", seniority: str | None = None
) -> SearchPlan:
    query = query.strip()
    return SearchPlan(
        search_string=_with_location(query, location),
        job_titles=[query],
        queries=[query],
        top_skills=skills[:MAX_TOP_SKILLS],
        seniority=seniority or "mid",
        source="manual",
    )


def fallback_plan(skills: list[str], location: str = "") -> SearchPlan:
    queries = skills[:MAX_QUERIES]
    return SearchPlan(
        search_string=_with_location(select_search_string([], queries, skills), location),
        job_titles=[],
        queries=queries,
        top_skills=skills[:MAX_TOP_SKILLS],
        seniority="mid",
        source="skills",
    )


async def plan_search(
    *,
    skills: list[str],
    experience: list[str] | None = None,
    raw_text: str = "",
    query: str | None = None,
    location: str = "",
    seniority: str | None = None,
) -> SearchPlan:
    """Build the search plan for one request. Never raises for LLM problems."""
    if query and query.strip():
        return manual_plan(query, skills, location, seniority)

    prompt = prompt_builder.build_search_strategy_prompt(skills, experience or [], raw_text)
    result = await gemini_client.generate_json(
        prompt,
        system=prompt_builder.JSON_ONLY_SYSTEM,
        temperature=0.3,
        max_output_tokens=500,
    )
    if not result.ok:
        logger.info("Using basic search plan (%s)", result.status)
        return fallback_plan(skills, location)

    data = result.data
    job_titles = _str_list(data.get("jobTitles"), MAX_JOB_TITLES) or []
    queries = _str_list(data.get("searchQueries"), MAX_QUERIES)
    if queries is None:
        queries = skills[:MAX_QUERIES]
    top_skills = _str_list(data.get("topSkills"), MAX_TOP_SKILLS)
    if top_skills is None:
        top_skills = skills[:MAX_TOP_SKILLS]
    planned_seniority = data.get("seniority")
    if not isinstance(planned_seniority, str) or not planned_seniority.strip():
        planned_seniority = "mid"

    return SearchPlan(
        search_string=_with_location(
            select_search_string(job_titles, queries, skills), location
        ),
        job_titles=job_titles,
        queries=queries,
        top_skills=top_skills,
        seniority=planned_seniority.strip().lower(),
        source="ai",
    )
