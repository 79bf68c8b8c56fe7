from unittest.mock import AsyncMock

import pytest

from services import gemini_client, search_planner
from services.gemini_client import StructuredResult

SKILLS = ["Python", "Django", "PostgreSQL", "Docker", "AWS", "Redis"]


def _stub(monkeypatch, result: StructuredResult) -> AsyncMock:
    mock = AsyncMock(return_value=result)
    monkeypatch.setattr(gemini_client, "generate_json", mock)
    return mock


@pytest.mark.asyncio
async def test_manual_query_bypasses_llm(monkeypatch):
    mock = _stub(monkeypatch, StructuredResult("ok", data={}))

    plan = await search_planner.plan_search(
        skills=SKILLS, query="  data engineer ", location="Austin"
    )

    mock.assert_not_awaited()
    assert plan.manual
    assert plan.search_string == "data engineer in Austin"
    assert plan.job_titles == ["data engineer"]
    assert plan.queries == ["data engineer"]
    assert plan.top_skills == SKILLS[:5]


@pytest.mark.asyncio
async def test_ai_plan_joins_first_two_titles(monkeypatch):
    _stub(monkeypatch, StructuredResult("ok", data={
        "jobTitles": ["Backend Engineer", "Python Developer", "Platform Engineer"],
        "searchQueries": ["python backend"],
        "seniority": "Senior",
        "topSkills": ["Python", "Django"],
    }))

    plan = await search_planner.plan_search(skills=SKILLS, location="Remote")

    assert plan.source == "ai"
    assert plan.search_string == "Backend Engineer OR Python Developer in Remote"
    assert plan.seniority == "senior"
    assert plan.top_skills == ["Python", "Django"]


@pytest.mark.asyncio
async def test_ai_plan_falls_back_to_first_query(monkeypatch):
    _stub(monkeypatch, StructuredResult("ok", data={
        "jobTitles": [],
        "searchQueries": ["django developer", "python api"],
    }))

    plan = await search_planner.plan_search(skills=SKILLS)

    assert plan.search_string == "django developer"
    assert plan.seniority == "mid"
    assert plan.top_skills == SKILLS[:5]


@pytest.mark.asyncio
async def test_ai_plan_drops_non_string_entries(monkeypatch):
    _stub(monkeypatch, StructuredResult("ok", data={
        "jobTitles": ["", 42, "SRE"],
        "topSkills": "Python",
    }))

    plan = await search_planner.plan_search(skills=SKILLS)

    assert plan.job_titles == ["SRE"]
    assert plan.search_string == "SRE"
    assert plan.queries == SKILLS[:3]
    assert plan.top_skills == SKILLS[:5]


@pytest.mark.asyncio
async def test_ai_plan_caps_lists(monkeypatch):
    _stub(monkeypatch, StructuredResult("ok", data={
        "jobTitles": [f"Title {i}" for i in range(8)],
        "searchQueries": [f"q{i}" for i in range(8)],
        "topSkills": [f"s{i}" for i in range(8)],
    }))

    plan = await search_planner.plan_search(skills=SKILLS)

    assert len(plan.job_titles) == search_planner.MAX_JOB_TITLES
    assert len(plan.queries) == search_planner.MAX_QUERIES
    assert len(plan.top_skills) == search_planner.MAX_TOP_SKILLS


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["unconfigured", "invalid", "failed"])
async def test_llm_unavailable_uses_skills(monkeypatch, status):
    _stub(monkeypatch, StructuredResult(status, error="x"))

    plan = await search_planner.plan_search(skills=SKILLS, location="Berlin")

    assert plan.source == "skills"
    assert plan.queries == ["Python", "Django", "PostgreSQL"]
    assert plan.search_string == "Python in Berlin"
    assert plan.top_skills == SKILLS[:5]
    assert plan.seniority == "mid"


@pytest.mark.asyncio
async def test_no_key_never_raises():
    plan = await search_planner.plan_search(skills=["Go"])
    assert plan.search_string == "Go"


def test_select_search_string_skills_only():
    assert search_planner.select_search_string([], [], ["A", "B", "C", "D"]) == "A B C"
