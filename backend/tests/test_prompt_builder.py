from models.schemas.resume import ContactLinks, TimelineEntry
from services import prompt_builder


def test_resume_analysis_prompt_truncates_text():
    text = "A" * prompt_builder.ANALYSIS_TEXT_LIMIT + "TAIL_MARKER"
    prompt = prompt_builder.build_resume_analysis_prompt(text)
    assert "A" * prompt_builder.ANALYSIS_TEXT_LIMIT in prompt
    assert "TAIL_MARKER" not in prompt
    assert '"categorizedSkills"' in prompt


def test_search_strategy_prompt_excerpt():
    prompt = prompt_builder.build_search_strategy_prompt(
        ["Python", "Django"], ["Backend Engineer"], "x" * 2000
    )
    assert "Skills: Python, Django" in prompt
    assert "Experience keywords: Backend Engineer" in prompt
    assert "x" * prompt_builder.SEARCH_EXCERPT_LIMIT in prompt
    assert "x" * (prompt_builder.SEARCH_EXCERPT_LIMIT + 1) not in prompt


def test_search_strategy_prompt_without_excerpt():
    prompt = prompt_builder.build_search_strategy_prompt(["Go"], [])
    assert "Resume excerpt" not in prompt


def test_cold_email_prompt_lists_present_links_and_recent_work():
    timeline = [
        TimelineEntry(kind="work", title=f"Role {i}", organization=f"Org {i}") for i in range(4)
    ] + [TimelineEntry(kind="education", title="BSc", organization="Uni")]
    prompt = prompt_builder.build_cold_email_prompt(
        name="Jane",
        skills=["Python"],
        summary="Engineer",
        timeline=timeline,
        links=ContactLinks(github="https://github.com/jane"),
        job_title="",
        company_name="Acme",
        job_description="",
        recipient_role="Hiring Manager",
        email_type="hiring-manager",
        tone="friendly",
    )
    assert "GitHub: https://github.com/jane" in prompt
    assert "LinkedIn: " not in prompt
    assert "Role 0 at Org 0, Role 1 at Org 1, Role 2 at Org 2" in prompt
    assert "Role 3" not in prompt


def test_interview_prompt_keeps_last_twenty_exclusions():
    previous = [f"Question {i}?" for i in range(25)]
    prompt = prompt_builder.build_interview_questions_prompt(
        ["Python"], "Backend Engineer", "hard", "technical", previous
    )
    assert "Question 24?" in prompt
    assert "Question 4?" not in prompt
    assert "Question 5?" in prompt
    assert "HARD difficulty" in prompt
