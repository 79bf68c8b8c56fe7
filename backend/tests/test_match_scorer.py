import pytest

from services.match_scorer import score_listing


def test_no_skills_scores_zero():
    assert score_listing("Backend Engineer", "Python and Go", []) == 0


def test_no_matches_scores_zero():
    assert score_listing("Chef", "Cook great food", ["Python", "Docker"]) == 0


def test_skill_and_top_skill_points():
    # React and Node.js match (+20), both are top skills (+10), Python matches (+10)
    score = score_listing(
        "React Developer",
        "Build UIs with react and node.js. Python a plus.",
        ["React", "Node.js", "Python", "Rust"],
        ["React", "Node.js"],
    )
    assert score == 40


def test_case_insensitive_and_title_counts():
    assert score_listing("PYTHON engineer", "", ["python"]) == 10


def test_clamped_to_100():
    skills = [f"skill{i}" for i in range(15)]
    description = " ".join(skills)
    assert score_listing("Title", description, skills, skills) == 100


def test_blank_skills_never_score():
    assert score_listing("Anything", "text", ["", "   "], [""]) == 0


def test_substring_match():
    # "Java" scores against a JavaScript-only listing
    assert score_listing("JavaScript Dev", "", ["Java"]) == 10


@pytest.mark.parametrize(
    "skills,top,expected",
    [
        (["Docker"], None, 10),
        (["Docker"], ["Docker"], 15),
        ([], ["Docker"], 5),
    ],
)
def test_score_table(skills, top, expected):
    assert score_listing("DevOps", "We use Docker daily", skills, top) == expected
