"""Additive relevance score between a job listing and a candidate's skills."""

SKILL_POINTS = 10
TOP_SKILL_POINTS = 5
MAX_SCORE = 100


def score_listing(
    title: str,
    description: str,
    skills: list[str],
    top_skills: list[str] | None = None,
) -> int:
    """Score 0-100.

    +10 per skill found as a case-insensitive substring of title + description,
    +5 more per top skill found. A skill in both lists counts twice.
    Blank skill strings never score.
    """
    text = f"{title or ''} {description or ''}".lower()
    score = 0
    for skill in skills:
        needle = skill.strip().lower()
        if needle and needle in text:
            score += SKILL_POINTS
    for skill in top_skills or []:
        needle = skill.strip().lower()
        if needle and needle in text:
            score += TOP_SKILL_POINTS
    return min(MAX_SCORE, score)
