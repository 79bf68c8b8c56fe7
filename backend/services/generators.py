"""LLM-backed document generators: cover letter, cold email, interview prep.

These are prompt/response passthroughs. An unconfigured LLM raises
ConfigurationMissing; the interview helpers fall back to canned output for
any other failure.
"""

import logging

from models.requests import ResumeContext
from services import gemini_client, prompt_builder
from services.errors import ConfigurationMissing, ModelOutputInvalid

logger = logging.getLogger(__name__)


async def _generate(prompt: str, system: str, temperature: float, max_output_tokens: int) -> dict:
    text = await gemini_client.complete(
        prompt, system=system, temperature=temperature, max_output_tokens=max_output_tokens
    )
    if not text:
        raise ModelOutputInvalid("Empty response from AI")
    try:
        return gemini_client.decode_json(text)
    except ModelOutputInvalid as e:
        logger.error("Generator output rejected: %s", e.message)
        raise ModelOutputInvalid("Failed to parse AI response. Please try again.") from e


async def generate_cover_letter(
    resume: ResumeContext,
    *,
    job_title: str = "",
    company_name: str = "",
    job_description: str,
    position: str = "Full-time",
    experience_level: str = "",
    tone: str = "professional",
) -> dict:
    prompt = prompt_builder.build_cover_letter_prompt(
        name=resume.name,
        skills=resume.skills,
        summary=resume.summary,
        timeline=resume.timeline,
        job_title=job_title,
        company_name=company_name,
        job_description=job_description,
        position=position,
        experience_level=experience_level,
        tone=tone,
    )
    return await _generate(
        prompt,
        system=(
            "You are a professional cover letter writer. Always respond with valid JSON only. "
            "No markdown, no code fences, no extra text."
        ),
        temperature=0.7,
        max_output_tokens=4000,
    )


async def generate_cold_email(
    resume: ResumeContext,
    *,
    job_title: str = "",
    company_name: str = "",
    job_description: str = "",
    recipient_role: str = "Recruiter",
    email_type: str = "recruiter",
    tone: str = "professional",
) -> dict:
    prompt = prompt_builder.build_cold_email_prompt(
        name=resume.name,
        skills=resume.skills,
        summary=resume.summary,
        timeline=resume.timeline,
        links=resume.links,
        job_title=job_title,
        company_name=company_name,
        job_description=job_description,
        recipient_role=recipient_role,
        email_type=email_type,
        tone=tone,
    )
    return await _generate(
        prompt,
        system=(
            "You are a cold email expert. Always respond with valid JSON only. "
            "No markdown, no code fences."
        ),
        temperature=0.75,
        max_output_tokens=2000,
    )


# ---------------------------------------------------------------------------
# Interview preparation
# ---------------------------------------------------------------------------

def fallback_questions(skills: list[str], difficulty: str) -> dict:
    primary = skills[0] if skills else "programming"
    return {
        "questions": [
            {
                "id": 1,
                "question": f"Explain the key concepts of {primary} and when you would use it.",
                "category": "technical",
                "difficulty": difficulty,
                "skill": primary,
                "expectedPoints": [
                    "Clear definition",
                    "Use cases",
                    "Advantages and limitations",
                ],
                "tips": "Start with a clear definition, then provide concrete examples.",
            },
            {
                "id": 2,
                "question": "Tell me about a challenging project you worked on and how you overcame obstacles.",
                "category": "behavioral",
                "difficulty": "medium",
                "skill": "Problem Solving",
                "expectedPoints": [
                    "Clear problem description",
                    "Actions taken",
                    "Results achieved",
                    "Lessons learned",
                ],
                "tips": "Use the STAR method: Situation, Task, Action, Result.",
            },
            {
                "id": 3,
                "question": f"How would you debug a performance issue in a {primary} application?",
                "category": "problem-solving",
                "difficulty": difficulty,
                "skill": primary,
                "expectedPoints": [
                    "Systematic approach",
                    "Profiling tools",
                    "Common bottlenecks",
                    "Optimization strategies",
                ],
                "tips": "Show your debugging process step by step.",
            },
        ],
        "summary": {
            "totalQuestions": 3,
            "skillsCovered": [primary, "Problem Solving"],
            "estimatedDuration": "15 minutes",
        },
    }


FALLBACK_EVALUATION = {
    "score": 5,
    "strengths": ["Attempted to answer the question"],
    "improvements": ["Could not evaluate - please try again"],
    "suggestedAnswer": "Evaluation failed",
}


async def generate_interview_questions(
    skills: list[str],
    role: str = "",
    difficulty: str = "medium",
    category: str = "all",
    exclude_questions: list[str] | None = None,
) -> dict:
    if not gemini_client.get_client():
        raise ConfigurationMissing("GEMINI_API_KEY not configured")

    prompt = prompt_builder.build_interview_questions_prompt(
        skills, role, difficulty, category, exclude_questions or []
    )
    result = await gemini_client.generate_json(
        prompt,
        system="You are a technical interviewer. Respond with valid JSON only. Keep answers concise. No markdown.",
        temperature=0.7,
        max_output_tokens=8000,
    )
    if not result.ok or not isinstance(result.data.get("questions"), list):
        logger.error("Error generating interview questions: %s", result.error or "no questions")
        return fallback_questions(skills, difficulty)
    return result.data


async def evaluate_answer(question: str, answer: str, expected_points: list[str]) -> dict:
    if not gemini_client.get_client():
        raise ConfigurationMissing("GEMINI_API_KEY not configured")

    prompt = prompt_builder.build_answer_evaluation_prompt(question, answer, expected_points)
    result = await gemini_client.generate_json(
        prompt,
        system="You are an interview coach. Always respond with valid JSON only.",
        temperature=0.5,
        max_output_tokens=1000,
    )
    if not result.ok:
        logger.error("Error evaluating answer: %s", result.error)
        return dict(FALLBACK_EVALUATION)
    return result.data


_SKILL_TIPS = {
    "React": {
        "keyTopics": ["Hooks", "State management", "Virtual DOM", "Component lifecycle", "Performance optimization"],
        "commonQuestions": [
            "Explain the difference between state and props",
            "What are React Hooks and why were they introduced?",
            "How does the Virtual DOM work?",
        ],
        "resources": ["React documentation", "React patterns"],
    },
    "Node.js": {
        "keyTopics": ["Event loop", "Async/await", "Express.js", "Streams", "Error handling"],
        "commonQuestions": [
            "Explain the Node.js event loop",
            "How do you handle errors in async code?",
            "What are streams and when would you use them?",
        ],
        "resources": ["Node.js docs", "Node best practices"],
    },
    "Python": {
        "keyTopics": ["Decorators", "Generators", "OOP", "List comprehensions", "GIL"],
        "commonQuestions": [
            "What are decorators and how do they work?",
            "Explain the difference between lists and tuples",
            "What is the GIL and how does it affect multithreading?",
        ],
        "resources": ["Python docs", "Real Python tutorials"],
    },
}


def get_interview_tips(skill: str) -> dict:
    if skill in _SKILL_TIPS:
        return _SKILL_TIPS[skill]
    return {
        "keyTopics": ["Core concepts", "Best practices", "Common patterns", "Debugging techniques"],
        "commonQuestions": [
            f"What are the main features of {skill}?",
            f"When would you choose {skill} over alternatives?",
            f"What are common pitfalls when using {skill}?",
        ],
        "resources": ["Official documentation", "Online tutorials"],
    }
