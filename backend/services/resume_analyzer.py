"""LLM resume analysis with a structurally identical heuristic fallback.

analyze() returns None whenever the LLM is unconfigured, fails, or returns a
payload that doesn't validate. A malformed payload is never partially adopted.
fallback_analysis() builds the degraded record the caller substitutes.
"""

import logging

from pydantic import ValidationError

from models.schemas.resume import BasicExtraction, ResumeAnalysis
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

ANALYSIS_UNAVAILABLE = "AI analysis unavailable. Please add a Gemini API key."


async def analyze(resume_text: str) -> ResumeAnalysis | None:
    """Run the structured LLM analysis over the first 6000 characters."""
    prompt = prompt_builder.build_resume_analysis_prompt(resume_text)
    result = await gemini_client.generate_json(
        prompt,
        system=prompt_builder.JSON_ONLY_SYSTEM,
        temperature=0.2,
        max_output_tokens=2000,
    )

    if not result.ok:
        logger.warning("Resume analysis unavailable (%s): %s", result.status, result.error)
        return None

    try:
        analysis = ResumeAnalysis.model_validate(result.data)
    except ValidationError as e:
        logger.warning("Resume analysis payload rejected: %d validation errors", e.error_count())
        return None

    logger.info("AI resume analysis complete")
    return analysis


def fallback_analysis(basic: BasicExtraction) -> ResumeAnalysis:
    """Degraded analysis with the same shape as a successful one."""
    return ResumeAnalysis(
        summary=ANALYSIS_UNAVAILABLE,
        suggested_roles=[],
        categorized_skills={"Technical": list(basic.skills)},
        timeline=[],
        location=basic.location,
    )
