from fastapi import APIRouter, Request

from api.dependencies import limiter
from config import settings
from models.requests import (
    ColdEmailRequest,
    CoverLetterRequest,
    EvaluateAnswerRequest,
    InterviewQuestionsRequest,
)
from models.responses import GeneratedResponse, TipsResponse
from services import generators
from services.errors import InvalidRequest

router = APIRouter(tags=["generators"])


@router.post("/cover-letter/generate", response_model=GeneratedResponse)
@limiter.limit(settings.llm_rate_limit)
async def cover_letter(request: Request, body: CoverLetterRequest):
    if body.resume_data is None or not body.resume_data.skills:
        raise InvalidRequest("Please upload your resume first to generate a cover letter")
    if len(body.job_description.strip()) < 10:
        raise InvalidRequest("Please provide a job description (at least 10 characters)")

    result = await generators.generate_cover_letter(
        body.resume_data,
        job_title=body.job_title,
        company_name=body.company_name,
        job_description=body.job_description,
        position=body.position or "Full-time",
        experience_level=body.experience_level,
        tone=body.tone or "professional",
    )
    return GeneratedResponse(data=result)


@router.post("/cold-email/generate", response_model=GeneratedResponse)
@limiter.limit(settings.llm_rate_limit)
async def cold_email(request: Request, body: ColdEmailRequest):
    if body.resume_data is None or not body.resume_data.skills:
        raise InvalidRequest("Please upload your resume first")

    result = await generators.generate_cold_email(
        body.resume_data,
        job_title=body.job_title,
        company_name=body.company_name,
        job_description=body.job_description,
        recipient_role=body.recipient_role or "Recruiter",
        email_type=body.email_type or "recruiter",
        tone=body.tone or "professional",
    )
    return GeneratedResponse(data=result)


@router.post("/interview/generate", response_model=GeneratedResponse)
@limiter.limit(settings.llm_rate_limit)
async def interview_questions(request: Request, body: InterviewQuestionsRequest):
    if not body.skills:
        raise InvalidRequest("Please provide at least one skill to generate questions")

    result = await generators.generate_interview_questions(
        body.skills,
        role=body.role,
        difficulty=body.difficulty or "medium",
        category=body.category or "all",
        exclude_questions=body.exclude_questions,
    )
    return GeneratedResponse(data=result)


@router.post("/interview/evaluate", response_model=GeneratedResponse)
@limiter.limit(settings.llm_rate_limit)
async def evaluate(request: Request, body: EvaluateAnswerRequest):
    if not body.question.strip() or not body.answer.strip():
        raise InvalidRequest("Question and answer are required")

    result = await generators.evaluate_answer(body.question, body.answer, body.expected_points)
    return GeneratedResponse(data=result)


@router.get("/interview/tips/{skill}", response_model=TipsResponse)
def interview_tips(skill: str):
    return TipsResponse(skill=skill, data=generators.get_interview_tips(skill))
