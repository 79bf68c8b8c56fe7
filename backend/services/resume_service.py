"""Resume pipeline: PDF bytes -> extraction -> analysis -> stored ResumeRecord."""

import logging
import uuid

from models.schemas.resume import ResumeRecord
from services import entity_extractor, pdf_parser, resume_analyzer
from services.errors import NotFound
from services.store import get_resume_store

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10


async def process_resume(pdf_bytes: bytes, file_name: str = "") -> ResumeRecord:
    """Parse, analyze and store one uploaded resume.

    Raises UnreadablePDF if the bytes aren't a PDF. LLM problems never fail
    the upload; the record then carries the fallback analysis.
    """
    extracted = pdf_parser.extract_text(pdf_bytes)
    basic = entity_extractor.extract_basic(extracted.text)

    analysis = await resume_analyzer.analyze(extracted.text)
    if analysis is not None:
        skills = analysis.flat_skills()
        location = analysis.location or basic.location
    else:
        analysis = resume_analyzer.fallback_analysis(basic)
        skills = basic.skills
        location = basic.location

    record = ResumeRecord(
        id=uuid.uuid4().hex,
        file_name=file_name,
        skills=skills,
        email=basic.email,
        phone=basic.phone,
        links=basic.links,
        location=location,
        page_count=extracted.page_count,
        ai_analysis=analysis,
        raw_text=extracted.text,
    )
    get_resume_store().put(record.id, record)
    logger.info(
        "Stored resume %s (%d pages, %d skills)", record.id, record.page_count, len(skills)
    )
    return record


def get_resume(resume_id: str) -> ResumeRecord:
    record = get_resume_store().get(resume_id)
    if record is None:
        raise NotFound("Resume not found")
    return record


def list_resumes() -> list[ResumeRecord]:
    return get_resume_store().list(limit=RECENT_LIMIT)
