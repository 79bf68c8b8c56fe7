from typing import Any

from models.schemas.application import Application
from models.schemas.base import CamelModel
from models.schemas.resume import ResumeRecord
from models.schemas.search import JobListing, SearchPlan


class HealthResponse(CamelModel):
    status: str = "ok"
    message: str = ""
    llm_configured: bool = False
    provider_configured: bool = False
    store: str = "memory"


class ResumeResponse(CamelModel):
    success: bool = True
    message: str = ""
    data: ResumeRecord


class ResumeListResponse(CamelModel):
    success: bool = True
    data: list[ResumeRecord] = []


class SearchResponse(CamelModel):
    success: bool = True
    count: int = 0
    skills: list[str] = []
    ai_analysis: SearchPlan
    data: list[JobListing] = []
    page: int = 1
    raw_count: int = 0
    exhausted: bool = False


class ApplicationResponse(CamelModel):
    success: bool = True
    message: str = ""
    data: Application


class ApplicationListResponse(CamelModel):
    success: bool = True
    count: int = 0
    data: list[Application] = []


class MessageResponse(CamelModel):
    success: bool = True
    message: str = ""


class GeneratedResponse(CamelModel):
    success: bool = True
    data: dict[str, Any] = {}


class TipsResponse(CamelModel):
    success: bool = True
    skill: str = ""
    data: dict[str, Any] = {}


class ErrorResponse(CamelModel):
    error: str
    message: str
