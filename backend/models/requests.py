from pydantic import Field

from models.schemas.application import ApplicationStatus
from models.schemas.base import CamelModel
from models.schemas.resume import ContactLinks, TimelineEntry
from models.schemas.search import JobListing


class SaveJobRequest(JobListing):
    resume_id: str | None = None


class StatusUpdateRequest(CamelModel):
    status: ApplicationStatus
    notes: str | None = Field(None, max_length=5000)


class AnalysisContext(CamelModel):
    summary: str = ""
    timeline: list[TimelineEntry] = []


class ResumeContext(CamelModel):
    """The parts of an uploaded resume the generators use."""
    name: str = "The Applicant"
    skills: list[str] = []
    links: ContactLinks = ContactLinks()
    ai_analysis: AnalysisContext | None = None

    @property
    def summary(self) -> str:
        return self.ai_analysis.summary if self.ai_analysis else ""

    @property
    def timeline(self) -> list[TimelineEntry]:
        return self.ai_analysis.timeline if self.ai_analysis else []


class CoverLetterRequest(CamelModel):
    resume_data: ResumeContext | None = None
    job_title: str = ""
    company_name: str = ""
    job_description: str = Field("", max_length=10000)
    position: str = "Full-time"
    experience_level: str = ""
    tone: str = "professional"


class ColdEmailRequest(CamelModel):
    resume_data: ResumeContext | None = None
    job_title: str = ""
    company_name: str = ""
    job_description: str = Field("", max_length=10000)
    recipient_role: str = "Recruiter"
    email_type: str = "recruiter"
    tone: str = "professional"


class InterviewQuestionsRequest(CamelModel):
    skills: list[str] = []
    role: str = ""
    difficulty: str = "medium"
    category: str = "all"
    exclude_questions: list[str] = []


class EvaluateAnswerRequest(CamelModel):
    question: str = ""
    answer: str = Field("", max_length=10000)
    expected_points: list[str] = []
