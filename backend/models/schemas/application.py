"""Application tracker entity."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import Field

from models.schemas.search import JobListing

ApplicationStatus = Literal[
    "saved", "applied", "interviewing", "offered", "rejected", "withdrawn"
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Application(JobListing):
    id: str
    status: ApplicationStatus = "saved"
    notes: str | None = None
    applied_at: datetime | None = None
    resume_id: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
