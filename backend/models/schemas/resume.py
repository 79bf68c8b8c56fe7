"""Resume extraction and analysis records."""

import re
from datetime import datetime, timezone
from typing import Literal, get_args

from pydantic import Field, field_validator, model_serializer

from models.schemas.base import CamelModel

SeniorityLevel = Literal["junior", "mid", "senior", "lead", "executive"]
SENIORITY_LEVELS = get_args(SeniorityLevel)

_SENIORITY_ALIASES = {
    "entry": "junior",
    "intern": "junior",
    "graduate": "junior",
    "intermediate": "mid",
    "middle": "mid",
    "staff": "lead",
    "principal": "lead",
    "director": "executive",
    "vp": "executive",
}

LINK_KINDS = ("linkedin", "github", "portfolio", "twitter", "behance", "dribbble")


class ExtractedText(CamelModel):
    """Decoded PDF text plus page count."""
    text: str = ""
    page_count: int = 0


class ContactLinks(CamelModel):
    """At most one absolute URL per known platform; absent keys are omitted."""
    linkedin: str | None = None
    github: str | None = None
    portfolio: str | None = None
    twitter: str | None = None
    behance: str | None = None
    dribbble: str | None = None

    @model_serializer(mode="wrap")
    def _drop_missing(self, handler):
        return {k: v for k, v in handler(self).items() if v is not None}

    def present(self) -> dict[str, str]:
        return self.model_dump()


class BasicExtraction(CamelModel):
    skills: list[str] = []
    email: str | None = None
    phone: str | None = None
    links: ContactLinks = ContactLinks()
    location: str | None = None


class TimelineEntry(CamelModel):
    kind: Literal["work", "education"] = Field("work", alias="type")
    title: str = ""
    organization: str = ""
    duration: str = ""
    highlights: list[str] = []

    @field_validator("kind", mode="before")
    @classmethod
    def _lower_kind(cls, v):
        return v.lower().strip() if isinstance(v, str) else v


class ResumeAnalysis(CamelModel):
    """LLM-derived analysis. ``summary`` and ``categorized_skills`` are required
    so a payload missing them is rejected as a whole."""
    summary: str
    suggested_roles: list[str] = []
    seniority_level: SeniorityLevel = "mid"
    location: str | None = None
    categorized_skills: dict[str, list[str]]
    timeline: list[TimelineEntry] = []

    @field_validator("seniority_level", mode="before")
    @classmethod
    def _normalize_seniority(cls, v):
        """Map free-form levels ("Mid-level", "Senior Engineer") onto the five known ones."""
        if v is None:
            return "mid"
        if not isinstance(v, str):
            return v
        for word in re.findall(r"[a-z]+", v.lower()):
            word = _SENIORITY_ALIASES.get(word, word)
            if word in SENIORITY_LEVELS:
                return word
        return "mid"

    @field_validator("location", mode="before")
    @classmethod
    def _blank_location(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def flat_skills(self) -> list[str]:
        """Flatten categories into one list, de-duplicated in first-seen order."""
        seen: dict[str, None] = {}
        for skills in self.categorized_skills.values():
            for skill in skills:
                seen.setdefault(skill, None)
        return list(seen)

    def experience_keywords(self) -> list[str]:
        return [e.title for e in self.timeline if e.kind == "work" and e.title]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResumeRecord(CamelModel):
    """Stored result of one upload. Never mutated; a re-upload makes a new record."""
    id: str
    file_name: str = ""
    skills: list[str] = []
    email: str | None = None
    phone: str | None = None
    links: ContactLinks = ContactLinks()
    location: str | None = None
    page_count: int = 0
    ai_analysis: ResumeAnalysis
    raw_text: str = ""
    uploaded_at: datetime = Field(default_factory=_utcnow)
