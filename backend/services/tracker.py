"""Application tracker: saved jobs and their status."""

import logging
import threading
import uuid
from datetime import datetime, timezone

from models.schemas.application import Application, ApplicationStatus
from models.schemas.search import JobListing
from services.errors import AlreadySaved, NotFound
from services.store import get_application_store

logger = logging.getLogger(__name__)

# Held across the duplicate check and the insert
_save_lock = threading.Lock()


def save_job(listing: JobListing, resume_id: str | None = None) -> Application:
    store = get_application_store()
    application = Application(
        **listing.model_dump(),
        id=uuid.uuid4().hex,
        status="saved",
        resume_id=resume_id,
    )
    with _save_lock:
        if any(app.external_id == listing.external_id for app in store.list()):
            raise AlreadySaved("Job already saved")
        try:
            store.put(application.id, application)
        except AlreadySaved as e:
            # another process won the race; the unique index rejected this one
            raise AlreadySaved("Job already saved") from e
    logger.info("Saved job %s (%s)", application.id, listing.external_id)
    return application


def list_applications(status: ApplicationStatus | None = None) -> list[Application]:
    applications = get_application_store().list()
    if status:
        applications = [app for app in applications if app.status == status]
    return applications


def update_status(
    application_id: str, status: ApplicationStatus, notes: str | None = None
) -> Application:
    """Move an application to any status. Entering ``applied`` stamps applied_at."""
    store = get_application_store()
    application = store.get(application_id)
    if application is None:
        raise NotFound("Application not found")

    changes: dict = {"status": status}
    if notes is not None:
        changes["notes"] = notes
    if status == "applied":
        changes["applied_at"] = datetime.now(timezone.utc)

    updated = application.model_copy(update=changes)
    store.put(application_id, updated)
    return updated


def delete_application(application_id: str) -> None:
    if not get_application_store().delete(application_id):
        raise NotFound("Application not found")
