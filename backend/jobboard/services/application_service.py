"""Application lifecycle: submission by job seekers, triage by employers."""
import logging
import uuid

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.database import utcnow
from jobboard.errors import Conflict, Forbidden, InvalidState, NotFound, ValidationError
from jobboard.models.application import Application
from jobboard.models.enums import ApplicationStatus, JobStatus, Role
from jobboard.models.job import Job
from jobboard.schemas.application import ApplicationCreate, ApplicationUpdate
from jobboard.schemas.auth import Identity

logger = logging.getLogger(__name__)

# Open workflow: every status may move to every status, terminal ones included.
ALLOWED_TRANSITIONS: dict[ApplicationStatus, frozenset[ApplicationStatus]] = {
    status: frozenset(ApplicationStatus) for status in ApplicationStatus
}


def can_transition(current: ApplicationStatus, target: ApplicationStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


def _is_duplicate_application(exc: IntegrityError) -> bool:
    return "UNIQUE constraint failed: applications.job_id" in str(exc.orig)


def submit(db: Session, identity: Identity, req: ApplicationCreate) -> Application:
    if identity.role != Role.JOBSEEKER:
        raise Forbidden("Only job seekers can apply to jobs")
    if not req.job_id or not req.cover_letter or not req.cover_letter.strip():
        raise ValidationError("Missing required fields")

    job = db.query(Job).filter(Job.id == req.job_id).first()
    if not job:
        raise NotFound("Job not found")
    if job.status != JobStatus.ACTIVE.value:
        raise InvalidState("This job is no longer accepting applications")

    now = utcnow()
    application = Application(
        id=str(uuid.uuid4()),
        job_id=job.id,
        job_seeker_id=identity.subject_id,
        employer_id=job.employer_id,
        cover_letter=req.cover_letter,
        resume=req.resume,
        status=ApplicationStatus.PENDING.value,
        created_at=now,
        updated_at=now,
    )
    db.add(application)
    # The unique (job_id, job_seeker_id) index decides duplicates; the insert
    # and the counter bump commit together or not at all.
    try:
        db.flush()
        db.execute(
            update(Job)
            .where(Job.id == job.id)
            .values(applications=Job.applications + 1)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if not _is_duplicate_application(exc):
            raise
        logger.warning("Duplicate application by %s for job %s", identity.subject_id, job.id)
        raise Conflict("You have already applied to this job") from None

    logger.info("Application %s submitted by %s for job %s", application.id, identity.subject_id, job.id)
    return get_application(db, application.id)


def get_application(db: Session, application_id: str) -> Application:
    application = _listing_query(db).filter(Application.id == application_id).first()
    if not application:
        raise NotFound("Application not found")
    return application


def get_one(db: Session, identity: Identity, application_id: str) -> Application:
    application = get_application(db, application_id)
    if identity.subject_id not in (application.job_seeker_id, application.employer_id):
        raise Forbidden("Not authorized")
    return application


def transition(db: Session, identity: Identity, application_id: str, req: ApplicationUpdate) -> Application:
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Only employers can update applications")

    application = get_application(db, application_id)
    if application.employer_id != identity.subject_id:
        logger.warning(
            "Employer %s tried to update application %s owned by %s",
            identity.subject_id, application.id, application.employer_id,
        )
        raise Forbidden("Not authorized")

    if req.status is not None:
        current = ApplicationStatus(application.status)
        if not can_transition(current, req.status):
            raise InvalidState(f"Cannot move application from {current.value} to {req.status.value}")
        application.status = req.status.value
    if "notes" in req.model_fields_set:
        application.notes = req.notes
    application.updated_at = utcnow()

    db.commit()
    logger.info("Application %s is now %s", application.id, application.status)
    return get_application(db, application.id)


def _listing_query(db: Session):
    return db.query(Application).options(
        joinedload(Application.job),
        joinedload(Application.job_seeker),
        joinedload(Application.employer),
    )


def list_for_seeker(db: Session, seeker_id: str) -> list[Application]:
    return (
        _listing_query(db)
        .filter(Application.job_seeker_id == seeker_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def list_for_employer(db: Session, employer_id: str) -> list[Application]:
    return (
        _listing_query(db)
        .filter(Application.employer_id == employer_id)
        .order_by(Application.created_at.desc(), Application.id.desc())
        .all()
    )


def list_for_caller(db: Session, identity: Identity) -> list[Application]:
    if identity.role == Role.JOBSEEKER:
        return list_for_seeker(db, identity.subject_id)
    return list_for_employer(db, identity.subject_id)
