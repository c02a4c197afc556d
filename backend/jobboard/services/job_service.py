"""Job postings: employer-owned CRUD and the public listing."""
import logging
import re
import uuid

from sqlalchemy import text, update
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import utcnow
from jobboard.errors import Forbidden, NotFound
from jobboard.models.enums import JobStatus, Role
from jobboard.models.job import Job
from jobboard.models.profile import EmployerProfile
from jobboard.schemas.auth import Identity
from jobboard.schemas.job import JobCreate, JobUpdate, SalaryRange

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)
_NOT_NULL_FIELDS = {"title", "description", "job_type", "location", "category", "status", "remote"}
_LIST_FIELDS = {"requirements", "responsibilities", "skills"}


def fts_query(search: str) -> str | None:
    """Turn free text into an FTS5 expression matching any of its words.

    Every token is double-quoted, so user input never reaches the FTS
    query grammar.
    """
    tokens = _TOKEN_RE.findall(search)
    if not tokens:
        return None
    return " OR ".join(f'"{t}"' for t in tokens)


def _salary_columns(salary: SalaryRange | None) -> dict:
    # Only a complete range is stored.
    if salary is None or salary.min is None or salary.max is None:
        return {"salary_min": None, "salary_max": None, "salary_currency": None}
    return {"salary_min": salary.min, "salary_max": salary.max, "salary_currency": salary.currency}


def create_job(db: Session, identity: Identity, req: JobCreate) -> Job:
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Only employers can post jobs")

    now = utcnow()
    job = Job(
        id=str(uuid.uuid4()),
        employer_id=identity.subject_id,
        title=req.title,
        description=req.description,
        requirements=req.requirements,
        responsibilities=req.responsibilities,
        job_type=req.job_type.value,
        location=req.location,
        remote=req.remote,
        skills=req.skills,
        experience_level=req.experience_level,
        category=req.category,
        status=req.status.value,
        views=0,
        applications=0,
        created_at=now,
        updated_at=now,
        **_salary_columns(req.salary),
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    logger.info("Employer %s created job %s (%s)", identity.subject_id, job.id, job.status)
    return job


def list_active_jobs(
    db: Session,
    category: str | None = None,
    job_type: str | None = None,
    remote: bool = False,
    search: str | None = None,
) -> list[Job]:
    query = db.query(Job).filter(Job.status == JobStatus.ACTIVE.value)

    if category:
        query = query.filter(Job.category == category)
    if job_type:
        query = query.filter(Job.job_type == job_type)
    if remote:
        query = query.filter(Job.remote.is_(True))
    if search:
        match = fts_query(search)
        if match is None:
            return []
        matching_ids = db.execute(
            text(
                "SELECT j.id FROM jobs_fts JOIN jobs j ON j.rowid = jobs_fts.rowid "
                "WHERE jobs_fts MATCH :q"
            ),
            {"q": match},
        ).scalars().all()
        query = query.filter(Job.id.in_(matching_ids))

    return (
        query.order_by(Job.created_at.desc(), Job.id.desc())
        .limit(settings.job_listing_cap)
        .all()
    )


def employer_profiles_for(db: Session, jobs: list[Job]) -> dict[str, EmployerProfile]:
    """Fetch the company profiles of all the jobs' owners in one query."""
    employer_ids = {job.employer_id for job in jobs}
    if not employer_ids:
        return {}
    profiles = db.query(EmployerProfile).filter(EmployerProfile.account_id.in_(employer_ids)).all()
    return {p.account_id: p for p in profiles}


def _get_job(db: Session, job_id: str) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFound("Job not found")
    return job


def view_job(db: Session, job_id: str) -> Job:
    """Fetch a job for display, counting the view."""
    result = db.execute(
        update(Job).where(Job.id == job_id).values(views=Job.views + 1)
    )
    if result.rowcount == 0:
        db.rollback()
        raise NotFound("Job not found")
    db.commit()
    return _get_job(db, job_id)


def _get_owned_job(db: Session, identity: Identity, job_id: str) -> Job:
    job = _get_job(db, job_id)
    if job.employer_id != identity.subject_id:
        raise Forbidden("Not authorized")
    return job


def update_job(db: Session, identity: Identity, job_id: str, req: JobUpdate) -> Job:
    job = _get_owned_job(db, identity, job_id)

    update_data = req.model_dump(mode="json", exclude_unset=True, exclude={"salary"})
    for key, value in update_data.items():
        if value is None:
            if key in _NOT_NULL_FIELDS:
                continue
            if key in _LIST_FIELDS:
                value = []
        setattr(job, key, value)
    if "salary" in req.model_fields_set:
        for key, value in _salary_columns(req.salary).items():
            setattr(job, key, value)
    job.updated_at = utcnow()

    db.commit()
    db.refresh(job)
    logger.info("Employer %s updated job %s", identity.subject_id, job.id)
    return job


def delete_job(db: Session, identity: Identity, job_id: str) -> None:
    job = _get_owned_job(db, identity, job_id)
    db.delete(job)
    db.commit()
    logger.info("Employer %s deleted job %s", identity.subject_id, job_id)


def list_employer_jobs(db: Session, identity: Identity) -> list[Job]:
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Only employers can access this endpoint")
    return (
        db.query(Job)
        .filter(Job.employer_id == identity.subject_id)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .all()
    )
