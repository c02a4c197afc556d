from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_identity
from jobboard.models.enums import JobType
from jobboard.models.job import Job
from jobboard.models.profile import EmployerProfile
from jobboard.routers.profiles import employer_profile_to_response
from jobboard.schemas.auth import Identity
from jobboard.schemas.job import JobCreate, JobListResponse, JobResponse, JobUpdate, SalaryRange
from jobboard.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_to_response(job: Job, employer: EmployerProfile | None = None) -> JobResponse:
    salary = None
    if job.salary_min is not None and job.salary_max is not None:
        salary = SalaryRange(min=job.salary_min, max=job.salary_max, currency=job.salary_currency or "USD")

    return JobResponse(
        id=job.id,
        employer_id=job.employer_id,
        title=job.title,
        description=job.description,
        requirements=job.requirements or [],
        responsibilities=job.responsibilities or [],
        job_type=job.job_type,
        location=job.location,
        remote=job.remote,
        salary=salary,
        skills=job.skills or [],
        experience_level=job.experience_level,
        category=job.category,
        status=job.status,
        views=job.views,
        applications=job.applications,
        created_at=job.created_at,
        updated_at=job.updated_at,
        employer=employer_profile_to_response(employer) if employer else None,
    )


@router.get("", response_model=JobListResponse)
async def list_jobs(
    category: str | None = None,
    job_type: JobType | None = Query(None, alias="type"),
    remote: bool = False,
    search: str | None = None,
    db: Session = Depends(get_db),
):
    jobs = job_service.list_active_jobs(
        db,
        category=category,
        job_type=job_type.value if job_type else None,
        remote=remote,
        search=search,
    )
    profiles = job_service.employer_profiles_for(db, jobs)
    return JobListResponse(
        jobs=[_job_to_response(j, profiles.get(j.employer_id)) for j in jobs],
        total=len(jobs),
    )


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    req: JobCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    job = job_service.create_job(db, identity, req)
    return _job_to_response(job)


@router.get("/my-jobs", response_model=JobListResponse)
async def my_jobs(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    jobs = job_service.list_employer_jobs(db, identity)
    return JobListResponse(jobs=[_job_to_response(j) for j in jobs], total=len(jobs))


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, db: Session = Depends(get_db)):
    job = job_service.view_job(db, job_id)
    profiles = job_service.employer_profiles_for(db, [job])
    return _job_to_response(job, profiles.get(job.employer_id))


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    req: JobUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    job = job_service.update_job(db, identity, job_id, req)
    return _job_to_response(job)


@router.delete("/{job_id}")
async def delete_job(
    job_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    job_service.delete_job(db, identity, job_id)
    return {"message": "Job deleted successfully"}
