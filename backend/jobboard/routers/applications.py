from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_identity
from jobboard.models.application import Application
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationUpdate,
    JobSummary,
    PartySummary,
)
from jobboard.schemas.auth import Identity
from jobboard.services import application_service

router = APIRouter(prefix="/applications", tags=["applications"])


def _application_to_response(app: Application) -> ApplicationResponse:
    job = app.job
    seeker = app.job_seeker
    employer = app.employer
    return ApplicationResponse(
        id=app.id,
        job_id=app.job_id,
        job_seeker_id=app.job_seeker_id,
        employer_id=app.employer_id,
        cover_letter=app.cover_letter,
        resume=app.resume,
        status=app.status,
        notes=app.notes,
        created_at=app.created_at,
        updated_at=app.updated_at,
        job=JobSummary(
            id=job.id,
            title=job.title,
            job_type=job.job_type,
            location=job.location,
            category=job.category,
            status=job.status,
        ) if job else None,
        job_seeker=PartySummary(
            id=seeker.id,
            first_name=seeker.first_name,
            last_name=seeker.last_name,
            email=seeker.email,
        ) if seeker else None,
        employer=PartySummary(
            id=employer.id,
            first_name=employer.first_name,
            last_name=employer.last_name,
        ) if employer else None,
    )


@router.get("", response_model=ApplicationListResponse)
async def list_applications(identity: Identity = Depends(get_current_identity), db: Session = Depends(get_db)):
    applications = application_service.list_for_caller(db, identity)
    return ApplicationListResponse(applications=[_application_to_response(a) for a in applications])


@router.post("", response_model=ApplicationResponse, status_code=201)
async def submit_application(
    req: ApplicationCreate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    application = application_service.submit(db, identity, req)
    return _application_to_response(application)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    application = application_service.get_one(db, identity, application_id)
    return _application_to_response(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: str,
    req: ApplicationUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    application = application_service.transition(db, identity, application_id, req)
    return _application_to_response(application)
