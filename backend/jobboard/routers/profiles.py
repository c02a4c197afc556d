from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import get_current_identity
from jobboard.models.profile import EmployerProfile, JobSeekerProfile
from jobboard.schemas.auth import Identity
from jobboard.schemas.profile import (
    EducationEntry,
    EmployerProfileResponse,
    EmployerProfileUpdate,
    ExperienceEntry,
    JobSeekerProfileResponse,
    JobSeekerProfileUpdate,
    PortfolioEntry,
)
from jobboard.services import profile_service

router = APIRouter(prefix="/profile", tags=["profiles"])


def jobseeker_profile_to_response(profile: JobSeekerProfile) -> JobSeekerProfileResponse:
    return JobSeekerProfileResponse(
        id=profile.id,
        user_id=profile.account_id,
        phone=profile.phone,
        location=profile.location,
        bio=profile.bio,
        photo=profile.photo,
        desired_job_title=profile.desired_job_title,
        desired_salary=profile.desired_salary,
        currency=profile.currency,
        availability=profile.availability,
        skills=[s.name for s in profile.skills],
        experience=[ExperienceEntry.model_validate(e) for e in profile.experience],
        education=[EducationEntry.model_validate(e) for e in profile.education],
        portfolio=[PortfolioEntry.model_validate(p) for p in profile.portfolio],
        resume=profile.resume,
        linked_in=profile.linked_in,
        github=profile.github,
        website=profile.website,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


def employer_profile_to_response(profile: EmployerProfile) -> EmployerProfileResponse:
    return EmployerProfileResponse(
        id=profile.id,
        user_id=profile.account_id,
        company_name=profile.company_name,
        company_website=profile.company_website,
        company_size=profile.company_size,
        industry=profile.industry,
        location=profile.location,
        description=profile.description,
        logo=profile.logo,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


@router.get("/jobseeker/{account_id}", response_model=JobSeekerProfileResponse | None)
async def get_jobseeker_profile(
    account_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    profile = profile_service.get_jobseeker_profile(db, identity, account_id)
    return jobseeker_profile_to_response(profile) if profile else None


@router.put("/jobseeker/{account_id}", response_model=JobSeekerProfileResponse)
async def update_jobseeker_profile(
    account_id: str,
    req: JobSeekerProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    profile = profile_service.save_jobseeker_profile(db, identity, account_id, req)
    return jobseeker_profile_to_response(profile)


@router.get("/employer/{account_id}", response_model=EmployerProfileResponse | None)
async def get_employer_profile(
    account_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    profile = profile_service.get_employer_profile(db, identity, account_id)
    return employer_profile_to_response(profile) if profile else None


@router.put("/employer/{account_id}", response_model=EmployerProfileResponse)
async def update_employer_profile(
    account_id: str,
    req: EmployerProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    profile = profile_service.save_employer_profile(db, identity, account_id, req)
    return employer_profile_to_response(profile)
