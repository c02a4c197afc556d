from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.database import SQLITE_INT_MAX, get_db
from jobboard.dependencies import get_current_identity
from jobboard.models.account import Account
from jobboard.models.enums import Availability
from jobboard.models.profile import JobSeekerProfile
from jobboard.schemas.auth import Identity
from jobboard.schemas.candidate import (
    CandidateDetail,
    CandidateDetailProfile,
    CandidateProfile,
    CandidateSearchResponse,
    CandidateSummary,
)
from jobboard.schemas.profile import EducationEntry, ExperienceEntry, PortfolioEntry
from jobboard.services import candidate_search
from jobboard.services.candidate_search import CandidateFilters

router = APIRouter(prefix="/jobseekers", tags=["jobseekers"])


def _profile_fields(profile: JobSeekerProfile) -> dict:
    return dict(
        phone=profile.phone,
        location=profile.location,
        bio=profile.bio,
        photo=profile.photo,
        desired_job_title=profile.desired_job_title,
        skills=[s.name for s in profile.skills],
        experience=[ExperienceEntry.model_validate(e) for e in profile.experience],
        education=[EducationEntry.model_validate(e) for e in profile.education],
        availability=profile.availability,
        desired_salary=profile.desired_salary,
        currency=profile.currency,
        linked_in=profile.linked_in,
        github=profile.github,
        website=profile.website,
        updated_at=profile.updated_at,
    )


def _candidate_to_summary(account: Account, profile: JobSeekerProfile) -> CandidateSummary:
    return CandidateSummary(
        id=account.id,
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        country=account.country,
        created_at=account.created_at,
        profile=CandidateProfile(**_profile_fields(profile)),
    )


@router.get("", response_model=CandidateSearchResponse)
async def search_jobseekers(
    page: int = Query(1),
    limit: int | None = Query(None),
    search: str | None = None,
    availability: Availability | None = None,
    location: str | None = None,
    salary_min: int | None = Query(None, alias="salaryMin", ge=0, le=SQLITE_INT_MAX),
    salary_max: int | None = Query(None, alias="salaryMax", ge=0, le=SQLITE_INT_MAX),
    employment_type: str | None = Query(None, alias="employmentType"),
    skills: str | None = None,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    filters = CandidateFilters(
        search=search,
        availability=availability,
        location=location,
        salary_min=salary_min,
        salary_max=salary_max,
        skills=[s for s in (skills or "").split(",") if s.strip()],
        employment_type=employment_type,
        page=candidate_search.clamp_page(page),
        limit=candidate_search.clamp_limit(limit),
    )
    rows, total = candidate_search.search_candidates(db, identity, filters)
    return CandidateSearchResponse(
        job_seekers=[_candidate_to_summary(a, p) for a, p in rows],
        total=total,
        page=filters.page,
        limit=filters.limit,
        total_pages=candidate_search.total_pages(total, filters.limit),
    )


@router.get("/{account_id}", response_model=CandidateDetail)
async def get_jobseeker(
    account_id: str,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    account, profile = candidate_search.get_candidate(db, identity, account_id)
    return CandidateDetail(
        id=account.id,
        first_name=account.first_name,
        last_name=account.last_name,
        email=account.email,
        country=account.country,
        created_at=account.created_at,
        profile=CandidateDetailProfile(
            **_profile_fields(profile),
            portfolio=[PortfolioEntry.model_validate(p) for p in profile.portfolio],
            resume=profile.resume,
        ),
    )
