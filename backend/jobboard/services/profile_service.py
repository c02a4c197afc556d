import logging
import uuid

from sqlalchemy.orm import Session, selectinload

from jobboard.config import settings
from jobboard.database import utcnow
from jobboard.errors import Forbidden
from jobboard.models.enums import Role
from jobboard.models.profile import (
    Education,
    EmployerProfile,
    Experience,
    JobSeekerProfile,
    PortfolioItem,
    ProfileSkill,
)
from jobboard.schemas.auth import Identity
from jobboard.schemas.profile import (
    EducationEntry,
    EmployerProfileUpdate,
    ExperienceEntry,
    JobSeekerProfileUpdate,
    PortfolioEntry,
)

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = (
    "phone", "location", "bio", "photo", "desired_job_title", "desired_salary",
    "currency", "resume", "linked_in", "github", "website",
)


def _filled(*values) -> bool:
    return all(v is not None and str(v).strip() for v in values)


def complete_experience(entries: list[ExperienceEntry]) -> list[ExperienceEntry]:
    return [e for e in entries if _filled(e.title, e.company, e.start_date)]


def complete_education(entries: list[EducationEntry]) -> list[EducationEntry]:
    return [e for e in entries if _filled(e.degree, e.institution, e.start_date)]


def complete_portfolio(entries: list[PortfolioEntry]) -> list[PortfolioEntry]:
    return [e for e in entries if _filled(e.title, e.url)]


def clean_skills(skills: list[str]) -> list[str]:
    return [s.strip() for s in skills if s and s.strip()]


def _require_owner(identity: Identity, account_id: str):
    if identity.subject_id != account_id:
        raise Forbidden("Not authorized")


def get_jobseeker_profile(db: Session, identity: Identity, account_id: str) -> JobSeekerProfile | None:
    _require_owner(identity, account_id)
    return (
        db.query(JobSeekerProfile)
        .options(
            selectinload(JobSeekerProfile.skills),
            selectinload(JobSeekerProfile.experience),
            selectinload(JobSeekerProfile.education),
            selectinload(JobSeekerProfile.portfolio),
        )
        .filter(JobSeekerProfile.account_id == account_id)
        .first()
    )


def save_jobseeker_profile(
    db: Session, identity: Identity, account_id: str, req: JobSeekerProfileUpdate
) -> JobSeekerProfile:
    if identity.role != Role.JOBSEEKER:
        raise Forbidden("Only job seekers can update this profile")
    _require_owner(identity, account_id)

    now = utcnow()
    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.account_id == account_id).first()
    if profile is None:
        profile = JobSeekerProfile(
            id=str(uuid.uuid4()),
            account_id=account_id,
            location=req.location or settings.default_jobseeker_location,
            currency="USD",
            availability="immediate",
            created_at=now,
        )
        db.add(profile)

    update_data = req.model_dump(exclude_unset=True)
    for key in _SCALAR_FIELDS:
        if key in update_data:
            value = update_data[key]
            if key in ("location", "currency") and not value:
                continue  # NOT NULL columns keep their previous value
            setattr(profile, key, value)
    if req.availability is not None:
        profile.availability = req.availability.value

    if req.skills is not None:
        profile.skills = [
            ProfileSkill(id=str(uuid.uuid4()), position=i, name=name)
            for i, name in enumerate(clean_skills(req.skills))
        ]
    if req.experience is not None:
        profile.experience = [
            Experience(
                id=str(uuid.uuid4()),
                position=i,
                title=e.title.strip(),
                company=e.company.strip(),
                location=e.location,
                start_date=e.start_date,
                end_date=e.end_date,
                current=e.current,
                description=e.description,
            )
            for i, e in enumerate(complete_experience(req.experience))
        ]
    if req.education is not None:
        profile.education = [
            Education(
                id=str(uuid.uuid4()),
                position=i,
                degree=e.degree.strip(),
                institution=e.institution.strip(),
                location=e.location,
                start_date=e.start_date,
                end_date=e.end_date,
                current=e.current,
            )
            for i, e in enumerate(complete_education(req.education))
        ]
    if req.portfolio is not None:
        profile.portfolio = [
            PortfolioItem(
                id=str(uuid.uuid4()),
                position=i,
                title=p.title.strip(),
                description=p.description,
                url=p.url.strip(),
                image=p.image,
            )
            for i, p in enumerate(complete_portfolio(req.portfolio))
        ]

    profile.updated_at = now
    db.commit()
    db.refresh(profile)
    logger.info("Saved job seeker profile for %s", account_id)
    return profile


def get_employer_profile(db: Session, identity: Identity, account_id: str) -> EmployerProfile | None:
    _require_owner(identity, account_id)
    return db.query(EmployerProfile).filter(EmployerProfile.account_id == account_id).first()


def save_employer_profile(
    db: Session, identity: Identity, account_id: str, req: EmployerProfileUpdate
) -> EmployerProfile:
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Only employers can update this profile")
    _require_owner(identity, account_id)

    now = utcnow()
    profile = db.query(EmployerProfile).filter(EmployerProfile.account_id == account_id).first()
    if profile is None:
        profile = EmployerProfile(
            id=str(uuid.uuid4()),
            account_id=account_id,
            company_name="",
            location=req.location or "",
            created_at=now,
        )
        db.add(profile)

    for key, value in req.model_dump(exclude_unset=True).items():
        if key in ("company_name", "location") and value is None:
            continue
        setattr(profile, key, value)
    profile.updated_at = now
    db.commit()
    db.refresh(profile)
    logger.info("Saved employer profile for %s", account_id)
    return profile
