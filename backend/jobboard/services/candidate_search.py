"""
Candidate search over job-seeker accounts joined to their profiles.

The WHERE clause is assembled from an ordered list of predicate builders.
Each builder is a pure function of the filters that returns a SQLAlchemy
clause, or None when its parameter is absent; the non-empty clauses are
AND-ed together. Accounts without a profile never match because the
profile is inner-joined.
"""
import logging
import math
from collections.abc import Callable

from pydantic import BaseModel
from sqlalchemy import Text, and_, func, or_
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql.elements import ColumnElement

from jobboard.config import settings
from jobboard.database import SQLITE_INT_MAX
from jobboard.errors import Forbidden, NotFound
from jobboard.models.account import Account
from jobboard.models.enums import Availability, Role
from jobboard.models.profile import Experience, JobSeekerProfile, ProfileSkill
from jobboard.schemas.auth import Identity

logger = logging.getLogger(__name__)


class CandidateFilters(BaseModel):
    search: str | None = None
    availability: Availability | None = None
    location: str | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    skills: list[str] = []
    # Accepted for client compatibility; profiles carry no employment type to match.
    employment_type: str | None = None
    page: int = 1
    limit: int = 10


Predicate = Callable[[CandidateFilters], ColumnElement | None]


def _contains(column, term: str) -> ColumnElement:
    """Unicode case-insensitive substring match with LIKE wildcards escaped."""
    return func.casefold(column, type_=Text).contains(term.casefold(), autoescape=True)


def jobseeker_role(filters: CandidateFilters) -> ColumnElement:
    return Account.role == Role.JOBSEEKER.value


def text_search(filters: CandidateFilters) -> ColumnElement | None:
    """Match the term in any account field or any profile field."""
    term = (filters.search or "").strip()
    if not term:
        return None
    return or_(
        _contains(Account.first_name, term),
        _contains(Account.last_name, term),
        _contains(Account.email, term),
        _contains(JobSeekerProfile.bio, term),
        _contains(JobSeekerProfile.desired_job_title, term),
        JobSeekerProfile.skills.any(_contains(ProfileSkill.name, term)),
        JobSeekerProfile.experience.any(
            or_(_contains(Experience.title, term), _contains(Experience.company, term))
        ),
    )


def availability_matches(filters: CandidateFilters) -> ColumnElement | None:
    if filters.availability is None:
        return None
    return JobSeekerProfile.availability == filters.availability.value


def location_matches(filters: CandidateFilters) -> ColumnElement | None:
    term = (filters.location or "").strip()
    if not term:
        return None
    return or_(_contains(JobSeekerProfile.location, term), _contains(Account.country, term))


def salary_at_least(filters: CandidateFilters) -> ColumnElement | None:
    if filters.salary_min is None:
        return None
    # NULL >= x is not true, so profiles without a desired salary drop out.
    return JobSeekerProfile.desired_salary >= filters.salary_min


def salary_at_most(filters: CandidateFilters) -> ColumnElement | None:
    if filters.salary_max is None:
        return None
    return JobSeekerProfile.desired_salary <= filters.salary_max


def skills_match(filters: CandidateFilters) -> ColumnElement | None:
    wanted = [s.strip() for s in filters.skills if s and s.strip()]
    if not wanted:
        return None
    return JobSeekerProfile.skills.any(
        or_(*(_contains(ProfileSkill.name, s) for s in wanted))
    )


CANDIDATE_PREDICATES: list[Predicate] = [
    jobseeker_role,
    text_search,
    availability_matches,
    location_matches,
    salary_at_least,
    salary_at_most,
    skills_match,
]


def build_where(filters: CandidateFilters) -> ColumnElement:
    clauses = [c for c in (build(filters) for build in CANDIDATE_PREDICATES) if c is not None]
    return and_(*clauses)


def clamp_page(page: int | None) -> int:
    # Keeps the row offset within an SQLite integer; later pages are empty anyway.
    last_page = SQLITE_INT_MAX // settings.candidate_max_page_size
    return min(max(1, page or 1), last_page)


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return settings.candidate_page_size
    return min(max(1, limit), settings.candidate_max_page_size)


def _candidate_query(db: Session):
    return (
        db.query(Account, JobSeekerProfile)
        .join(JobSeekerProfile, JobSeekerProfile.account_id == Account.id)
    )


def search_candidates(
    db: Session, identity: Identity, filters: CandidateFilters
) -> tuple[list[tuple[Account, JobSeekerProfile]], int]:
    """Return one page of (account, profile) rows and the total match count."""
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Access denied")

    query = _candidate_query(db).filter(build_where(filters))
    total = query.count()

    rows = (
        query.options(
            selectinload(JobSeekerProfile.skills),
            selectinload(JobSeekerProfile.experience),
            selectinload(JobSeekerProfile.education),
        )
        .order_by(JobSeekerProfile.updated_at.desc(), Account.id.asc())
        .offset((filters.page - 1) * filters.limit)
        .limit(filters.limit)
        .all()
    )
    logger.debug("Candidate search matched %d rows (page %d)", total, filters.page)
    return [(account, profile) for account, profile in rows], total


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit > 0 else 0


def get_candidate(db: Session, identity: Identity, account_id: str) -> tuple[Account, JobSeekerProfile]:
    if identity.role != Role.EMPLOYER:
        raise Forbidden("Access denied")

    row = (
        _candidate_query(db)
        .options(
            selectinload(JobSeekerProfile.skills),
            selectinload(JobSeekerProfile.experience),
            selectinload(JobSeekerProfile.education),
            selectinload(JobSeekerProfile.portfolio),
        )
        .filter(Account.id == account_id, jobseeker_role(CandidateFilters()))
        .first()
    )
    if row is None:
        raise NotFound("Job seeker not found")
    account, profile = row
    return account, profile
