from jobboard.schemas.base import CamelModel
from jobboard.schemas.profile import EducationEntry, ExperienceEntry, PortfolioEntry


class CandidateProfile(CamelModel):
    phone: str | None
    location: str
    bio: str | None
    photo: str | None
    desired_job_title: str | None
    skills: list[str]
    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    availability: str
    desired_salary: int | None
    currency: str
    linked_in: str | None
    github: str | None
    website: str | None
    updated_at: str


class CandidateDetailProfile(CandidateProfile):
    portfolio: list[PortfolioEntry]
    resume: str | None


class CandidateSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    country: str
    created_at: str
    profile: CandidateProfile


class CandidateDetail(CandidateSummary):
    profile: CandidateDetailProfile


class CandidateSearchResponse(CamelModel):
    job_seekers: list[CandidateSummary]
    total: int
    page: int
    limit: int
    total_pages: int
