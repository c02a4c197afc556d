from pydantic import Field

from jobboard.models.enums import ApplicationStatus
from jobboard.schemas.base import CamelModel


class ApplicationCreate(CamelModel):
    job_id: str | None = None
    cover_letter: str | None = None
    resume: str | None = None


class ApplicationUpdate(CamelModel):
    status: ApplicationStatus | None = None
    notes: str | None = None


class JobSummary(CamelModel):
    id: str
    title: str
    job_type: str = Field(alias="type")
    location: str
    category: str
    status: str


class PartySummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str | None = None


class ApplicationResponse(CamelModel):
    id: str
    job_id: str
    job_seeker_id: str
    employer_id: str
    cover_letter: str
    resume: str | None
    status: str
    notes: str | None
    created_at: str
    updated_at: str
    job: JobSummary | None = None
    job_seeker: PartySummary | None = None
    employer: PartySummary | None = None


class ApplicationListResponse(CamelModel):
    applications: list[ApplicationResponse]
