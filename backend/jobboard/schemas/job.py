from pydantic import Field

from jobboard.database import SQLITE_INT_MAX
from jobboard.models.enums import JobStatus, JobType
from jobboard.schemas.base import CamelModel
from jobboard.schemas.profile import EmployerProfileResponse


class SalaryRange(CamelModel):
    min: int | None = Field(None, ge=0, le=SQLITE_INT_MAX)
    max: int | None = Field(None, ge=0, le=SQLITE_INT_MAX)
    currency: str = "USD"


class JobCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    requirements: list[str] = []
    responsibilities: list[str] = []
    job_type: JobType = Field(alias="type")
    location: str = Field(min_length=1)
    remote: bool = False
    salary: SalaryRange | None = None
    skills: list[str] = []
    experience_level: str | None = None
    category: str = Field(min_length=1)
    status: JobStatus = JobStatus.ACTIVE


class JobUpdate(CamelModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    requirements: list[str] | None = None
    responsibilities: list[str] | None = None
    job_type: JobType | None = Field(None, alias="type")
    location: str | None = Field(None, min_length=1)
    remote: bool | None = None
    salary: SalaryRange | None = None
    skills: list[str] | None = None
    experience_level: str | None = None
    category: str | None = Field(None, min_length=1)
    status: JobStatus | None = None


class JobResponse(CamelModel):
    id: str
    employer_id: str
    title: str
    description: str
    requirements: list[str]
    responsibilities: list[str]
    job_type: str = Field(alias="type")
    location: str
    remote: bool
    salary: SalaryRange | None
    skills: list[str]
    experience_level: str | None
    category: str
    status: str
    views: int
    applications: int
    created_at: str
    updated_at: str
    employer: EmployerProfileResponse | None = None


class JobListResponse(CamelModel):
    jobs: list[JobResponse]
    total: int
