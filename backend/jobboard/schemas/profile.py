from pydantic import Field

from jobboard.database import SQLITE_INT_MAX
from jobboard.models.enums import Availability
from jobboard.schemas.base import CamelModel


class ExperienceEntry(CamelModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: str | None = None


class EducationEntry(CamelModel):
    degree: str | None = None
    institution: str | None = None
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False


class PortfolioEntry(CamelModel):
    title: str | None = None
    description: str | None = None
    url: str | None = None
    image: str | None = None


class JobSeekerProfileUpdate(CamelModel):
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    photo: str | None = None
    desired_job_title: str | None = None
    desired_salary: int | None = Field(None, ge=0, le=SQLITE_INT_MAX)
    currency: str | None = None
    availability: Availability | None = None
    skills: list[str] | None = None
    experience: list[ExperienceEntry] | None = None
    education: list[EducationEntry] | None = None
    portfolio: list[PortfolioEntry] | None = None
    resume: str | None = None
    linked_in: str | None = None
    github: str | None = None
    website: str | None = None


class JobSeekerProfileResponse(CamelModel):
    id: str
    user_id: str
    phone: str | None
    location: str
    bio: str | None
    photo: str | None
    desired_job_title: str | None
    desired_salary: int | None
    currency: str
    availability: str
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    portfolio: list[PortfolioEntry] = []
    resume: str | None
    linked_in: str | None
    github: str | None
    website: str | None
    created_at: str
    updated_at: str


class EmployerProfileUpdate(CamelModel):
    company_name: str | None = None
    company_website: str | None = None
    company_size: str | None = None
    industry: str | None = None
    location: str | None = None
    description: str | None = None
    logo: str | None = None


class EmployerProfileResponse(CamelModel):
    id: str
    user_id: str
    company_name: str
    company_website: str | None
    company_size: str | None
    industry: str | None
    location: str
    description: str | None
    logo: str | None
    created_at: str
    updated_at: str
