from jobboard.models.account import Account
from jobboard.models.profile import (
    Education,
    EmployerProfile,
    Experience,
    JobSeekerProfile,
    PortfolioItem,
    ProfileSkill,
)
from jobboard.models.job import Job
from jobboard.models.application import Application

__all__ = [
    "Account",
    "JobSeekerProfile",
    "ProfileSkill",
    "Experience",
    "Education",
    "PortfolioItem",
    "EmployerProfile",
    "Job",
    "Application",
]
