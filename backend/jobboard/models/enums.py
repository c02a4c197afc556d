from enum import Enum


class Role(str, Enum):
    JOBSEEKER = "jobseeker"
    EMPLOYER = "employer"


class Availability(str, Enum):
    IMMEDIATE = "immediate"
    TWO_WEEKS = "2weeks"
    ONE_MONTH = "1month"
    NOT_LOOKING = "not-looking"


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    FREELANCE = "freelance"


class JobStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"
    DRAFT = "draft"


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"
    ACCEPTED = "accepted"
