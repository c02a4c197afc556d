from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    employer_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, nullable=False, default=list)
    responsibilities = Column(JSON, nullable=False, default=list)
    job_type = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    remote = Column(Boolean, nullable=False, default=False)
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    salary_currency = Column(Text)
    skills = Column(JSON, nullable=False, default=list)
    experience_level = Column(Text)
    category = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="active")
    views = Column(Integer, nullable=False, default=0)
    applications = Column(Integer, nullable=False, default=0)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    employer = relationship("Account", back_populates="jobs")
    received_applications = relationship(
        "Application", back_populates="job", cascade="all, delete-orphan", passive_deletes=True
    )
