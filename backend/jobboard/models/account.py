from sqlalchemy import Column, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Text, primary_key=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    country = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    jobseeker_profile = relationship("JobSeekerProfile", back_populates="account", uselist=False)
    employer_profile = relationship("EmployerProfile", back_populates="account", uselist=False)
    jobs = relationship("Job", back_populates="employer")
