from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class JobSeekerProfile(Base):
    __tablename__ = "jobseeker_profiles"

    id = Column(Text, primary_key=True)
    account_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, unique=True)
    phone = Column(Text)
    location = Column(Text, nullable=False)
    bio = Column(Text)
    photo = Column(Text)  # URL or data URI
    desired_job_title = Column(Text)
    desired_salary = Column(Integer)
    currency = Column(Text, nullable=False, default="USD")
    availability = Column(Text, nullable=False, default="immediate")
    resume = Column(Text)
    linked_in = Column(Text)
    github = Column(Text)
    website = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    account = relationship("Account", back_populates="jobseeker_profile")
    skills = relationship(
        "ProfileSkill", order_by="ProfileSkill.position", cascade="all, delete-orphan"
    )
    experience = relationship(
        "Experience", order_by="Experience.position", cascade="all, delete-orphan"
    )
    education = relationship(
        "Education", order_by="Education.position", cascade="all, delete-orphan"
    )
    portfolio = relationship(
        "PortfolioItem", order_by="PortfolioItem.position", cascade="all, delete-orphan"
    )


class ProfileSkill(Base):
    __tablename__ = "profile_skills"

    id = Column(Text, primary_key=True)
    profile_id = Column(Text, ForeignKey("jobseeker_profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    name = Column(Text, nullable=False)


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(Text, primary_key=True)
    profile_id = Column(Text, ForeignKey("jobseeker_profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text)
    start_date = Column(Text, nullable=False)
    end_date = Column(Text)
    current = Column(Boolean, nullable=False, default=False)
    description = Column(Text)


class Education(Base):
    __tablename__ = "educations"

    id = Column(Text, primary_key=True)
    profile_id = Column(Text, ForeignKey("jobseeker_profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    degree = Column(Text, nullable=False)
    institution = Column(Text, nullable=False)
    location = Column(Text)
    start_date = Column(Text, nullable=False)
    end_date = Column(Text)
    current = Column(Boolean, nullable=False, default=False)


class PortfolioItem(Base):
    __tablename__ = "portfolio_items"

    id = Column(Text, primary_key=True)
    profile_id = Column(Text, ForeignKey("jobseeker_profiles.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text)
    url = Column(Text, nullable=False)
    image = Column(Text)


class EmployerProfile(Base):
    __tablename__ = "employer_profiles"

    id = Column(Text, primary_key=True)
    account_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, unique=True)
    company_name = Column(Text, nullable=False, default="")
    company_website = Column(Text)
    company_size = Column(Text)
    industry = Column(Text)
    location = Column(Text, nullable=False)
    description = Column(Text)
    logo = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    account = relationship("Account", back_populates="employer_profile")
