from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(Text, primary_key=True)
    job_id = Column(Text, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    job_seeker_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    # Copied from the job's owner at creation and never changed afterwards.
    employer_id = Column(Text, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)
    cover_letter = Column(Text, nullable=False)
    resume = Column(Text)
    status = Column(Text, nullable=False, default="pending")
    notes = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    job = relationship("Job", back_populates="received_applications")
    job_seeker = relationship("Account", foreign_keys=[job_seeker_id])
    employer = relationship("Account", foreign_keys=[employer_id])
