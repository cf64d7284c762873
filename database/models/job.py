from sqlalchemy import Column, Integer, Text, DateTime, func

from .base import Base


class JobPost(Base):
    """
    A job opening candidates are screened against.

    Skill lists are stored as comma-joined normalized tokens.
    """
    __tablename__ = 'job_post'

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')

    # === Requirements ===
    required_skills = Column(Text, nullable=False, default='')  # CSV
    preferred_skills = Column(Text, nullable=False, default='')  # CSV, advisory only
    min_experience_years = Column(Integer)
    required_education_level = Column(Text)
    required_education_field = Column(Text)
    job_type = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
