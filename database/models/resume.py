from sqlalchemy import Column, Integer, Text, DateTime, func

from .base import Base


class CandidateResume(Base):
    """
    An uploaded resume: its decoded text plus the fields derived from it.

    raw_text is written once at upload; the derived columns are written by
    each extraction pass and overwritten by re-parsing.
    """
    __tablename__ = 'candidate_resume'

    id = Column(Integer, primary_key=True, autoincrement=True)

    candidate_name = Column(Text)
    file_name = Column(Text)
    raw_text = Column(Text)
    uploaded_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # === Derived fields ===
    parsed_skills = Column(Text)  # CSV, sorted
    experience_years = Column(Integer)
    education_level = Column(Text)
    education_field = Column(Text)
    projects_summary = Column(Text)
    parsed_at = Column(DateTime(timezone=True))
