from sqlalchemy import Column, Integer, DateTime, ForeignKey, Numeric, UniqueConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base


class ResumeScore(Base):
    """
    Stored scores for one (job, resume) pair.

    Written once on first ranking and reused afterwards; the unique
    constraint rejects a second writer for the same pair.
    """
    __tablename__ = 'resume_score'

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_post_id = Column(Integer, ForeignKey('job_post.id', ondelete='CASCADE'), nullable=False)
    candidate_resume_id = Column(Integer, ForeignKey('candidate_resume.id', ondelete='CASCADE'), nullable=False)

    skill_score = Column(Numeric(5, 2), nullable=False)
    experience_score = Column(Numeric(5, 2), nullable=False)
    education_score = Column(Numeric(5, 2), nullable=False)
    project_score = Column(Numeric(5, 2), nullable=False)
    final_score = Column(Numeric(5, 2), nullable=False)

    computed_at = Column(DateTime(timezone=True), nullable=False)

    job_post = relationship("JobPost")
    candidate_resume = relationship("CandidateResume")

    __table_args__ = (
        UniqueConstraint('job_post_id', 'candidate_resume_id', name='uq_resume_score_job_resume'),
        Index('idx_resume_score_job_final', 'job_post_id', 'final_score'),
    )
