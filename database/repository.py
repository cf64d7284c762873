import logging

from sqlalchemy.orm import Session

from database.repositories import JobPostRepository, ResumeRepository, ScoreRepository

logger = logging.getLogger(__name__)


class ScreeningRepository:
    """Groups the per-table repositories over one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobPostRepository(db)
        self.resumes = ResumeRepository(db)
        self.scores = ScoreRepository(db)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
