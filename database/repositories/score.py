import logging
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError

from core.exceptions import ScoreRecordConflictError
from core.models import ScoreRecord
from core.ranking.store import ScoreRecordStore
from database.models import ResumeScore
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_score_record(row: ResumeScore) -> ScoreRecord:
    return ScoreRecord(
        job_id=row.job_post_id,
        candidate_id=row.candidate_resume_id,
        skill_score=row.skill_score,
        experience_score=row.experience_score,
        education_score=row.education_score,
        project_score=row.project_score,
        final_score=row.final_score,
        computed_at=row.computed_at,
    )


class ScoreRepository(BaseRepository, ScoreRecordStore):
    """SQL-backed score record store.

    Each insert runs in a savepoint and is flushed immediately, so a
    duplicate write for the same (job, resume) pair surfaces here as a
    unique-constraint violation, translated to ScoreRecordConflictError.
    Only the savepoint is rolled back; the caller's unit of work keeps its
    other pending changes and owns the commit.
    """

    def _get_row(self, job_id: int, candidate_id: int) -> Optional[ResumeScore]:
        stmt = select(ResumeScore).where(
            ResumeScore.job_post_id == job_id,
            ResumeScore.candidate_resume_id == candidate_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get(self, job_id: int, candidate_id: int) -> Optional[ScoreRecord]:
        row = self._get_row(job_id, candidate_id)
        return to_score_record(row) if row is not None else None

    def list_for_job(self, job_id: int) -> List[ScoreRecord]:
        stmt = select(ResumeScore).where(
            ResumeScore.job_post_id == job_id
        ).order_by(ResumeScore.final_score.desc(), ResumeScore.candidate_resume_id)
        return [to_score_record(row) for row in self.db.execute(stmt).scalars().all()]

    def save(self, record: ScoreRecord) -> ScoreRecord:
        row = ResumeScore(
            job_post_id=record.job_id,
            candidate_resume_id=record.candidate_id,
            skill_score=record.skill_score,
            experience_score=record.experience_score,
            education_score=record.education_score,
            project_score=record.project_score,
            final_score=record.final_score,
            computed_at=record.computed_at,
        )
        try:
            with self.db.begin_nested():
                self.db.add(row)
                self.db.flush()
        except IntegrityError as e:
            raise ScoreRecordConflictError(record.job_id, record.candidate_id) from e

        logger.debug(f"Saved score record job={record.job_id} candidate={record.candidate_id}")
        return record

    def delete_for_job(self, job_id: int) -> int:
        result = self.db.execute(
            delete(ResumeScore).where(ResumeScore.job_post_id == job_id)
        )
        logger.info(f"Deleted {result.rowcount} score records for job {job_id}")
        return result.rowcount
