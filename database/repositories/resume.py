import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select

from core.exceptions import CandidateNotFoundException
from core.models import CandidateProfile
from core.text import parse_skill_list
from database.models import CandidateResume
from database.repositories.base import BaseRepository
from extraction.models import ExtractedFields

logger = logging.getLogger(__name__)


def to_candidate_profile(resume: CandidateResume) -> CandidateProfile:
    return CandidateProfile(
        id=resume.id,
        display_name=resume.candidate_name,
        file_name=resume.file_name,
        raw_text=resume.raw_text,
        skills=parse_skill_list(resume.parsed_skills),
        experience_years=resume.experience_years,
        education_level=resume.education_level,
        education_field=resume.education_field,
        projects_summary=resume.projects_summary,
        parsed_at=resume.parsed_at,
    )


class ResumeRepository(BaseRepository):
    def get_by_id(self, resume_id: int) -> CandidateResume:
        resume = self.db.get(CandidateResume, resume_id)
        if resume is None:
            raise CandidateNotFoundException(f"Candidate {resume_id} not found")
        return resume

    def list_all(self) -> List[CandidateResume]:
        stmt = select(CandidateResume).order_by(CandidateResume.id)
        return list(self.db.execute(stmt).scalars().all())

    def list_profiles(self) -> List[CandidateProfile]:
        return [to_candidate_profile(resume) for resume in self.list_all()]

    def create_resume(
        self,
        raw_text: str,
        file_name: Optional[str] = None,
        candidate_name: Optional[str] = None
    ) -> CandidateResume:
        resume = CandidateResume(
            raw_text=raw_text,
            file_name=file_name,
            candidate_name=candidate_name,
        )
        self.db.add(resume)
        self.db.flush()  # Generate ID
        logger.info(f"Stored resume {resume.id} ({file_name or 'no file name'})")
        return resume

    def save_extracted_fields(
        self,
        resume: CandidateResume,
        fields: ExtractedFields,
        parsed_at: datetime
    ) -> CandidateResume:
        """Overwrite every derived column with a fresh extraction result."""
        resume.parsed_skills = fields.skills_csv
        resume.experience_years = fields.experience_years
        resume.education_level = fields.education_level
        resume.education_field = fields.education_field
        resume.projects_summary = fields.projects_summary
        resume.parsed_at = parsed_at
        self.db.flush()
        return resume
