#!/usr/bin/env python3
"""
Profile Extraction Service - Turn raw resume text into profile fields.

Extraction is a pure function of the text: the same input always yields the
same fields, so re-parsing a resume simply overwrites the previous result.

Usage:
    service = ProfileExtractionService()
    fields = service.extract_structured_fields(raw_text)

    with screening_uow() as repo:
        service.parse_candidate(repo, candidate_id)
"""
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from core.config_loader import ExtractionConfig
from core.exceptions import PreconditionNotMetError
from core.models import CandidateProfile
from core.text import normalize_text
from extraction.education import extract_education_field, extract_education_level
from extraction.models import ExtractedFields
from extraction.projects import extract_projects_summary
from extraction.skills import extract_skills
from extraction.years_extractor import YearsExtractor

if TYPE_CHECKING:
    from database.repository import ScreeningRepository

logger = logging.getLogger(__name__)


class ProfileExtractionService:
    """Runs the four extractors over one resume text."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        years_extractor: Optional[YearsExtractor] = None,
    ):
        self.config = config or ExtractionConfig()
        self.years_extractor = years_extractor or YearsExtractor()

    def extract_structured_fields(self, raw_text: Optional[str]) -> ExtractedFields:
        """
        Extract skills, experience years, education level/field and a
        projects summary.

        Absent or blank input is not an error: every field comes back absent.
        """
        text = normalize_text(raw_text)
        if not text:
            return ExtractedFields()

        fields = ExtractedFields(
            skills=extract_skills(text),
            experience_years=self.years_extractor.extract(text),
            education_level=extract_education_level(text),
            education_field=extract_education_field(text),
            projects_summary=extract_projects_summary(text, self.config.projects_summary_max_chars),
        )
        logger.debug(
            f"Extracted {len(fields.skills)} skills, experience={fields.experience_years}, "
            f"education={fields.education_level}/{fields.education_field}, "
            f"projects={'yes' if fields.projects_summary else 'no'}"
        )
        return fields

    def apply_to_profile(self, profile: CandidateProfile) -> CandidateProfile:
        """
        Return a copy of profile with its derived fields replaced by a fresh
        extraction of its raw text.

        Raises:
            PreconditionNotMetError: If the profile has no raw text yet
        """
        if not profile.raw_text or not profile.raw_text.strip():
            raise PreconditionNotMetError(f"Candidate {profile.id} has no resume text to extract from")

        fields = self.extract_structured_fields(profile.raw_text)
        return profile.model_copy(update={
            'skills': tuple(fields.skills),
            'experience_years': fields.experience_years,
            'education_level': fields.education_level,
            'education_field': fields.education_field,
            'projects_summary': fields.projects_summary,
            'parsed_at': datetime.now(timezone.utc),
        })

    def parse_candidate(self, repo: 'ScreeningRepository', candidate_id: int) -> ExtractedFields:
        """Extract a stored resume and write the derived fields back.

        Args:
            repo: ScreeningRepository instance (provided by UoW)
            candidate_id: Stored resume id

        Raises:
            CandidateNotFoundException: If no such resume exists
            PreconditionNotMetError: If the stored resume has no text
        """
        resume = repo.resumes.get_by_id(candidate_id)
        if not resume.raw_text or not resume.raw_text.strip():
            raise PreconditionNotMetError(f"Candidate {candidate_id} has no resume text to extract from")

        fields = self.extract_structured_fields(resume.raw_text)
        repo.resumes.save_extracted_fields(resume, fields, parsed_at=datetime.now(timezone.utc))
        logger.info(f"Parsed candidate {candidate_id}: {len(fields.skills)} skills, "
                    f"{fields.experience_years} years")
        return fields
