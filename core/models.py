#!/usr/bin/env python3
"""
Domain Models - Requirement, profile and score record.

JobRequirement and CandidateProfile are validated at construction, so
malformed input (negative years, non-integer ids) is rejected before it
reaches any scorer.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.text import parse_skill_list


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class JobRequirement(BaseModel):
    """Job-side record. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str = ""
    required_skills: Tuple[str, ...] = ()
    preferred_skills: Tuple[str, ...] = ()  # advisory only, never scored
    min_experience_years: Optional[int] = Field(default=None, ge=0)
    required_education_level: Optional[str] = None
    required_education_field: Optional[str] = None
    job_type: Optional[str] = None

    @field_validator('required_skills', 'preferred_skills', mode='before')
    @classmethod
    def _dedupe_skills(cls, value):
        return tuple(parse_skill_list(value))

    @field_validator('required_education_level', 'required_education_field', 'job_type', mode='before')
    @classmethod
    def _strip_labels(cls, value):
        return _blank_to_none(value)


class CandidateProfile(BaseModel):
    """Candidate-side record.

    raw_text is set by the upload collaborator; the remaining fields are
    populated only by the extraction pass and may be overwritten by a later
    re-extraction.
    """
    id: int
    display_name: Optional[str] = None
    file_name: Optional[str] = None
    raw_text: Optional[str] = None

    skills: Tuple[str, ...] = ()
    experience_years: Optional[int] = Field(default=None, ge=0)
    education_level: Optional[str] = None
    education_field: Optional[str] = None
    projects_summary: Optional[str] = None
    parsed_at: Optional[datetime] = None

    @field_validator('skills', mode='before')
    @classmethod
    def _dedupe_skills(cls, value):
        return tuple(parse_skill_list(value))

    @field_validator('education_level', 'education_field', 'projects_summary', mode='before')
    @classmethod
    def _strip_optional_text(cls, value):
        return _blank_to_none(value)


@dataclass(frozen=True)
class ScoreRecord:
    """Scores for one (job, candidate) pair.

    final_score is always the weighted, clamped sum of the four components;
    build records through ScoringService rather than by hand.
    """
    job_id: int
    candidate_id: int
    skill_score: Decimal
    experience_score: Decimal
    education_score: Decimal
    project_score: Decimal
    final_score: Decimal
    computed_at: datetime
