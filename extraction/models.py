#!/usr/bin/env python3
"""
Extraction Models - Structured fields derived from one resume text.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from core.text import join_skills


@dataclass(frozen=True)
class ExtractedFields:
    """Output of one extraction pass. Absent signals stay None, never zero."""
    skills: List[str] = field(default_factory=list)
    experience_years: Optional[int] = None
    education_level: Optional[str] = None
    education_field: Optional[str] = None
    projects_summary: Optional[str] = None

    @property
    def skills_csv(self) -> str:
        """Comma-joined sorted skills, as stored in the resume table."""
        return join_skills(self.skills)

    @property
    def is_empty(self) -> bool:
        return not self.skills and all(
            value is None for value in (
                self.experience_years, self.education_level,
                self.education_field, self.projects_summary,
            )
        )
