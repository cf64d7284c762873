#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from core.matcher import SkillMatchResult


@dataclass(frozen=True)
class ComponentScores:
    """The four component scores for one (job, candidate) pair.

    matched_skills / missing_skills are the by-product of the skill pass.
    """
    skill_score: Decimal
    experience_score: Decimal
    education_score: Decimal
    project_score: Decimal
    skill_match: SkillMatchResult

    @property
    def matched_skills(self) -> Tuple[str, ...]:
        return self.skill_match.matched

    @property
    def missing_skills(self) -> Tuple[str, ...]:
        return self.skill_match.missing
