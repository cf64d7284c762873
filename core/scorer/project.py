#!/usr/bin/env python3
"""
Project Score - Having projects at all, how many, and which required skills they mention.

score = 50 + min(30, 5 * project_count) + min(20, 5 * required_skills_mentioned)

Skill mentions are plain substring checks against the projects excerpt,
independent of the skill matcher's equivalence rules.
"""
import logging
from decimal import Decimal
from typing import Iterable, Optional

from core.text import normalize_skill
from core.utils import to_score
from extraction.projects import count_project_entries

logger = logging.getLogger(__name__)

BASE_SCORE = 50
POINTS_PER_PROJECT = 5
MAX_PROJECT_POINTS = 30
POINTS_PER_SKILL = 5
MAX_SKILL_POINTS = 20


def count_skill_mentions(projects_summary: str, required_skills: Iterable[str]) -> int:
    text = projects_summary.lower()
    return sum(1 for skill in required_skills if normalize_skill(skill) and normalize_skill(skill) in text)


def calculate_project_score(projects_summary: Optional[str], required_skills: Iterable[str]) -> Decimal:
    if not projects_summary or not projects_summary.strip():
        return to_score(0)

    project_count = count_project_entries(projects_summary)
    mentions = count_skill_mentions(projects_summary, required_skills)

    score = (
        BASE_SCORE
        + min(MAX_PROJECT_POINTS, project_count * POINTS_PER_PROJECT)
        + min(MAX_SKILL_POINTS, mentions * POINTS_PER_SKILL)
    )
    logger.debug(f"Projects: count={project_count} skill_mentions={mentions} -> {score}")
    return to_score(Decimal(score))
