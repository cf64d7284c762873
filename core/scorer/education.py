#!/usr/bin/env python3
"""
Education Score - Degree level against the required level, plus a field bonus.

score = level_score * 0.80 + field_bonus * 0.20, clamped to [0, 100].
"""
import logging
import re
from decimal import Decimal
from typing import Optional

from core.utils import to_score
from core.vocabulary import EDUCATION_HIERARCHY

logger = logging.getLogger(__name__)

LEVEL_WEIGHT = Decimal("0.80")
FIELD_WEIGHT = Decimal("0.20")

EXACT_FIELD_BONUS = 20
CONTAINED_FIELD_BONUS = 15
RELATED_FIELD_BONUS = 10

_COMPUTING_TERMS = ("computer", "software", "information technology")
_COMPUTING_ACRONYMS = re.compile(r'\b(?:cs|it)\b')


def _normalize(value: Optional[str]) -> str:
    return (value or "").lower().strip()


def calculate_level_score(candidate_level: str, required_level: str) -> int:
    """Level component: 100 when the candidate meets the required level.

    Below the required level the score is banded by rank ratio. Labels
    outside the hierarchy fall back to containment (80) or neutral (50).
    """
    candidate = _normalize(candidate_level)
    required = _normalize(required_level)

    candidate_rank = EDUCATION_HIERARCHY.get(candidate)
    required_rank = EDUCATION_HIERARCHY.get(required)

    if candidate_rank is None or required_rank is None:
        if candidate in required or required in candidate:
            return 80
        return 50

    if candidate_rank >= required_rank:
        return 100

    ratio = candidate_rank / required_rank
    if ratio >= 0.8:
        return 70
    if ratio >= 0.6:
        return 50
    return 30


def _is_computing_field(field: str) -> bool:
    return any(term in field for term in _COMPUTING_TERMS) or bool(_COMPUTING_ACRONYMS.search(field))


def are_related_fields(field_a: str, field_b: str) -> bool:
    """Both in the computing cluster, or both some kind of engineering."""
    if _is_computing_field(field_a) and _is_computing_field(field_b):
        return True
    return "engineer" in field_a and "engineer" in field_b


def calculate_field_bonus(candidate_field: Optional[str], required_field: Optional[str]) -> int:
    candidate = _normalize(candidate_field)
    required = _normalize(required_field)

    if not required or not candidate:
        return 0

    if candidate == required:
        return EXACT_FIELD_BONUS
    if candidate in required or required in candidate:
        return CONTAINED_FIELD_BONUS
    if are_related_fields(candidate, required):
        return RELATED_FIELD_BONUS
    return 0


def calculate_education_score(
    candidate_level: Optional[str],
    candidate_field: Optional[str],
    required_level: Optional[str],
    required_field: Optional[str] = None,
) -> Decimal:
    """
    Score a candidate's education against the requirement.

    Args:
        candidate_level: Extracted education level label, or None
        candidate_field: Extracted field of study, or None
        required_level: Requirement's education level, or None
        required_field: Requirement's field of study, or None

    Returns:
        100.00 when no level is required, 0.00 when the candidate has no
        level, otherwise the weighted level/field score.
    """
    if not _normalize(required_level):
        return to_score(100)

    if not _normalize(candidate_level):
        return to_score(0)

    level_score = calculate_level_score(candidate_level, required_level)
    field_bonus = calculate_field_bonus(candidate_field, required_field)

    score = to_score(Decimal(level_score) * LEVEL_WEIGHT + Decimal(field_bonus) * FIELD_WEIGHT)
    logger.debug(f"Education: level={level_score} field_bonus={field_bonus} -> {score}")
    return score
