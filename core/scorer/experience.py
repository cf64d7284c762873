#!/usr/bin/env python3
"""
Experience Score - Candidate years against the required minimum.

Meeting the minimum scores 100 however far it is exceeded. Below it the
score scales with the ratio, with a steeper penalty the larger the gap.
"""
from decimal import Decimal
from typing import Optional

from core.utils import to_score


def calculate_experience_score(candidate_years: Optional[int], required_years: Optional[int]) -> Decimal:
    """
    Args:
        candidate_years: Extracted years of experience; None means unknown
        required_years: Requirement's minimum; None or <= 0 means no minimum

    Returns:
        Score in [0, 100] with two decimal places
    """
    if candidate_years is None:
        return to_score(0)

    if required_years is None or required_years <= 0:
        return to_score(100)

    if candidate_years >= required_years:
        return to_score(100)

    ratio = Decimal(candidate_years) / Decimal(required_years)
    if ratio < Decimal("0.5"):
        score = ratio * 60
    elif ratio < Decimal("0.75"):
        score = ratio * 80
    else:
        score = ratio * 90

    return to_score(score)
