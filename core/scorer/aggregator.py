#!/usr/bin/env python3
"""
Final Score - Weighted sum of the four component scores.

final = skill * w.skill + experience * w.experience + education * w.education + project * w.project

Computed in Decimal, clamped to [0, 100], rounded half-up to two places.
"""
from decimal import Decimal

from core.config_loader import ScoringWeights
from core.utils import to_decimal, to_score


def calculate_final_score(
    skill_score: Decimal,
    experience_score: Decimal,
    education_score: Decimal,
    project_score: Decimal,
    weights: ScoringWeights,
) -> Decimal:
    total = (
        to_decimal(skill_score) * to_decimal(weights.skill)
        + to_decimal(experience_score) * to_decimal(weights.experience)
        + to_decimal(education_score) * to_decimal(weights.education)
        + to_decimal(project_score) * to_decimal(weights.project)
    )
    return to_score(total)
