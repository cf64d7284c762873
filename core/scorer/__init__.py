#!/usr/bin/env python3
"""
Scoring Module - Rule-based component scores and the weighted final score.

Public API:
- ScoringService: Main scoring service orchestrator
- ComponentScores: Dataclass for the four component scores

Split into focused, single-responsibility modules:

- education.py: Degree level and field-of-study score
- experience.py: Years of experience score
- project.py: Projects excerpt score
- aggregator.py: Weighted final score
- models.py: Data structures (ComponentScores)
- service.py: ScoringService orchestrator
"""

from core.scorer.models import ComponentScores
from core.scorer.service import ScoringService

__all__ = ['ScoringService', 'ComponentScores']
