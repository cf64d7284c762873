#!/usr/bin/env python3
"""
Scoring Service - Component scores and weighted final score for one pair.

Scoring is a pure function of (profile, requirement, weights): no I/O and
no shared mutable state, so one service instance can score any number of
candidates concurrently.

Usage:
    service = ScoringService(config.scoring)
    record = service.score(profile, requirement)
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from core.config_loader import ScoringConfig, ScoringWeights
from core.matcher import SkillMatcher, SkillMatchResult
from core.models import CandidateProfile, JobRequirement, ScoreRecord
from core.scorer.aggregator import calculate_final_score
from core.scorer.education import calculate_education_score
from core.scorer.experience import calculate_experience_score
from core.scorer.models import ComponentScores
from core.scorer.project import calculate_project_score

logger = logging.getLogger(__name__)


class ScoringService:
    """Scores candidate profiles against a job requirement."""

    def __init__(self, config: Optional[ScoringConfig] = None, matcher: Optional[SkillMatcher] = None):
        self.config = config or ScoringConfig()
        self.matcher = matcher or SkillMatcher()

    @property
    def weights(self) -> ScoringWeights:
        return self.config.weights

    def match_skills(self, profile: CandidateProfile, requirement: JobRequirement) -> SkillMatchResult:
        return self.matcher.match(profile.skills, requirement.required_skills)

    def compute_component_scores(
        self,
        profile: CandidateProfile,
        requirement: JobRequirement
    ) -> ComponentScores:
        """Skill, experience, education and project scores plus matched/missing skills."""
        skill_match = self.match_skills(profile, requirement)

        return ComponentScores(
            skill_score=skill_match.score,
            experience_score=calculate_experience_score(
                profile.experience_years, requirement.min_experience_years
            ),
            education_score=calculate_education_score(
                profile.education_level,
                profile.education_field,
                requirement.required_education_level,
                requirement.required_education_field,
            ),
            project_score=calculate_project_score(profile.projects_summary, requirement.required_skills),
            skill_match=skill_match,
        )

    def final_score(self, components: ComponentScores, weights: Optional[ScoringWeights] = None) -> Decimal:
        return calculate_final_score(
            components.skill_score,
            components.experience_score,
            components.education_score,
            components.project_score,
            weights or self.weights,
        )

    def compute_final_score(
        self,
        profile: CandidateProfile,
        requirement: JobRequirement,
        weights: Optional[ScoringWeights] = None
    ) -> Decimal:
        """Weighted final score; weights default to the configured ones."""
        return self.final_score(self.compute_component_scores(profile, requirement), weights)

    def score(self, profile: CandidateProfile, requirement: JobRequirement) -> ScoreRecord:
        """Build a complete ScoreRecord for one (job, candidate) pair."""
        components = self.compute_component_scores(profile, requirement)
        final = self.final_score(components)

        logger.debug(
            f"Job {requirement.id} / candidate {profile.id}: skill={components.skill_score} "
            f"experience={components.experience_score} education={components.education_score} "
            f"project={components.project_score} final={final}"
        )

        return ScoreRecord(
            job_id=requirement.id,
            candidate_id=profile.id,
            skill_score=components.skill_score,
            experience_score=components.experience_score,
            education_score=components.education_score,
            project_score=components.project_score,
            final_score=final,
            computed_at=datetime.now(timezone.utc),
        )
