#!/usr/bin/env python3
"""
Ranking Service - Score every candidate for a job and rank them.

Each (job, candidate) pair moves Unscored -> Scored once: the first ranking
request computes and stores its ScoreRecord, later requests reuse it.
recalculate_rankings() deletes every record for the job first, returning all
pairs to Unscored.

Per request:
1. look up existing records (a failed lookup fails only that candidate)
2. score the remaining candidates in parallel (failures isolated per candidate)
3. store new records; a duplicate-write rejection falls back to the stored record
4. sort and assign ranks once every candidate is done

Usage:
    service = RankingService(ScoringService(config.scoring), config.ranking)
    result = service.rank_candidates(requirement, profiles, store)
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from core.config_loader import RankingConfig
from core.exceptions import ScoreRecordConflictError
from core.matcher import SkillMatchResult
from core.models import CandidateProfile, JobRequirement, ScoreRecord
from core.ranking.models import RankingEntry, RankingFailure, RankingResult
from core.ranking.store import ScoreRecordStore
from core.ranking.tie_break import assign_ranks
from core.scorer import ScoringService

if TYPE_CHECKING:
    from database.repository import ScreeningRepository

logger = logging.getLogger(__name__)


@dataclass
class _Evaluation:
    profile: CandidateProfile
    record: ScoreRecord
    skill_match: SkillMatchResult
    is_new: bool


class RankingService:
    """Ranks candidate profiles against one job requirement."""

    def __init__(self, scoring_service: Optional[ScoringService] = None, config: Optional[RankingConfig] = None):
        self.scoring = scoring_service or ScoringService()
        self.config = config or RankingConfig()

    def rank_candidates(
        self,
        requirement: JobRequirement,
        profiles: Sequence[CandidateProfile],
        store: ScoreRecordStore
    ) -> RankingResult:
        """
        Rank candidates for one job.

        Args:
            requirement: Job being ranked for
            profiles: Candidates to rank; duplicate ids are ranked once
            store: Score record store used for lookup and write-once persistence

        Returns:
            RankingResult with entries in rank order and per-candidate failures
        """
        result = RankingResult(job_id=requirement.id)
        candidates = self._unique_profiles(profiles)

        existing, candidates = self._lookup_existing(requirement, candidates, store, result)

        evaluations = self._evaluate_all(requirement, candidates, existing, result)

        entries: List[RankingEntry] = []
        for evaluation in evaluations:
            record = evaluation.record
            if evaluation.is_new:
                record = self._store_record(store, record, result)
                if record is None:
                    continue
                result.scored_count += 1
            else:
                result.reused_count += 1
            entries.append(self._to_entry(evaluation.profile, record, evaluation.skill_match))

        result.entries = assign_ranks(entries)

        logger.info(
            f"Ranked {len(result.entries)} candidates for job {requirement.id}: "
            f"{result.scored_count} scored, {result.reused_count} reused, {len(result.failures)} failed"
        )
        return result

    def recalculate_rankings(
        self,
        requirement: JobRequirement,
        profiles: Sequence[CandidateProfile],
        store: ScoreRecordStore
    ) -> RankingResult:
        """Invalidate every stored record for the job, then rank from scratch."""
        deleted = store.delete_for_job(requirement.id)
        logger.info(f"Invalidated {deleted} score records for job {requirement.id}")
        return self.rank_candidates(requirement, profiles, store)

    def rank_job(self, repo: 'ScreeningRepository', job_id: int, recalculate: bool = False) -> RankingResult:
        """Rank every stored candidate against a stored job.

        Args:
            repo: ScreeningRepository instance (provided by UoW)
            job_id: Stored job id
            recalculate: Discard existing score records first

        Raises:
            JobNotFoundException: If no such job exists
        """
        requirement = repo.jobs.get_requirement(job_id)
        profiles = repo.resumes.list_profiles()

        if recalculate:
            return self.recalculate_rankings(requirement, profiles, repo.scores)
        return self.rank_candidates(requirement, profiles, repo.scores)

    @staticmethod
    def _unique_profiles(profiles: Sequence[CandidateProfile]) -> List[CandidateProfile]:
        seen = set()
        unique = []
        for profile in profiles:
            if profile.id in seen:
                logger.warning(f"Candidate {profile.id} listed more than once; ranking it once")
                continue
            seen.add(profile.id)
            unique.append(profile)
        return unique

    def _lookup_existing(
        self,
        requirement: JobRequirement,
        candidates: List[CandidateProfile],
        store: ScoreRecordStore,
        result: RankingResult
    ) -> Tuple[Dict[int, ScoreRecord], List[CandidateProfile]]:
        """Stored records by candidate id, plus the candidates whose lookup succeeded."""
        existing: Dict[int, ScoreRecord] = {}
        remaining: List[CandidateProfile] = []

        for profile in candidates:
            try:
                record = store.get(requirement.id, profile.id)
            except Exception as e:
                self._record_failure(result, profile.id, e)
                continue
            if record is not None:
                existing[profile.id] = record
            remaining.append(profile)

        return existing, remaining

    def _evaluate(
        self,
        requirement: JobRequirement,
        profile: CandidateProfile,
        existing: Optional[ScoreRecord]
    ) -> _Evaluation:
        skill_match = self.scoring.match_skills(profile, requirement)
        if existing is not None:
            return _Evaluation(profile=profile, record=existing, skill_match=skill_match, is_new=False)

        record = self.scoring.score(profile, requirement)
        return _Evaluation(profile=profile, record=record, skill_match=skill_match, is_new=True)

    def _evaluate_all(
        self,
        requirement: JobRequirement,
        candidates: List[CandidateProfile],
        existing: Dict[int, ScoreRecord],
        result: RankingResult
    ) -> List[_Evaluation]:
        """Evaluate candidates, in parallel when configured. Order is not preserved."""
        evaluations: List[_Evaluation] = []

        if self.config.max_workers <= 1 or len(candidates) <= 1:
            for profile in candidates:
                try:
                    evaluations.append(self._evaluate(requirement, profile, existing.get(profile.id)))
                except Exception as e:
                    self._record_failure(result, profile.id, e)
            return evaluations

        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            futures = {
                executor.submit(self._evaluate, requirement, profile, existing.get(profile.id)): profile
                for profile in candidates
            }
            for future in as_completed(futures):
                profile = futures[future]
                try:
                    evaluations.append(future.result())
                except Exception as e:
                    self._record_failure(result, profile.id, e)

        return evaluations

    def _store_record(
        self,
        store: ScoreRecordStore,
        record: ScoreRecord,
        result: RankingResult
    ) -> Optional[ScoreRecord]:
        """Write a new record; on a duplicate write, use the record already stored."""
        try:
            return store.save(record)
        except ScoreRecordConflictError:
            logger.warning(
                f"Score record for job {record.job_id}, candidate {record.candidate_id} "
                f"was written concurrently; using the stored record"
            )
            stored = store.get(record.job_id, record.candidate_id)
            if stored is None:
                self._record_failure(
                    result, record.candidate_id,
                    RuntimeError("duplicate write rejected but no stored record found"),
                )
            return stored
        except Exception as e:
            self._record_failure(result, record.candidate_id, e)
            return None

    @staticmethod
    def _record_failure(result: RankingResult, candidate_id: int, error: Exception) -> None:
        logger.warning(f"Failed to score candidate {candidate_id} for job {result.job_id}: {error}")
        result.failures.append(RankingFailure(candidate_id=candidate_id, error=str(error)))

    @staticmethod
    def _to_entry(profile: CandidateProfile, record: ScoreRecord, skill_match: SkillMatchResult) -> RankingEntry:
        return RankingEntry(
            candidate_id=profile.id,
            display_name=profile.display_name,
            file_name=profile.file_name,
            skill_score=record.skill_score,
            experience_score=record.experience_score,
            education_score=record.education_score,
            project_score=record.project_score,
            final_score=record.final_score,
            matched_skills=skill_match.matched,
            missing_skills=skill_match.missing,
        )
