#!/usr/bin/env python3
"""
Unit tests for RankingService - no database required.
"""
import unittest
from decimal import Decimal
from unittest.mock import MagicMock, patch

from core.config_loader import RankingConfig
from core.exceptions import ScoreRecordConflictError
from core.models import CandidateProfile, JobRequirement
from core.ranking import InMemoryScoreStore, RankingService
from core.scorer import ScoringService
from tests import make_score_record


class TestRankingService(unittest.TestCase):

    def setUp(self):
        self.requirement = JobRequirement(
            id=1,
            title="Backend Engineer",
            required_skills=["java", "sql"],
            min_experience_years=4,
        )
        self.profiles = [
            CandidateProfile(id=10, display_name="Ten", skills=["java", "sql"], experience_years=5),
            CandidateProfile(id=4, display_name="Four", skills=["java", "sql"], experience_years=5),
            CandidateProfile(id=7, display_name="Seven", skills=["java"], experience_years=1),
            CandidateProfile(id=2, display_name="Two", file_name="two.txt"),
        ]
        self.store = InMemoryScoreStore()
        self.service = RankingService(ScoringService(), RankingConfig(max_workers=4))

    def test_ranks_and_orders_candidates(self):
        result = self.service.rank_candidates(self.requirement, self.profiles, self.store)

        self.assertEqual([e.candidate_id for e in result.entries], [4, 10, 7, 2])
        self.assertEqual(result.ranks, [1, 1, 3, 4])
        self.assertEqual(result.failures, [])
        self.assertEqual(result.scored_count, 4)

        top = result.entries[0]
        self.assertEqual(top.display_name, "Four")
        self.assertEqual(top.matched_skills, ("java", "sql"))
        self.assertEqual(top.missing_skills, ())
        self.assertEqual(result.entries[-1].file_name, "two.txt")
        self.assertEqual(result.entries[-1].missing_skills, ("java", "sql"))

    def test_records_are_written_once_and_reused(self):
        self.service.rank_candidates(self.requirement, self.profiles, self.store)
        self.assertEqual(len(self.store.list_for_job(1)), 4)

        scoring = MagicMock(wraps=ScoringService())
        service = RankingService(scoring, RankingConfig(max_workers=1))
        result = service.rank_candidates(self.requirement, self.profiles, self.store)

        scoring.score.assert_not_called()
        self.assertEqual(result.reused_count, 4)
        self.assertEqual(result.scored_count, 0)
        self.assertEqual(result.ranks, [1, 1, 3, 4])

    def test_existing_record_is_not_recomputed(self):
        stored = make_score_record(job_id=1, candidate_id=2, final="99.00")
        self.store.save(stored)

        result = self.service.rank_candidates(self.requirement, self.profiles, self.store)

        self.assertEqual(result.entries[0].candidate_id, 2)
        self.assertEqual(result.entries[0].final_score, Decimal("99.00"))
        self.assertEqual(self.store.get(1, 2), stored)

    def test_recalculate_replaces_records(self):
        self.store.save(make_score_record(job_id=1, candidate_id=2, final="99.00"))
        self.store.save(make_score_record(job_id=2, candidate_id=2, final="99.00"))

        result = self.service.recalculate_rankings(self.requirement, self.profiles, self.store)

        self.assertEqual(result.entries[-1].candidate_id, 2)
        self.assertEqual(self.store.get(1, 2).final_score, Decimal("10.00"))
        # other jobs untouched
        self.assertEqual(self.store.get(2, 2).final_score, Decimal("99.00"))

    def test_failure_isolated_per_candidate(self):
        scoring = ScoringService()
        real_score = scoring.score

        def flaky_score(profile, requirement):
            if profile.id == 7:
                raise RuntimeError("boom")
            return real_score(profile, requirement)

        with patch.object(scoring, "score", side_effect=flaky_score):
            service = RankingService(scoring, RankingConfig(max_workers=3))
            result = service.rank_candidates(self.requirement, self.profiles, self.store)

        self.assertEqual([e.candidate_id for e in result.entries], [4, 10, 2])
        self.assertEqual(len(result.failures), 1)
        self.assertEqual(result.failures[0].candidate_id, 7)
        self.assertIn("boom", result.failures[0].error)
        self.assertIsNone(self.store.get(1, 7))

    def test_lookup_failure_isolated_per_candidate(self):
        store = MagicMock(wraps=InMemoryScoreStore())

        def get(job_id, candidate_id):
            if candidate_id == 7:
                raise RuntimeError("lookup failed")
            return None

        store.get.side_effect = get

        result = self.service.rank_candidates(self.requirement, self.profiles, store)

        self.assertEqual([e.candidate_id for e in result.entries], [4, 10, 2])
        self.assertEqual([f.candidate_id for f in result.failures], [7])
        self.assertIn("lookup failed", result.failures[0].error)
        saved_ids = {call.args[0].candidate_id for call in store.save.call_args_list}
        self.assertEqual(saved_ids, {4, 10, 2})

    def test_duplicate_write_falls_back_to_stored_record(self):
        concurrent = make_score_record(job_id=1, candidate_id=4, final="42.00")
        store = MagicMock(wraps=InMemoryScoreStore())
        lookups = {"count": 0}

        def get(job_id, candidate_id):
            if candidate_id == 4:
                lookups["count"] += 1
                # Unscored at lookup time; written by another request before our save
                return None if lookups["count"] == 1 else concurrent
            return None

        def save(record):
            if record.candidate_id == 4:
                raise ScoreRecordConflictError(record.job_id, record.candidate_id)
            return record

        store.get.side_effect = get
        store.save.side_effect = save

        result = self.service.rank_candidates(self.requirement, self.profiles, store)

        entry = next(e for e in result.entries if e.candidate_id == 4)
        self.assertEqual(entry.final_score, Decimal("42.00"))
        self.assertEqual(result.failures, [])
        self.assertEqual(len(result.entries), 4)

    def test_duplicate_profiles_ranked_once(self):
        profiles = self.profiles + [self.profiles[0]]
        result = self.service.rank_candidates(self.requirement, profiles, self.store)
        self.assertEqual(len(result.entries), 4)

    def test_sequential_and_parallel_agree(self):
        parallel = self.service.rank_candidates(self.requirement, self.profiles, InMemoryScoreStore())
        sequential = RankingService(ScoringService(), RankingConfig(max_workers=1)).rank_candidates(
            self.requirement, self.profiles, InMemoryScoreStore()
        )
        self.assertEqual(
            [(e.candidate_id, e.rank, e.final_score) for e in parallel.entries],
            [(e.candidate_id, e.rank, e.final_score) for e in sequential.entries],
        )

    def test_no_candidates(self):
        result = self.service.rank_candidates(self.requirement, [], self.store)
        self.assertEqual(result.entries, [])
        self.assertEqual(result.failures, [])


class TestInMemoryScoreStore(unittest.TestCase):

    def test_duplicate_save_rejected(self):
        store = InMemoryScoreStore()
        store.save(make_score_record(job_id=1, candidate_id=1))
        with self.assertRaises(ScoreRecordConflictError):
            store.save(make_score_record(job_id=1, candidate_id=1, final="10.00"))
        self.assertEqual(store.get(1, 1).final_score, Decimal("50.00"))

    def test_delete_for_job(self):
        store = InMemoryScoreStore()
        store.save(make_score_record(job_id=1, candidate_id=1))
        store.save(make_score_record(job_id=1, candidate_id=2))
        store.save(make_score_record(job_id=2, candidate_id=1))

        self.assertEqual(store.delete_for_job(1), 2)
        self.assertEqual(store.list_for_job(1), [])
        self.assertEqual(len(store.list_for_job(2)), 1)


if __name__ == "__main__":
    unittest.main()
