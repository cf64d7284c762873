"""Ranking Module - Score-record caching, deterministic ordering and tie-grouped ranks."""
from core.ranking.models import RankingEntry, RankingFailure, RankingResult
from core.ranking.service import RankingService
from core.ranking.store import InMemoryScoreStore, ScoreRecordStore
from core.ranking.tie_break import assign_ranks

__all__ = [
    'RankingService',
    'ScoreRecordStore',
    'InMemoryScoreStore',
    'RankingEntry',
    'RankingFailure',
    'RankingResult',
    'assign_ranks',
]
