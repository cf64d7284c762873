#!/usr/bin/env python3
"""
Ranking Models - Data structures for ranking results.

Rankings are derived on every request and never persisted.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple


@dataclass
class RankingEntry:
    """One ranked candidate."""
    candidate_id: int
    display_name: Optional[str]
    file_name: Optional[str]
    skill_score: Decimal
    experience_score: Decimal
    education_score: Decimal
    project_score: Decimal
    final_score: Decimal
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    rank: int = 0

    @property
    def matched_count(self) -> int:
        return len(self.matched_skills)


@dataclass(frozen=True)
class RankingFailure:
    """A candidate whose scoring failed; the rest of the batch is unaffected."""
    candidate_id: int
    error: str


@dataclass
class RankingResult:
    """Ordered, ranked entries for one job plus any per-candidate failures."""
    job_id: int
    entries: List[RankingEntry] = field(default_factory=list)
    failures: List[RankingFailure] = field(default_factory=list)
    scored_count: int = 0
    reused_count: int = 0

    @property
    def ranks(self) -> List[int]:
        return [entry.rank for entry in self.entries]
