"""
Tie-break ordering and rank assignment.

Sort order, every key descending except the last:
final score, skill score, experience score, matched-skill count, then
candidate id ascending (the earliest submission wins a full tie).

Ranks are 1-based positions. A candidate shares its predecessor's rank only
when all four score keys are equal, so tied blocks leave gaps (1, 1, 3, 4).
"""
from typing import List, Tuple

from core.ranking.models import RankingEntry


def sort_key(entry: RankingEntry) -> Tuple:
    return (
        -entry.final_score,
        -entry.skill_score,
        -entry.experience_score,
        -entry.matched_count,
        entry.candidate_id,
    )


def _tie_keys(entry: RankingEntry) -> Tuple:
    return entry.final_score, entry.skill_score, entry.experience_score, entry.matched_count


def assign_ranks(entries: List[RankingEntry]) -> List[RankingEntry]:
    """Sort entries into ranking order and set each entry's rank in place."""
    ordered = sorted(entries, key=sort_key)

    previous = None
    for position, entry in enumerate(ordered, start=1):
        if previous is not None and _tie_keys(entry) == _tie_keys(previous):
            entry.rank = previous.rank
        else:
            entry.rank = position
        previous = entry

    return ordered
