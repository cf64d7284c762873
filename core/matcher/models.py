#!/usr/bin/env python3
"""
Matcher Models - Data structures for skill matching.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class SkillMatchResult:
    """Outcome of matching a candidate's skills against a requirement.

    matched and missing partition the required skills and keep their
    requirement order. score is matched / required as a 0-100 percentage.
    """
    matched: Tuple[str, ...]
    missing: Tuple[str, ...]
    score: Decimal

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def required_count(self) -> int:
        return len(self.matched) + len(self.missing)
