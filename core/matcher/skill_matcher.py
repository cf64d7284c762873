#!/usr/bin/env python3
"""
Skill Matcher - Match candidate skills against required skills.

A required skill is matched when any candidate skill is equivalent to it:
1. exact normalized string
2. same synonym group ("node" / "nodejs" / "node.js")
3. token-bounded containment: the shorter skill appears inside the longer
   one delimited by non-alphanumerics or string ends ("spring" in
   "spring boot"; not "sql" in "postgresql", not "java" in "javascript")

The same rule decides both the matched/missing sets and the score.
"""
import logging
import re
from decimal import Decimal
from functools import lru_cache
from typing import Iterable, List, Mapping, FrozenSet, Optional

from core.matcher.models import SkillMatchResult
from core.text import parse_skill_list
from core.utils import to_score
from core.vocabulary import SKILL_EQUIVALENCE

logger = logging.getLogger(__name__)

FULL_MATCH = Decimal("100")


@lru_cache(maxsize=4096)
def _bounded_pattern(skill: str) -> re.Pattern:
    return re.compile(r'(?<![a-z0-9])' + re.escape(skill) + r'(?![a-z0-9])')


class SkillMatcher:
    """Equivalence-aware skill matching over normalized skill tokens."""

    def __init__(self, equivalence: Optional[Mapping[str, FrozenSet[str]]] = None):
        self.equivalence = SKILL_EQUIVALENCE if equivalence is None else equivalence

    def same_group(self, a: str, b: str) -> bool:
        group = self.equivalence.get(a)
        return group is not None and b in group

    @staticmethod
    def contains_token(a: str, b: str) -> bool:
        """True if the strictly shorter skill is a delimited part of the longer."""
        shorter, longer = (a, b) if len(a) < len(b) else (b, a)
        if not shorter or len(shorter) == len(longer):
            return False
        return _bounded_pattern(shorter).search(longer) is not None

    def skills_equivalent(self, candidate_skill: str, required_skill: str) -> bool:
        if candidate_skill == required_skill:
            return True
        if self.same_group(candidate_skill, required_skill):
            return True
        return self.contains_token(candidate_skill, required_skill)

    def is_matched(self, required_skill: str, candidate_skills: Iterable[str]) -> bool:
        return any(self.skills_equivalent(c, required_skill) for c in candidate_skills)

    def match(self, candidate_skills: Iterable[str], required_skills: Iterable[str]) -> SkillMatchResult:
        """
        Match candidate skills against required skills.

        Args:
            candidate_skills: Candidate's skill tokens (any case/spacing)
            required_skills: Requirement's skill tokens (any case/spacing)

        Returns:
            SkillMatchResult. Score is 100 when nothing is required and 0
            when something is required but the candidate lists no skills.
        """
        candidate = parse_skill_list(candidate_skills)
        required = parse_skill_list(required_skills)

        if not required:
            return SkillMatchResult(matched=(), missing=(), score=to_score(FULL_MATCH))

        if not candidate:
            return SkillMatchResult(matched=(), missing=tuple(required), score=to_score(0))

        matched: List[str] = []
        missing: List[str] = []
        for skill in required:
            if self.is_matched(skill, candidate):
                matched.append(skill)
            else:
                missing.append(skill)

        score = to_score(Decimal(len(matched)) * FULL_MATCH / Decimal(len(required)))
        logger.debug(f"Skill match {len(matched)}/{len(required)} -> {score}")
        return SkillMatchResult(matched=tuple(matched), missing=tuple(missing), score=score)
