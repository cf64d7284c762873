"""Matcher Module - Equivalence-aware skill matching."""
from core.matcher.models import SkillMatchResult
from core.matcher.skill_matcher import SkillMatcher

__all__ = ['SkillMatcher', 'SkillMatchResult']
