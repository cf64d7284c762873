#!/usr/bin/env python3
"""
Skill Extractor - Recognize vocabulary skills in normalized resume text.

Two passes, unioned:
1. Skills sections: split on list delimiters, keep tokens that are a
   vocabulary entry or a versioned form of one ("java 8" -> "java").
2. Whole text: every vocabulary entry found with word-boundary matching.
   Entries containing symbols ("c++", "node.js") fall back to plain
   substring containment.

Only vocabulary hits are ever returned.
"""
import logging
import re
from functools import lru_cache
from typing import List, Set

from core.text import normalize_skill
from core.vocabulary import EXTRACTION_SYNONYMS, TECHNICAL_SKILLS
from extraction.sections import SKILLS, find_all_sections

logger = logging.getLogger(__name__)

_TOKEN_DELIMITERS = re.compile(r'[,;|•·\n/]')
_ALPHANUMERIC_ONLY = re.compile(r'^[a-z0-9 ]+$')

# Iterated in a fixed order so versioned-token resolution is deterministic.
_SORTED_SKILLS = tuple(sorted(TECHNICAL_SKILLS))


@lru_cache(maxsize=None)
def _boundary_pattern(skill: str) -> re.Pattern:
    return re.compile(r'\b' + re.escape(skill) + r'\b')


def canonical_skill(token: str) -> str:
    """Apply the extraction synonym table to one normalized token."""
    return EXTRACTION_SYNONYMS.get(token, token)


def contains_skill(text: str, skill: str) -> bool:
    """Word-boundary containment; plain containment for symbol-bearing skills."""
    if skill not in text:
        return False
    if not _ALPHANUMERIC_ONLY.match(skill):
        return True
    return _boundary_pattern(skill).search(text) is not None


def extract_section_skills(text: str) -> Set[str]:
    """Vocabulary skills listed inside skills-like sections."""
    found: Set[str] = set()

    for content in find_all_sections(text, SKILLS):
        for token in _TOKEN_DELIMITERS.split(content):
            clean = canonical_skill(normalize_skill(token))
            if not clean:
                continue

            if clean in TECHNICAL_SKILLS:
                found.add(clean)
                continue

            for tech in _SORTED_SKILLS:
                if clean.startswith(tech + ' '):
                    found.add(tech)

    return found


def scan_text_skills(text: str) -> Set[str]:
    """Vocabulary skills appearing anywhere in the text."""
    return {skill for skill in TECHNICAL_SKILLS if contains_skill(text, skill)}


def extract_skills(text: str) -> List[str]:
    """
    Extract recognized skills from normalized text.

    Args:
        text: Output of core.text.normalize_text

    Returns:
        Sorted list of canonical skill tokens; empty when none are found.
    """
    if not text:
        return []

    section_skills = extract_section_skills(text)
    text_skills = scan_text_skills(text)
    skills = sorted({canonical_skill(s) for s in section_skills | text_skills})

    logger.debug(f"Skills: {len(section_skills)} from sections, {len(text_skills)} from full text, "
                 f"{len(skills)} after synonym merge")
    return skills
