"""
Text Normalization - shared by every extractor and scorer.

normalize_text() is idempotent: normalize_text(normalize_text(t)) == normalize_text(t).
"""
import re
from typing import Iterable, List, Optional, Union

_HORIZONTAL_WHITESPACE = re.compile(r'[^\S\n]+')
_NEWLINE_RUNS = re.compile(r'[^\S\n]*\n\s*')
_SKILL_SPLIT = re.compile(r',')


def normalize_text(text: Optional[str]) -> str:
    """
    Lowercase text, collapse runs of spaces/tabs to one space and runs of
    newlines (with any surrounding whitespace) to a single newline.

    Total on all inputs: None and "" both return "".
    """
    if not text:
        return ""

    lowered = text.lower().replace('\r\n', '\n').replace('\r', '\n')
    collapsed = _NEWLINE_RUNS.sub('\n', lowered)
    collapsed = _HORIZONTAL_WHITESPACE.sub(' ', collapsed)
    return collapsed.strip()


def normalize_skill(skill: Optional[str]) -> str:
    """Normalize a single skill token for comparison."""
    if skill is None:
        return ""
    return re.sub(r'\s+', ' ', skill.lower().strip())


def parse_skill_list(value: Union[None, str, Iterable[str]]) -> List[str]:
    """
    Parse a comma-separated string (or any iterable of tokens) into an
    ordered list of normalized skills, dropping blanks and case-insensitive
    duplicates. First occurrence wins.
    """
    if value is None:
        return []

    if isinstance(value, str):
        tokens = _SKILL_SPLIT.split(value)
    else:
        tokens = list(value)

    seen = set()
    skills = []
    for token in tokens:
        skill = normalize_skill(str(token))
        if skill and skill not in seen:
            seen.add(skill)
            skills.append(skill)
    return skills


def join_skills(skills: Iterable[str]) -> str:
    """Comma-joined representation used for storage columns."""
    return ",".join(skills)
