#!/usr/bin/env python3
"""
Education Extractor - Highest degree level and field of study.

Both lookups search the education section first and fall back to the whole
text. Level keywords are tried in priority order, so a resume mentioning
both a PhD and a Bachelor's reports PhD regardless of where each appears.
"""
import logging
import re
from functools import lru_cache
from typing import Optional

from core.vocabulary import EDUCATION_FIELDS, EDUCATION_LEVEL_KEYWORDS, MIN_REPORTED_FIELD_LENGTH
from extraction.sections import EDUCATION, find_section

logger = logging.getLogger(__name__)

# Display forms that plain title-casing gets wrong.
_FIELD_DISPLAY = {
    "mba": "MBA",
}


@lru_cache(maxsize=None)
def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(r'\b' + re.escape(keyword) + r'\b')


def _display_field(field: str) -> str:
    return _FIELD_DISPLAY.get(field, field.title())


def find_education_level(text: str) -> Optional[str]:
    """Label of the highest-priority level keyword present in text."""
    for keyword, label in EDUCATION_LEVEL_KEYWORDS:
        if _keyword_pattern(keyword).search(text):
            return label
    return None


def find_education_field(text: str) -> Optional[str]:
    """Display form of the first listed field present in text.

    Short acronyms ("cs", "it") may match but are never reported.
    """
    for field in EDUCATION_FIELDS:
        if len(field) < MIN_REPORTED_FIELD_LENGTH:
            continue
        if _keyword_pattern(field).search(text):
            return _display_field(field)
    return None


def extract_education_level(text: str) -> Optional[str]:
    if not text:
        return None

    section = find_section(text, EDUCATION)
    level = find_education_level(section) if section else None
    if level is None:
        level = find_education_level(text)
    return level


def extract_education_field(text: str) -> Optional[str]:
    if not text:
        return None

    section = find_section(text, EDUCATION)
    field = find_education_field(section) if section else None
    if field is None:
        field = find_education_field(text)
    return field
