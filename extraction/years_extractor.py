#!/usr/bin/env python3
"""
Years Extractor - Estimate years of experience from resume text.

Every signal found is a candidate value:
- explicit claims ("5 years", "7+ years of experience", "experience: 3 years",
  "4 years in backend development")
- a four-digit year range anywhere in the text ("2019 - 2024")
- the sum of all date ranges inside the experience section, where
  "present"/"current"/"now" resolve to the current year

Candidates outside [0, 50] are discarded. The result is the largest
remaining candidate, or None when there is no signal at all.
"""
import logging
import re
from datetime import datetime
from typing import List, Optional

from extraction.sections import EXPERIENCE, find_all_sections

logger = logging.getLogger(__name__)

MIN_PLAUSIBLE_YEARS = 0
MAX_PLAUSIBLE_YEARS = 50

_CLAIM_PATTERNS = (
    re.compile(r'(\d+)\s*[+-]?\s*(?:years?|yrs?)\b'),
    re.compile(r'(\d+)\s*[+-]?\s*years?\s+(?:of\s+)?experience'),
    re.compile(r'experience[\s:]+(\d+)\s*[+-]?\s*years?'),
    re.compile(r'(\d+)\s*[+-]?\s*years?\s+in\b'),
)
_YEAR_RANGE = re.compile(r'\b(\d{4})\s*[-–]\s*(\d{4})\b')
_SECTION_DATE_RANGE = re.compile(r'\b(\d{4})\s*[-–]\s*(\d{4}|present|current|now)\b')
_OPEN_ENDED = ('present', 'current', 'now')


def _plausible(years: int) -> bool:
    return MIN_PLAUSIBLE_YEARS <= years <= MAX_PLAUSIBLE_YEARS


class YearsExtractor:
    """Extract years of experience using regex heuristics."""

    def __init__(self, current_year: Optional[int] = None):
        """
        Args:
            current_year: Year that open-ended ranges resolve to. Defaults
                to the calendar year at call time.
        """
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year or datetime.now().year

    def extract(self, text: str) -> Optional[int]:
        """
        Extract years of experience from normalized text.

        Returns:
            Largest plausible candidate value, or None if nothing was found.
        """
        if not text or not text.strip():
            return None

        candidates = self.claim_candidates(text)

        section_years = self.experience_section_years(text)
        if section_years is not None:
            candidates.append(section_years)

        if not candidates:
            return None

        years = max(candidates)
        logger.debug(f"Experience candidates {candidates} -> {years}")
        return years

    def claim_candidates(self, text: str) -> List[int]:
        """Plausible values from explicit claims and whole-text year ranges."""
        found: List[int] = []

        for pattern in _CLAIM_PATTERNS:
            for match in pattern.finditer(text):
                years = int(match.group(1))
                if _plausible(years):
                    found.append(years)

        for match in _YEAR_RANGE.finditer(text):
            years = int(match.group(2)) - int(match.group(1))
            if _plausible(years):
                found.append(years)

        return found

    def experience_section_years(self, text: str) -> Optional[int]:
        """
        Sum of all date ranges inside the experience section(s).

        Returns None if no section or no range was found, or if the sum
        falls outside the plausible range.
        """
        durations: List[int] = []

        for content in find_all_sections(text, EXPERIENCE):
            for match in _SECTION_DATE_RANGE.finditer(content):
                start = int(match.group(1))
                end_token = match.group(2)
                end = self.current_year if end_token in _OPEN_ENDED else int(end_token)

                years = end - start
                if _plausible(years):
                    durations.append(years)

        if not durations:
            return None

        total = sum(durations)
        if not _plausible(total):
            logger.debug(f"Discarding implausible experience-section total {total}")
            return None
        return total
