#!/usr/bin/env python3
"""
Project Extractor - Projects excerpt and project-count estimate.

The excerpt comes from a projects-like section; without one, sentences of
the experience section that mention "project" are used instead.
"""
import logging
import re
from typing import Optional

from extraction.sections import EXPERIENCE, PROJECTS, find_section

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_MAX_CHARS = 1000
TRUNCATION_MARKER = "..."
MAX_COUNTED_PROJECTS = 10
CHARS_PER_ESTIMATED_PROJECT = 200

_PROJECT_KEYWORDS = (
    "project", "projects", "personal project", "side project", "academic project",
    "portfolio", "work project", "development project", "software project",
)
_SENTENCE_SPLIT = re.compile(r'[.!?]')
_ENTRY_LINE = re.compile(r'^\s*(?:\d+[.)]|[-*•·]|project\s+\d+\s*:?)\s+', re.MULTILINE)
_PROJECT_HEADER_LINE = re.compile(r'^\s*project\s*:', re.MULTILINE)


def projects_from_experience(text: str) -> Optional[str]:
    """Experience-section sentences that mention a project, or None."""
    experience = find_section(text, EXPERIENCE)
    if not experience:
        return None

    if not any(keyword in experience for keyword in _PROJECT_KEYWORDS):
        return None

    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(experience) if "project" in s]
    sentences = [s for s in sentences if s]
    if not sentences:
        return None
    return ". ".join(sentences) + "."


def extract_projects_section(text: str) -> Optional[str]:
    """Raw projects text: the projects section, else the experience fallback."""
    if not text:
        return None

    section = find_section(text, PROJECTS)
    if section:
        return section
    return projects_from_experience(text)


def extract_projects_summary(text: str, max_chars: int = DEFAULT_SUMMARY_MAX_CHARS) -> Optional[str]:
    """
    Bounded projects excerpt.

    Args:
        text: Normalized resume text
        max_chars: Excerpt length limit; longer excerpts are cut and marked
            with a trailing "..."

    Returns:
        The excerpt, or None if the resume has no project information.
    """
    section = extract_projects_section(text)
    if not section or not section.strip():
        return None

    summary = section.strip()
    if len(summary) > max_chars:
        summary = summary[:max_chars] + TRUNCATION_MARKER
    return summary


def count_project_entries(projects_text: Optional[str]) -> int:
    """
    Estimate the number of projects described in a projects excerpt.

    Numbered or bulleted lines and "project n" lines are counted first; then
    "project:" header lines; otherwise the count is estimated from length.
    Non-empty text always counts as at least one project. Capped at 10.
    """
    if not projects_text or not projects_text.strip():
        return 0

    count = len(_ENTRY_LINE.findall(projects_text))
    if count == 0:
        count = len(_PROJECT_HEADER_LINE.findall(projects_text))
    if count == 0:
        count = len(projects_text.strip()) // CHARS_PER_ESTIMATED_PROJECT

    return min(MAX_COUNTED_PROJECTS, max(1, count))
