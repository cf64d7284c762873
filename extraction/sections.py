#!/usr/bin/env python3
"""
Section Detection - Split normalized resume text into headed sections.

Normalized text has no blank lines and no capitalization left, so a section
runs from its header line to the next line that is itself a recognized
header. A header may carry inline content after a separator
("skills: java, python").
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

SKILLS = 'skills'
EXPERIENCE = 'experience'
EDUCATION = 'education'
PROJECTS = 'projects'
OTHER = 'other'

SECTION_HEADERS: Dict[str, Tuple[str, ...]] = {
    SKILLS: (
        'skills', 'technical skills', 'key skills', 'core skills', 'core competencies', 'competencies',
        'technologies', 'tech stack', 'programming languages', 'skills & tools', 'skills and tools',
    ),
    EXPERIENCE: (
        'experience', 'work experience', 'professional experience', 'employment history',
        'work history', 'employment', 'career history',
    ),
    EDUCATION: (
        'education', 'academic background', 'educational background', 'qualifications',
        'academic qualifications', 'education and training',
    ),
    PROJECTS: (
        'projects', 'personal projects', 'side projects', 'academic projects',
        'key projects', 'portfolio', 'project experience',
    ),
    OTHER: (
        'summary', 'professional summary', 'profile', 'objective', 'career objective', 'about me',
        'certifications', 'certificates', 'awards', 'achievements', 'honors', 'interests', 'hobbies',
        'languages', 'references', 'publications', 'volunteer', 'volunteering', 'contact',
        'contact information', 'personal details',
    ),
}

# Longest phrases first so "work experience" wins over "experience".
_HEADER_LOOKUP: Tuple[Tuple[str, str], ...] = tuple(sorted(
    ((phrase, kind) for kind, phrases in SECTION_HEADERS.items() for phrase in phrases),
    key=lambda item: len(item[0]),
    reverse=True,
))

# Leading markdown / bullet decoration on header lines ("## skills", "• education").
_LEADING_DECORATION = re.compile(r'^[\s#*•·\-=_>]+')
# Separator between a header and inline content.
_INLINE_SEPARATOR = re.compile(r'^\s*[:|]\s*|^\s+[-–]\s+')
# List-item bullets; a bulleted line is a header only when it stands alone.
_BULLET_PREFIX = re.compile(r'^\s*[*•·\->]')


@dataclass(frozen=True)
class Section:
    """One headed block of resume text."""
    kind: str
    header: str
    content: str


def match_header(line: str) -> Optional[Tuple[str, str, str]]:
    """
    Check whether a line opens a section.

    Returns:
        (kind, header phrase, inline content) or None. Inline content is ""
        when the header stands on its own line. Bulleted lines never carry
        inline content: "- experience - built a tool" is a list item.
    """
    candidate = _LEADING_DECORATION.sub('', line).strip()
    if not candidate:
        return None
    bulleted = _BULLET_PREFIX.match(line) is not None

    for phrase, kind in _HEADER_LOOKUP:
        if not candidate.startswith(phrase):
            continue

        rest = candidate[len(phrase):]
        if not rest.strip(' :|-–'):
            return kind, phrase, ''

        if bulleted:
            continue

        separator = _INLINE_SEPARATOR.match(rest)
        if separator:
            return kind, phrase, rest[separator.end():].strip()

    return None


def find_sections(text: str) -> List[Section]:
    """Split normalized text into sections in document order."""
    sections: List[Section] = []
    current: Optional[Tuple[str, str]] = None
    body: List[str] = []

    def close():
        if current is not None:
            sections.append(Section(kind=current[0], header=current[1], content='\n'.join(body).strip()))

    for line in text.split('\n'):
        header = match_header(line)
        if header:
            close()
            kind, phrase, inline = header
            current = (kind, phrase)
            body = [inline] if inline else []
        elif current is not None:
            body.append(line)

    close()
    return sections


def find_section(text: str, kind: str) -> Optional[str]:
    """Content of the first non-empty section of the given kind, or None."""
    for section in find_sections(text):
        if section.kind == kind and section.content:
            return section.content
    return None


def find_all_sections(text: str, kind: str) -> List[str]:
    """Content of every non-empty section of the given kind."""
    return [s.content for s in find_sections(text) if s.kind == kind and s.content]
