from .base import Base
from .job import JobPost
from .resume import CandidateResume
from .score import ResumeScore

__all__ = [
    'Base',
    'JobPost',
    'CandidateResume',
    'ResumeScore',
]
