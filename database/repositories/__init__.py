from database.repositories.base import BaseRepository
from database.repositories.job_post import JobPostRepository
from database.repositories.resume import ResumeRepository
from database.repositories.score import ScoreRepository

__all__ = [
    'BaseRepository',
    'JobPostRepository',
    'ResumeRepository',
    'ScoreRepository',
]
