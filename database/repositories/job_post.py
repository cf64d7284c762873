import logging
from typing import List, Optional

from sqlalchemy import select

from core.exceptions import JobNotFoundException
from core.models import JobRequirement
from core.text import join_skills, parse_skill_list
from database.models import JobPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_job_requirement(job_post: JobPost) -> JobRequirement:
    return JobRequirement(
        id=job_post.id,
        title=job_post.title,
        description=job_post.description or '',
        required_skills=parse_skill_list(job_post.required_skills),
        preferred_skills=parse_skill_list(job_post.preferred_skills),
        min_experience_years=job_post.min_experience_years,
        required_education_level=job_post.required_education_level,
        required_education_field=job_post.required_education_field,
        job_type=job_post.job_type,
    )


class JobPostRepository(BaseRepository):
    def get_by_id(self, job_post_id: int) -> JobPost:
        job_post = self.db.get(JobPost, job_post_id)
        if job_post is None:
            raise JobNotFoundException(f"Job {job_post_id} not found")
        return job_post

    def get_requirement(self, job_post_id: int) -> JobRequirement:
        return to_job_requirement(self.get_by_id(job_post_id))

    def list_all(self) -> List[JobPost]:
        stmt = select(JobPost).order_by(JobPost.id)
        return list(self.db.execute(stmt).scalars().all())

    def create_job_post(
        self,
        title: str,
        description: str = '',
        required_skills: Optional[List[str]] = None,
        preferred_skills: Optional[List[str]] = None,
        min_experience_years: Optional[int] = None,
        required_education_level: Optional[str] = None,
        required_education_field: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> JobPost:
        """Store a new job. Skill lists are normalized and deduplicated first.

        Raises:
            ValueError: If min_experience_years is negative
        """
        if min_experience_years is not None and min_experience_years < 0:
            raise ValueError("min_experience_years must be non-negative")

        job_post = JobPost(
            title=title,
            description=description or '',
            required_skills=join_skills(parse_skill_list(required_skills)),
            preferred_skills=join_skills(parse_skill_list(preferred_skills)),
            min_experience_years=min_experience_years,
            required_education_level=required_education_level,
            required_education_field=required_education_field,
            job_type=job_type,
        )
        self.db.add(job_post)
        self.db.flush()  # Generate ID
        logger.info(f"Created job {job_post.id}: {title}")
        return job_post
