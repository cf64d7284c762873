"""
Tests for job and resume repositories, plus parse and rank flows through them.
"""
from decimal import Decimal

import pytest

from core.exceptions import CandidateNotFoundException, JobNotFoundException
from core.ranking import RankingService
from extraction import ProfileExtractionService, YearsExtractor


pytestmark = pytest.mark.db


class TestJobPostRepository:

    def test_create_and_get_requirement(self, screening_repo):
        job = screening_repo.jobs.create_job_post(
            title="Java Developer",
            required_skills=["Java", " SQL ", "java"],
            preferred_skills=["Docker"],
            min_experience_years=3,
            required_education_level="Bachelor",
            required_education_field="Computer Science",
        )
        screening_repo.commit()

        assert job.id is not None
        assert job.required_skills == "java,sql"

        requirement = screening_repo.jobs.get_requirement(job.id)
        assert requirement.title == "Java Developer"
        assert requirement.required_skills == ("java", "sql")
        assert requirement.preferred_skills == ("docker",)
        assert requirement.min_experience_years == 3
        assert requirement.required_education_field == "Computer Science"

    def test_negative_years_rejected(self, screening_repo):
        with pytest.raises(ValueError):
            screening_repo.jobs.create_job_post(title="Bad", min_experience_years=-1)

    def test_missing_job(self, screening_repo):
        with pytest.raises(JobNotFoundException):
            screening_repo.jobs.get_by_id(404)

    def test_list_all(self, screening_repo):
        screening_repo.jobs.create_job_post(title="A")
        screening_repo.jobs.create_job_post(title="B")
        assert [j.title for j in screening_repo.jobs.list_all()] == ["A", "B"]


class TestResumeRepository:

    def test_missing_candidate(self, screening_repo):
        with pytest.raises(CandidateNotFoundException):
            screening_repo.resumes.get_by_id(404)

    def test_unparsed_profile(self, screening_repo):
        resume = screening_repo.resumes.create_resume("Java developer", file_name="a.txt", candidate_name="Ann")
        profile = screening_repo.resumes.list_profiles()[0]

        assert profile.id == resume.id
        assert profile.display_name == "Ann"
        assert profile.skills == ()
        assert profile.parsed_at is None

    def test_parse_candidate_stores_fields(self, screening_repo, sample_resume_text):
        resume = screening_repo.resumes.create_resume(sample_resume_text, file_name="jane.txt")
        service = ProfileExtractionService(years_extractor=YearsExtractor(current_year=2025))

        service.parse_candidate(screening_repo, resume.id)
        screening_repo.commit()

        stored = screening_repo.resumes.get_by_id(resume.id)
        assert "java" in stored.parsed_skills.split(",")
        assert stored.experience_years == 6
        assert stored.education_level == "Master"
        assert stored.education_field == "Computer Science"
        assert stored.parsed_at is not None

        # re-parsing overwrites rather than appends
        service.parse_candidate(screening_repo, resume.id)
        screening_repo.commit()
        assert screening_repo.resumes.get_by_id(resume.id).parsed_skills == stored.parsed_skills


class TestRankJob:

    def _seed(self, repo):
        job = repo.jobs.create_job_post(
            title="Java Developer",
            required_skills=["java", "sql"],
            min_experience_years=5,
            required_education_level="Bachelor",
        )
        strong = repo.resumes.create_resume(
            "Skills\nJava, SQL\n6 years of experience\nEducation\nBachelor of Science in Computer Science",
            candidate_name="Strong",
        )
        weak = repo.resumes.create_resume("Skills\nJava, PostgreSQL\n5 years of experience", candidate_name="Weak")
        extraction = ProfileExtractionService(years_extractor=YearsExtractor(current_year=2025))
        extraction.parse_candidate(repo, strong.id)
        extraction.parse_candidate(repo, weak.id)
        repo.commit()
        return job, strong, weak

    def test_rank_job_persists_and_reuses(self, screening_repo):
        job, strong, weak = self._seed(screening_repo)
        service = RankingService()

        first = service.rank_job(screening_repo, job.id)
        assert [e.candidate_id for e in first.entries] == [strong.id, weak.id]
        assert first.ranks == [1, 2]
        assert first.scored_count == 2
        assert first.entries[1].final_score == Decimal("55.00")
        assert len(screening_repo.scores.list_for_job(job.id)) == 2

        second = service.rank_job(screening_repo, job.id)
        assert second.reused_count == 2
        assert second.scored_count == 0
        assert [e.final_score for e in second.entries] == [e.final_score for e in first.entries]

    def test_rank_job_recalculate(self, screening_repo):
        job, _, _ = self._seed(screening_repo)
        service = RankingService()
        service.rank_job(screening_repo, job.id)

        result = service.rank_job(screening_repo, job.id, recalculate=True)
        assert result.scored_count == 2
        assert result.reused_count == 0
        assert len(screening_repo.scores.list_for_job(job.id)) == 2

    def test_rank_unknown_job(self, screening_repo):
        with pytest.raises(JobNotFoundException):
            RankingService().rank_job(screening_repo, 404)
