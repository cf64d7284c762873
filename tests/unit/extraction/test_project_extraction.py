"""
Tests for the projects excerpt and project counting.
"""
from core.text import normalize_text
from extraction.projects import count_project_entries, extract_projects_summary


class TestProjectsSummary:

    def test_projects_section(self, sample_resume_text):
        summary = extract_projects_summary(normalize_text(sample_resume_text))
        assert summary == (
            "1. inventory tracker built with java and postgresql\n"
            "2. chat service using python and redis"
        )

    def test_falls_back_to_experience_sentences(self):
        text = normalize_text(
            "Experience\nBackend engineer at Acme. Led the billing project end to end. "
            "Maintained CI. Shipped a data project in Python."
        )
        assert extract_projects_summary(text) == (
            "led the billing project end to end. shipped a data project in python."
        )

    def test_truncated_with_marker(self):
        text = "projects\n" + "x" * 1500
        summary = extract_projects_summary(text)
        assert len(summary) == 1003
        assert summary.endswith("...")

        short = extract_projects_summary(text, max_chars=10)
        assert short == "x" * 10 + "..."

    def test_absent(self):
        assert extract_projects_summary("skills\njava") is None
        assert extract_projects_summary("") is None


class TestProjectCount:

    def test_numbered_and_bulleted(self):
        assert count_project_entries("1. alpha\n2. beta\n- gamma\n* delta") == 4

    def test_project_n_lines(self):
        assert count_project_entries("project 1: alpha\nproject 2: beta") == 2

    def test_project_header_lines(self):
        assert count_project_entries("project: alpha\ndetails\nproject: beta") == 2

    def test_length_estimate(self):
        assert count_project_entries("a" * 650) == 3

    def test_minimum_one_and_cap(self):
        assert count_project_entries("a short blurb") == 1
        assert count_project_entries("\n".join(f"- item {i}" for i in range(25))) == 10

    def test_empty(self):
        assert count_project_entries(None) == 0
        assert count_project_entries("  ") == 0
