"""
Tests for education level / field extraction.
"""
import pytest

from core.text import normalize_text
from extraction.education import extract_education_field, extract_education_level


class TestEducationLevel:

    def test_highest_priority_level_wins_regardless_of_order(self):
        text = normalize_text("Education\nBachelor of Science, 2012\nPhD in Physics, 2018\nMaster of Arts")
        assert extract_education_level(text) == "PhD"

    @pytest.mark.parametrize("text,expected", [
        ("Education\nB.Tech in Electronics", "Bachelor"),
        ("Education\nM.Sc. Data Science", "Master"),
        ("Education\nMBA, 2019", "Master"),
        ("Education\nDiploma in Networking", "Diploma"),
        ("Education\nAssociate degree", "Associate"),
        ("Education\nAWS Certificate", "Certificate"),
    ])
    def test_keywords(self, text, expected):
        assert extract_education_level(normalize_text(text)) == expected

    def test_education_section_searched_first(self):
        text = normalize_text(
            "Summary\nMentored master's students as a TA\n"
            "Education\nBachelor of Engineering"
        )
        assert extract_education_level(text) == "Bachelor"

    def test_falls_back_to_whole_text(self):
        text = normalize_text("Jane Doe, PhD\nResearch scientist")
        assert extract_education_level(text) == "PhD"

    def test_none_found(self):
        assert extract_education_level("self-taught developer") is None
        assert extract_education_level("") is None


class TestEducationField:

    def test_display_form(self, sample_resume_text):
        assert extract_education_field(normalize_text(sample_resume_text)) == "Computer Science"

    def test_acronyms_never_reported(self):
        assert extract_education_field(normalize_text("Education\nB.S. in CS")) is None

    def test_mba_display(self):
        assert extract_education_field(normalize_text("Education\nMBA")) == "MBA"

    def test_specific_field_preferred_over_generic(self):
        text = normalize_text("Education\nBachelor of Software Engineering")
        assert extract_education_field(text) == "Software Engineering"
