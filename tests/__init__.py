#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only unit tests (no DB required)
    python -m pytest tests/ -v -m "not db"

    # Run only DB tests
    python -m pytest tests/ -v -m "db"

Database Setup:
    DB tests run against a throwaway in-memory SQLite database created per
    test, so no external service is required. Set TEST_DATABASE_URL to run
    them against another database instead.
"""

import os
from datetime import datetime, timezone
from decimal import Decimal

# Database configuration
TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")

# Check if we should force skip DB tests
SKIP_DB_TESTS = os.environ.get("SKIP_DB_TESTS", "false").lower() == "true"

FIXED_TIME = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def get_test_db_url() -> str:
    """Get the test database URL."""
    return TEST_DB_URL


def make_score_record(job_id=1, candidate_id=1, final="50.00", skill="50.00",
                      experience="50.00", education="50.00", project="50.00"):
    """Build a ScoreRecord with string-friendly score arguments."""
    from core.models import ScoreRecord

    return ScoreRecord(
        job_id=job_id,
        candidate_id=candidate_id,
        skill_score=Decimal(skill),
        experience_score=Decimal(experience),
        education_score=Decimal(education),
        project_score=Decimal(project),
        final_score=Decimal(final),
        computed_at=FIXED_TIME,
    )
