"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


SAMPLE_RESUME = """Jane Doe
Senior Software Engineer

Summary
Backend engineer with 6 years of experience building services in Java and Python.

Technical Skills
Java 11, Spring Boot, PostgreSQL, Docker | Kubernetes; Git

Work Experience
Acme Corp - Senior Engineer 2021 - 2024
Led the payments project migrating services to microservices. Owned CI pipelines.
Globex - Software Engineer 2018 - 2021

Projects
1. Inventory tracker built with Java and PostgreSQL
2. Chat service using Python and Redis

Education
Master of Science in Computer Science, State University
Bachelor of Science in Mathematics
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def sample_resume_text():
    return SAMPLE_RESUME


@pytest.fixture
def db_engine():
    """Fresh database with all tables for one test."""
    from sqlalchemy import create_engine
    from sqlalchemy.pool import StaticPool
    from database.models import Base
    from database.database import enable_sqlite_savepoints
    from tests import SKIP_DB_TESTS, get_test_db_url

    if SKIP_DB_TESTS:
        pytest.skip("DB tests disabled via SKIP_DB_TESTS")

    url = get_test_db_url()
    if url.startswith("sqlite"):
        # One shared connection so every session sees the same in-memory database
        engine = create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    else:
        engine = create_engine(url)

    enable_sqlite_savepoints(engine)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    from sqlalchemy.orm import sessionmaker

    Session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def screening_repo(db_session):
    from database.repository import ScreeningRepository

    return ScreeningRepository(db_session)
