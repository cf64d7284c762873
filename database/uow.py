import contextlib
import logging

from database import database
from database.repository import ScreeningRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def screening_uow():
    """Per-unit-of-work transaction scope.

    Yields a ScreeningRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with screening_uow() as repo:
            requirement = repo.jobs.get_requirement(job_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = database.SessionLocal()
    try:
        repo = ScreeningRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
