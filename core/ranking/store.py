"""
Score Record Store Interface - Abstract base for score persistence.

The ranking engine reads existing records and writes each new record once.
Implementations must reject a second write for the same (job, candidate)
pair with ScoreRecordConflictError; the engine recovers by re-reading.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from core.exceptions import ScoreRecordConflictError
from core.models import ScoreRecord

logger = logging.getLogger(__name__)


class ScoreRecordStore(ABC):
    """
    Abstract interface for score record persistence (in-memory, SQL, etc.).
    """

    @abstractmethod
    def get(self, job_id: int, candidate_id: int) -> Optional[ScoreRecord]:
        """Existing record for the pair, or None."""
        pass

    @abstractmethod
    def list_for_job(self, job_id: int) -> List[ScoreRecord]:
        pass

    @abstractmethod
    def save(self, record: ScoreRecord) -> ScoreRecord:
        """
        Persist a new record.

        Raises:
            ScoreRecordConflictError: If a record already exists for the pair
        """
        pass

    @abstractmethod
    def delete_for_job(self, job_id: int) -> int:
        """Delete every record for the job. Returns the number deleted."""
        pass


class InMemoryScoreStore(ScoreRecordStore):
    """Thread-safe dict-backed store keyed by (job_id, candidate_id)."""

    def __init__(self):
        self._records: Dict[Tuple[int, int], ScoreRecord] = {}
        self._lock = threading.Lock()

    def get(self, job_id: int, candidate_id: int) -> Optional[ScoreRecord]:
        with self._lock:
            return self._records.get((job_id, candidate_id))

    def list_for_job(self, job_id: int) -> List[ScoreRecord]:
        with self._lock:
            return [r for (j, _), r in self._records.items() if j == job_id]

    def save(self, record: ScoreRecord) -> ScoreRecord:
        key = (record.job_id, record.candidate_id)
        with self._lock:
            if key in self._records:
                raise ScoreRecordConflictError(record.job_id, record.candidate_id)
            self._records[key] = record
        return record

    def delete_for_job(self, job_id: int) -> int:
        with self._lock:
            keys = [key for key in self._records if key[0] == job_id]
            for key in keys:
                del self._records[key]
        logger.debug(f"Deleted {len(keys)} in-memory score records for job {job_id}")
        return len(keys)
