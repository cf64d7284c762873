#!/usr/bin/env python3
"""
Custom exceptions for the screening services.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class PreconditionNotMetError(ServiceException):
    """Raised when an operation is requested before its inputs exist.

    Signals a workflow-ordering bug on the caller's side (e.g. extraction
    requested for a profile whose text was never uploaded), not missing
    applicant data.
    """
    pass


class ScoreRecordConflictError(ServiceException):
    """Raised when a score record already exists for a (job, candidate) pair."""

    def __init__(self, job_id: int, candidate_id: int):
        super().__init__(f"Score record already exists for job {job_id}, candidate {candidate_id}")
        self.job_id = job_id
        self.candidate_id = candidate_id


class JobNotFoundException(ServiceException):
    """Raised when a job is not found."""
    pass


class CandidateNotFoundException(ServiceException):
    """Raised when a candidate resume is not found."""
    pass
