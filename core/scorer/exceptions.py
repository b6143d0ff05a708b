#!/usr/bin/env python3
"""
Scoring Exceptions - Error taxonomy for the scoring engine.

Every failure aborts the run; the engine never returns a partial score.
"""

from typing import Optional


class EngineError(Exception):
    """Base exception for scoring engine errors."""
    pass


class ResolutionError(EngineError):
    """Raised when a plan references a name absent from the instance."""
    pass


class UnknownJob(ResolutionError):
    """Raised when a plan entry names a job that is not in the instance."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown job {name}")


class UnknownWorker(ResolutionError):
    """Raised when a plan entry names a worker that is not in the instance."""

    def __init__(self, name: str, job_name: str):
        self.name = name
        self.job_name = job_name
        super().__init__(f"unknown worker {name} assigned to job {job_name}")


class ValidationError(EngineError):
    """Raised when an assignment breaks a skill rule."""
    pass


class InsufficientSkill(ValidationError):
    """Raised when a role holder is below the (possibly mentored) level bar."""

    def __init__(
        self,
        worker: str,
        skill: str,
        level: int,
        required: int,
        job: str,
        mentoring: bool,
        worker_id: Optional[int] = None,
        skill_id: Optional[int] = None,
        job_id: Optional[int] = None
    ):
        self.worker = worker
        self.worker_id = worker_id
        self.skill_id = skill_id
        self.job_id = job_id
        self.skill = skill
        self.level = level
        self.required = required
        self.job = job
        self.mentoring = mentoring
        super().__init__(
            f"worker {worker} level in {skill} is {level} vs {required} "
            f"required for job {job} (mentoring: {str(mentoring).lower()})"
        )


class StructuralError(EngineError):
    """Raised when a plan entry has a malformed shape."""
    pass


class NoWorkersAssigned(StructuralError):
    """Raised when a job would start with nobody assigned to it."""

    def __init__(self, job: str):
        self.job = job
        super().__init__(f"no workers assigned to job {job}, cannot compute start time")


class RoleCountMismatch(StructuralError):
    """Raised when the assignee count differs from the job's role count."""

    def __init__(self, job: str, expected: int, got: int):
        self.job = job
        self.expected = expected
        self.got = got
        super().__init__(f"job {job} has {expected} role(s) but {got} worker(s) were assigned")


class UnknownJobId(StructuralError):
    """Raised when a resolved plan entry points outside the job table."""

    def __init__(self, job_id: int):
        self.job_id = job_id
        super().__init__(f"unknown job id {job_id}")


class UnknownWorkerId(StructuralError):
    """Raised when a resolved plan entry points outside the worker table."""

    def __init__(self, worker_id: int, job: str):
        self.worker_id = worker_id
        self.job = job
        super().__init__(f"unknown worker id {worker_id} assigned to job {job}")


class CacheError(Exception):
    """Raised when a persisted baseline cannot be read or decoded."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(f"{message} ({path})" if path else message)
