#!/usr/bin/env python3
"""
Scoring Models - Dense integer-indexed representation of a problem instance.

Workers, jobs and skills are addressed by their integer IDs inside the
simulation; the name tables are only consulted when resolving a plan.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

Score = int
Time = int
Level = int


@dataclass
class Worker:
    """A roster member. `levels` holds only job-relevant initial levels."""
    id: int
    name: str
    skills: List[int] = field(default_factory=list)
    levels: Dict[int, Level] = field(default_factory=dict)


@dataclass
class Job:
    """A job with its ordered (skill_id, level_required) roles."""
    id: int
    name: str
    roles: List[Tuple[int, Level]]
    days_to_completion: int
    base_score: Score
    deadline: Time


@dataclass
class PlannedJob:
    """A resolved plan entry; assignees[i] fills roles[i] of the job."""
    job_id: int
    assignees: List[int]


@dataclass
class Baseline:
    """
    Precomputed state for one problem instance.

    Name tables, workers and jobs are static once built. `levels` and
    `availability` are mutated by a scoring run; use `clone()` to get an
    isolated copy before each independent run.
    """
    worker_ids: Dict[str, int]
    job_ids: Dict[str, int]
    skill_ids: Dict[str, int]
    workers: List[Worker]
    jobs: List[Job]
    levels: Dict[Tuple[int, int], Level]
    availability: List[Time] = field(default_factory=list)

    def __post_init__(self):
        if not self.availability:
            self.availability = [0] * len(self.workers)

    @property
    def skill_names(self) -> List[str]:
        names = [''] * len(self.skill_ids)
        for name, skill_id in self.skill_ids.items():
            names[skill_id] = name
        return names

    def level_of(self, worker_id: int, skill_id: int) -> Level:
        return self.levels.get((worker_id, skill_id), 0)

    def clone(self) -> 'Baseline':
        """Copy the mutable run state, sharing the immutable parts."""
        return replace(
            self,
            levels=dict(self.levels),
            availability=list(self.availability)
        )

    def same_static(self, other: 'Baseline') -> bool:
        """Compare name tables, records and the level map, ignoring availability."""
        return (
            self.worker_ids == other.worker_ids
            and self.job_ids == other.job_ids
            and self.skill_ids == other.skill_ids
            and self.workers == other.workers
            and self.jobs == other.jobs
            and self.levels == other.levels
        )


@dataclass
class ScoredJob:
    """Timeline entry for one scheduled job."""
    job_id: int
    name: str
    start: Time
    end: Time
    lateness: int
    contribution: Score


@dataclass
class ScoreReport:
    """Final score with the per-job breakdown that produced it."""
    score: Score = 0
    jobs: List[ScoredJob] = field(default_factory=list)
