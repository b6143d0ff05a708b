#!/usr/bin/env python3
"""
Simulation Engine - Replay a resolved plan and accumulate the score.

Jobs are processed strictly in plan order. Each job:
1. starts when every assigned worker is free
2. scores its base score, minus one point per day late (never below 0)
3. keeps the whole team busy until it ends
4. trains each role holder whose level was at or below the role's level

A role holder may sit one level below the requirement when some teammate
already meets it (mentoring). Training always compares against the
original requirement.
"""

from typing import List, Sequence, Tuple
import logging

from core.scorer.exceptions import (
    InsufficientSkill,
    NoWorkersAssigned,
    RoleCountMismatch,
    UnknownJobId,
    UnknownWorkerId,
)
from core.scorer.models import (
    Baseline,
    Job,
    Level,
    PlannedJob,
    Score,
    ScoredJob,
    ScoreReport,
    Time,
)

logger = logging.getLogger(__name__)


def effective_requirement(required: Level, team_max: Level) -> Tuple[Level, bool]:
    """
    Apply the mentoring rule to one role.

    Returns: (effective_requirement, mentoring_applied)
    """
    if team_max >= required:
        return max(required - 1, 0), True
    return required, False


def job_contribution(base_score: Score, lateness: int) -> Score:
    """Points earned by a job finishing `lateness` days after its deadline."""
    if lateness <= 0:
        return base_score
    return max(0, base_score - lateness)


def _lookup_job(baseline: Baseline, planned_job: PlannedJob) -> Job:
    if not 0 <= planned_job.job_id < len(baseline.jobs):
        raise UnknownJobId(planned_job.job_id)
    job = baseline.jobs[planned_job.job_id]
    if len(planned_job.assignees) != len(job.roles):
        raise RoleCountMismatch(job.name, len(job.roles), len(planned_job.assignees))
    if not planned_job.assignees:
        raise NoWorkersAssigned(job.name)
    for worker_id in planned_job.assignees:
        if not 0 <= worker_id < len(baseline.workers):
            raise UnknownWorkerId(worker_id, job.name)
    return job


def check_skills(baseline: Baseline, job: Job, assignees: Sequence[int]):
    """
    Verify every role holder meets its (possibly mentored) requirement.

    Raises:
        InsufficientSkill: On the first role that fails
    """
    for (skill_id, required), holder in zip(job.roles, assignees):
        team_max = max(baseline.level_of(worker_id, skill_id) for worker_id in assignees)
        effective, mentoring = effective_requirement(required, team_max)
        holder_level = baseline.level_of(holder, skill_id)
        if holder_level < effective:
            raise InsufficientSkill(
                worker=baseline.workers[holder].name,
                skill=baseline.skill_names[skill_id],
                level=holder_level,
                required=effective,
                job=job.name,
                mentoring=mentoring,
                worker_id=holder,
                skill_id=skill_id,
                job_id=job.id
            )


def train(baseline: Baseline, job: Job, assignees: Sequence[int]):
    """Level up role holders that worked at or above their level."""
    for (skill_id, required), holder in zip(job.roles, assignees):
        current = baseline.level_of(holder, skill_id)
        if current <= required:
            baseline.levels[(holder, skill_id)] = current + 1


def run_plan(
    baseline: Baseline,
    planned_jobs: List[PlannedJob],
    disable_checks: bool = False
) -> ScoreReport:
    """
    Simulate a resolved plan against a baseline.

    Mutates `baseline.levels` and `baseline.availability`; pass a clone when
    the baseline must be reused.

    Args:
        baseline: Run state to consume
        planned_jobs: Resolved plan, in processing order
        disable_checks: Skip skill validation

    Returns:
        ScoreReport with the total and per-job timeline

    Raises:
        StructuralError: On a malformed plan entry
        InsufficientSkill: On a failed skill check (unless disabled)
    """
    report = ScoreReport()

    for planned_job in planned_jobs:
        job = _lookup_job(baseline, planned_job)
        assignees = planned_job.assignees

        if not disable_checks:
            check_skills(baseline, job, assignees)

        start: Time = max(baseline.availability[worker_id] for worker_id in assignees)
        end: Time = start + job.days_to_completion
        lateness = end - job.deadline
        contribution = job_contribution(job.base_score, lateness)
        report.score += contribution

        logger.debug(
            f"just finished {job.id} (start {start}, end {end}, "
            f"late {lateness}, score {contribution})"
        )
        report.jobs.append(ScoredJob(
            job_id=job.id,
            name=job.name,
            start=start,
            end=end,
            lateness=lateness,
            contribution=contribution
        ))

        for worker_id in assignees:
            baseline.availability[worker_id] = end

        train(baseline, job, assignees)

    return report
