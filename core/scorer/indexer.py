#!/usr/bin/env python3
"""
Indexer & Model Builder - Turn a parsed instance into a Baseline.

Skill IDs are allocated in first-seen order over all job roles first, then
over worker skill listings. Skills that no job requires still get an ID but
their levels are dropped, since nothing can ever check or train them.
"""

from typing import Dict, List, Tuple
import logging

from ingest.models import ParsedInstance
from core.scorer.models import Baseline, Job, Level, Worker

logger = logging.getLogger(__name__)


def _allocate(skill_ids: Dict[str, int], name: str) -> int:
    skill_id = skill_ids.get(name)
    if skill_id is None:
        skill_id = len(skill_ids)
        skill_ids[name] = skill_id
    return skill_id


def build_baseline(instance: ParsedInstance) -> Baseline:
    """
    Build the dense-ID model for one problem instance.

    Worker and job IDs are their positions in the input. The input is
    assumed structurally valid; the parser rejects malformed records.

    Args:
        instance: Parsed problem instance

    Returns:
        Baseline with every worker available at time 0
    """
    skill_ids: Dict[str, int] = {}

    job_ids: Dict[str, int] = {}
    jobs: List[Job] = []
    for job_id, parsed_job in enumerate(instance.jobs):
        job_ids[parsed_job.name] = job_id
        roles = []
        for role in parsed_job.roles:
            skill_id = _allocate(skill_ids, role.name)
            roles.append((skill_id, role.level))
            logger.debug(
                f"job {job_id} ({parsed_job.name}) requires level {role.level} "
                f"in {skill_id} ({role.name})"
            )
        jobs.append(Job(
            id=job_id,
            name=parsed_job.name,
            roles=roles,
            days_to_completion=parsed_job.days_to_completion,
            base_score=parsed_job.base_score,
            deadline=parsed_job.deadline
        ))

    # Every ID below this bound is required by at least one job
    required_skills = len(skill_ids)

    worker_ids: Dict[str, int] = {}
    workers: List[Worker] = []
    levels: Dict[Tuple[int, int], Level] = {}
    for worker_id, parsed_worker in enumerate(instance.workers):
        worker_ids[parsed_worker.name] = worker_id
        worker = Worker(id=worker_id, name=parsed_worker.name)
        for skill in parsed_worker.skills:
            skill_id = _allocate(skill_ids, skill.name)
            worker.skills.append(skill_id)
            if skill_id < required_skills:
                worker.levels[skill_id] = skill.level
                levels[(worker_id, skill_id)] = skill.level
            else:
                logger.debug(
                    f"worker {worker_id} has skill {skill.name} but no job requires it"
                )
        workers.append(worker)

    logger.info(
        f"Indexed {len(workers)} workers, {len(jobs)} jobs, {len(skill_ids)} skills "
        f"({required_skills} required by jobs)"
    )
    return Baseline(
        worker_ids=worker_ids,
        job_ids=job_ids,
        skill_ids=skill_ids,
        workers=workers,
        jobs=jobs,
        levels=levels
    )
