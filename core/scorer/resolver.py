#!/usr/bin/env python3
"""
Output Resolver - Map a parsed plan's names onto the Baseline's ID space.

Resolution is closed-world: an unknown name is always an error, there is
no fallback ID.
"""

from typing import List

from ingest.models import ParsedPlan
from core.scorer.exceptions import UnknownJob, UnknownWorker
from core.scorer.models import Baseline, PlannedJob


def resolve_plan(baseline: Baseline, plan: ParsedPlan) -> List[PlannedJob]:
    """
    Resolve every plan entry, preserving file order.

    Raises:
        UnknownJob: If an entry names a job absent from the instance
        UnknownWorker: If an entry names a worker absent from the instance
    """
    planned = []
    for entry in plan.entries:
        job_id = baseline.job_ids.get(entry.job_name)
        if job_id is None:
            raise UnknownJob(entry.job_name)

        assignees = []
        for worker_name in entry.worker_names:
            worker_id = baseline.worker_ids.get(worker_name)
            if worker_id is None:
                raise UnknownWorker(worker_name, entry.job_name)
            assignees.append(worker_id)

        planned.append(PlannedJob(job_id=job_id, assignees=assignees))
    return planned
