#!/usr/bin/env python3
"""
Scoring endpoints - score plan submissions against served instances.
"""

from fastapi import APIRouter, Depends

from core.scorer import ScoreOutcome
from ..dependencies import get_instance_registry
from ..models.requests import BatchScoreRequest, ScoreRequest
from ..models.responses import BatchScoreResponse, JobTimelineEntry, ScoreResponse
from ..services.instance_service import InstanceRegistry

router = APIRouter(prefix="/api/v1/instances", tags=["scoring"])


def _to_response(outcome: ScoreOutcome, details: bool) -> ScoreResponse:
    timeline = None
    if details and outcome.report is not None:
        timeline = [
            JobTimelineEntry(
                job=job.name,
                start=job.start,
                end=job.end,
                lateness=job.lateness,
                score=job.contribution
            )
            for job in outcome.report.jobs
        ]
    return ScoreResponse(
        score=outcome.score,
        valid=outcome.valid,
        message=outcome.message,
        timeline=timeline
    )


@router.post("/{name}/score", response_model=ScoreResponse)
def score_submission(
    name: str,
    request: ScoreRequest,
    registry: InstanceRegistry = Depends(get_instance_registry)
):
    """
    Score one plan submission.

    Malformed or rejected plans return `valid: false` with a message
    rather than an HTTP error.
    """
    outcome = registry.evaluate(name, request.submission, request.disable_checks)
    return _to_response(outcome, request.details)


@router.post("/{name}/score/batch", response_model=BatchScoreResponse)
def score_batch(
    name: str,
    request: BatchScoreRequest,
    registry: InstanceRegistry = Depends(get_instance_registry)
):
    """
    Score several submissions independently against the same instance.

    Each submission runs on its own copy of the instance state;
    `total_score` sums the valid ones.
    """
    results = [
        _to_response(
            registry.evaluate(name, item.submission, item.disable_checks),
            item.details
        )
        for item in request.submissions
    ]
    valid = [result for result in results if result.valid]

    return BatchScoreResponse(
        instance=name,
        results=results,
        total_score=sum(result.score for result in valid),
        valid_count=len(valid)
    )
