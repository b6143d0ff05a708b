#!/usr/bin/env python3
"""
Instance endpoints - list served problem instances.
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_instance_registry
from ..models.responses import InstanceListResponse, InstanceSummary
from ..services.instance_service import InstanceRegistry

router = APIRouter(prefix="/api/v1", tags=["instances"])


@router.get("/instances", response_model=InstanceListResponse)
def list_instances(registry: InstanceRegistry = Depends(get_instance_registry)):
    """
    List configured instances with their sizes.

    Loads any instance not yet loaded.
    """
    summaries = []
    for name in registry.names():
        baseline = registry.get_baseline(name)
        summaries.append(InstanceSummary(
            name=name,
            workers=len(baseline.workers),
            jobs=len(baseline.jobs),
            skills=len(baseline.skill_ids)
        ))
    return InstanceListResponse(instances=summaries)
