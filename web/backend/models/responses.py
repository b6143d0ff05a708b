#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class JobTimelineEntry(BaseModel):
    """One scheduled job in a scored plan."""
    job: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    lateness: int
    score: int = Field(ge=0)


class ScoreResponse(BaseModel):
    """Result of scoring one submission."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "score": 33,
                "valid": True,
                "message": None
            }
        }
    )

    score: int = Field(ge=0)
    valid: bool
    message: Optional[str] = None
    timeline: Optional[List[JobTimelineEntry]] = None


class BatchScoreResponse(BaseModel):
    """Results of scoring several submissions."""
    instance: str
    results: List[ScoreResponse]
    total_score: int = Field(ge=0)
    valid_count: int = Field(ge=0)


class InstanceSummary(BaseModel):
    """Summary of a loaded problem instance."""
    name: str
    workers: int
    jobs: int
    skills: int


class InstanceListResponse(BaseModel):
    """Response listing the instances served by this process."""
    instances: List[InstanceSummary]
