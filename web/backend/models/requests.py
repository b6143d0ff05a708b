#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class ScoreRequest(BaseModel):
    """Request to score one plan submission."""
    submission: str = Field(..., description="Plan file contents")
    disable_checks: Optional[bool] = Field(
        None,
        description="Skip skill-level checks, or null to use the server setting"
    )
    details: bool = Field(default=False, description="Include the per-job timeline")


class BatchScoreRequest(BaseModel):
    """Request to score several plan submissions against one instance."""
    submissions: List[ScoreRequest] = Field(..., min_length=1, max_length=100)
