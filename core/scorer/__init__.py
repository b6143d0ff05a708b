#!/usr/bin/env python3
"""
Scoring Module - Plan scoring engine.

Public API:
- build_baseline: Index a parsed instance
- score / score_report: Simulate a parsed plan against a baseline
- ScoringService: Per-submission isolation and invalid-outcome reporting

The module is split into focused, single-responsibility modules:

- models.py: Data structures (Worker, Job, Baseline, PlannedJob, ScoreReport)
- indexer.py: Dense ID allocation and baseline construction
- resolver.py: Plan names to IDs
- simulation.py: Time, mentoring, training and score arithmetic
- exceptions.py: Engine error taxonomy
- service.py: ScoringService orchestrator

The binary codec lives in core.cache.
"""

from core.scorer.exceptions import (
    CacheError,
    EngineError,
    InsufficientSkill,
    NoWorkersAssigned,
    ResolutionError,
    RoleCountMismatch,
    StructuralError,
    UnknownJob,
    UnknownJobId,
    UnknownWorker,
    UnknownWorkerId,
    ValidationError,
)
from core.scorer.indexer import build_baseline
from core.scorer.models import Baseline, Job, PlannedJob, ScoreReport, ScoredJob, Worker
from core.scorer.resolver import resolve_plan
from core.scorer.service import ScoreOutcome, ScoringService, score, score_report

__all__ = [
    'Baseline',
    'Job',
    'PlannedJob',
    'ScoreReport',
    'ScoredJob',
    'Worker',
    'build_baseline',
    'resolve_plan',
    'score',
    'score_report',
    'ScoreOutcome',
    'ScoringService',
    'CacheError',
    'EngineError',
    'InsufficientSkill',
    'NoWorkersAssigned',
    'ResolutionError',
    'RoleCountMismatch',
    'StructuralError',
    'UnknownJob',
    'UnknownJobId',
    'UnknownWorker',
    'UnknownWorkerId',
    'ValidationError',
]
