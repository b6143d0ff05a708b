#!/usr/bin/env python3
"""
Scoring Service - Entry points of the scoring engine.

- score / score_report: resolve and simulate a plan against a baseline,
  mutating that baseline's run state
- ScoringService: isolates each submission on a clone of a shared
  baseline and turns engine errors into invalid outcomes

Designed so one cached baseline can serve many submissions, including
concurrent ones, without state leaking between them.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from ingest.models import ParsedPlan
from ingest.parser import ParseError, parse_plan
from core.config_loader import ScorerConfig
from core.scorer.exceptions import EngineError
from core.scorer.models import Baseline, Score, ScoreReport
from core.scorer.resolver import resolve_plan
from core.scorer.simulation import run_plan

logger = logging.getLogger(__name__)


def score_report(
    baseline: Baseline,
    plan: ParsedPlan,
    disable_checks: bool = False
) -> ScoreReport:
    """
    Score a parsed plan with its per-job timeline.

    Mutates the baseline's levels and availability.

    Raises:
        EngineError: On the first resolution, structural or skill error
    """
    planned_jobs = resolve_plan(baseline, plan)
    return run_plan(baseline, planned_jobs, disable_checks=disable_checks)


def score(baseline: Baseline, plan: ParsedPlan, disable_checks: bool = False) -> Score:
    """Score a parsed plan. Mutates the baseline's levels and availability."""
    return score_report(baseline, plan, disable_checks).score


@dataclass
class ScoreOutcome:
    """Result of scoring one submission, as reported to callers."""
    score: Score
    valid: bool
    message: Optional[str] = None
    report: Optional[ScoreReport] = None


class ScoringService:
    """
    Service for scoring submissions against shared baselines.

    The baseline handed in is never mutated: every submission runs on its
    own clone.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()

    def _checks_disabled(self, disable_checks: Optional[bool]) -> bool:
        return self.config.disable_checks if disable_checks is None else disable_checks

    def score_submission(
        self,
        baseline: Baseline,
        plan: ParsedPlan,
        disable_checks: Optional[bool] = None
    ) -> ScoreReport:
        """
        Score a parsed plan on a clone of `baseline`.

        Args:
            baseline: Shared, pristine baseline
            plan: Parsed plan
            disable_checks: Override of the configured flag

        Raises:
            EngineError: On the first engine error
        """
        return score_report(baseline.clone(), plan, self._checks_disabled(disable_checks))

    def evaluate(
        self,
        baseline: Baseline,
        submission: str,
        disable_checks: Optional[bool] = None
    ) -> ScoreOutcome:
        """
        Parse and score a raw plan submission.

        Malformed or rejected submissions produce an invalid outcome with
        the error message instead of raising.
        """
        try:
            plan = parse_plan(submission)
            report = self.score_submission(baseline, plan, disable_checks)
        except (ParseError, EngineError) as e:
            logger.info(f"Rejected submission: {e}")
            return ScoreOutcome(score=0, valid=False, message=str(e))

        return ScoreOutcome(score=report.score, valid=True, report=report)
