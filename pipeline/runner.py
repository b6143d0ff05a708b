"""Batch scoring runner.

Scores a list of (instance file, plan file) pairs and aggregates the
total. Used by main.py; a failing pair is recorded and the batch moves on.
"""

import time
import logging
from typing import List, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from core.cache import BaselineCacheService
from core.scorer import EngineError, ScoreReport, ScoringService, build_baseline
from core.scorer.models import Baseline
from ingest import ParseError, parse_instance_file, parse_plan_file


logger = logging.getLogger(__name__)


@dataclass
class PairResult:
    """Outcome of scoring one plan file against its instance."""
    instance_path: str
    plan_path: str
    score: int = 0
    error: Optional[str] = None
    report: Optional[ScoreReport] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class BatchRunResult:
    """Result of a batch scoring run."""
    pairs: List[PairResult] = field(default_factory=list)
    execution_time: float = 0.0

    @property
    def total_score(self) -> int:
        return sum(pair.score for pair in self.pairs if pair.success)

    @property
    def success(self) -> bool:
        return all(pair.success for pair in self.pairs)


def load_baseline(instance_path: str, cache: Optional[BaselineCacheService] = None) -> Baseline:
    """Build a baseline, going through the cache when one is given."""
    if cache is not None:
        return cache.load_or_build(instance_path)
    return build_baseline(parse_instance_file(instance_path))


def score_pair(
    instance_path: str,
    plan_path: str,
    scoring_service: ScoringService,
    cache: Optional[BaselineCacheService] = None
) -> PairResult:
    result = PairResult(instance_path=instance_path, plan_path=plan_path)
    try:
        # Plan first: it is the file most likely to be malformed
        plan = parse_plan_file(plan_path)
        baseline = load_baseline(instance_path, cache)
        result.report = scoring_service.score_submission(baseline, plan)
        result.score = result.report.score
    except (ParseError, EngineError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to score {plan_path} against {instance_path}: {e}")
        result.error = str(e)
    return result


def run_batch(
    pairs: Sequence[Tuple[str, str]],
    scoring_service: Optional[ScoringService] = None,
    cache: Optional[BaselineCacheService] = None
) -> BatchRunResult:
    """Score every (instance, plan) pair in order.

    Args:
        pairs: (instance file, plan file) tuples
        scoring_service: Service carrying the scorer configuration
        cache: Baseline cache, or None to always parse and index

    Returns:
        BatchRunResult with one PairResult per input pair
    """
    scoring_service = scoring_service or ScoringService()
    batch_start = time.time()

    result = BatchRunResult()
    for instance_path, plan_path in pairs:
        pair_result = score_pair(instance_path, plan_path, scoring_service, cache)
        if pair_result.success:
            logger.info(f"{plan_path} scored {pair_result.score}")
        result.pairs.append(pair_result)

    result.execution_time = time.time() - batch_start
    logger.info(
        f"Batch finished: {len(result.pairs)} pair(s), total {result.total_score} "
        f"in {result.execution_time:.2f}s"
    )
    return result
