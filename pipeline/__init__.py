"""Pipeline execution modules for batch scoring."""

from .runner import run_batch, BatchRunResult, PairResult

__all__ = ['run_batch', 'BatchRunResult', 'PairResult']
