#!/usr/bin/env python3
"""
Instance service - holds shared baselines and scores submissions.

Each configured instance is indexed once (through the baseline cache when
enabled) and shared read-only; every submission is scored on its own
clone, so concurrent requests never see each other's state.
"""

import logging
from threading import Lock
from typing import Dict, List, Optional

from core.cache import BaselineCacheService
from core.config_loader import AppConfig
from core.scorer import Baseline, ScoreOutcome, ScoringService, build_baseline
from ingest import ParseError, parse_instance_file
from ..exceptions import InstanceNotFoundException, InstanceUnavailableException

logger = logging.getLogger(__name__)


class InstanceRegistry:
    """Lazily loads configured instances and scores submissions against them."""

    def __init__(
        self,
        instances: Dict[str, str],
        scoring_service: ScoringService,
        cache: Optional[BaselineCacheService] = None
    ):
        self._paths = dict(instances)
        self._scoring_service = scoring_service
        self._cache = cache
        self._baselines: Dict[str, Baseline] = {}
        self._lock = Lock()

    @classmethod
    def from_config(cls, config: AppConfig) -> "InstanceRegistry":
        cache = BaselineCacheService.from_config(config.cache) if config.cache.enabled else None
        return cls(config.instances, ScoringService(config.scorer), cache)

    def names(self) -> List[str]:
        return sorted(self._paths)

    def get_baseline(self, name: str) -> Baseline:
        """
        Get the shared baseline for an instance, loading it on first use.

        Raises:
            InstanceNotFoundException: If the instance is not configured
            InstanceUnavailableException: If the instance file cannot be loaded
        """
        if name not in self._paths:
            raise InstanceNotFoundException(f"Unknown instance: {name}")

        with self._lock:
            baseline = self._baselines.get(name)
            if baseline is None:
                path = self._paths[name]
                try:
                    if self._cache is not None:
                        baseline = self._cache.load_or_build(path)
                    else:
                        baseline = build_baseline(parse_instance_file(path))
                except (OSError, ParseError, UnicodeDecodeError) as e:
                    raise InstanceUnavailableException(
                        f"Instance {name} could not be loaded: {e}"
                    ) from e
                logger.info(f"Loaded instance {name} from {path}")
                self._baselines[name] = baseline
        return baseline

    def evaluate(
        self,
        name: str,
        submission: str,
        disable_checks: Optional[bool] = None
    ) -> ScoreOutcome:
        baseline = self.get_baseline(name)
        return self._scoring_service.evaluate(baseline, submission, disable_checks)
