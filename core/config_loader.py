import yaml
import os
from typing import Dict, Optional
from pydantic import BaseModel, Field

# 2 weeks in seconds
DEFAULT_CACHE_TTL_SECONDS = 14 * 24 * 60 * 60


class ScorerConfig(BaseModel):
    """
    Configuration for the scoring engine.
    """
    # Skip skill-level validation (mentoring rule included); scores still train levels
    disable_checks: bool = False


class CacheConfig(BaseModel):
    """
    Configuration for baseline caching.

    Baselines are stored as .bin files, beside the instance file unless a
    directory is given. A Redis URL adds a shared cache tier in front of
    the files.
    """
    enabled: bool = True
    directory: Optional[str] = None
    redis_url: Optional[str] = None
    ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    # Instance name -> instance file path, served by the network scoring mode
    instances: Dict[str, str] = Field(default_factory=dict)


def _apply_env_overrides(data: Dict) -> Dict:
    env_redis_url = os.environ.get("REDIS_URL")
    if env_redis_url:
        data.setdefault('cache', {})['redis_url'] = env_redis_url

    env_cache_dir = os.environ.get("SCORER_CACHE_DIR")
    if env_cache_dir:
        data.setdefault('cache', {})['directory'] = env_cache_dir

    env_disable_checks = os.environ.get("SCORER_DISABLE_CHECKS")
    if env_disable_checks:
        data.setdefault('scorer', {})['disable_checks'] = env_disable_checks.lower() in ("1", "true", "yes")

    if 'WEB_HOST' in os.environ:
        data.setdefault('web', {})['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        data.setdefault('web', {})['port'] = int(os.environ['WEB_PORT'])

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    return AppConfig(**_apply_env_overrides(data))
