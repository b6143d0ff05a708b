"""Baseline Cache Service - Persist indexed instances between scoring runs."""
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from redis import Redis
from redis.exceptions import RedisError

from core.cache.codec import decode_baseline, encode_baseline
from core.config_loader import DEFAULT_CACHE_TTL_SECONDS, CacheConfig
from core.scorer.exceptions import CacheError
from core.scorer.indexer import build_baseline
from core.scorer.models import Baseline
from core.utils import InstanceFingerprinter
from ingest.parser import parse_instance

logger = logging.getLogger(__name__)

CACHE_FILE_SUFFIX = ".bin"
_DIGEST_SIZE = 32


def _sanitize_url(url: str) -> str:
    """Remove credentials from URL for safe logging."""
    try:
        parsed = urlparse(url)
        if parsed.password:
            sanitized = parsed._replace(
                netloc=f"{parsed.username or ''}:*@{parsed.hostname}:{parsed.port or 6379}"
            )
            return sanitized.geturl()
        return url
    except ValueError:
        return url


class BaselineCacheService:
    """
    Load baselines from cache, building and storing them on a miss.

    Entries are keyed by the SHA-256 fingerprint of the instance bytes, so
    an edited instance file never reuses a stale baseline. Files hold the
    raw digest followed by the codec blob; Redis keys embed the digest.
    Redis is optional and only consulted when a URL is configured.
    """

    def __init__(
        self,
        directory: Optional[str] = None,
        redis_url: Optional[str] = None,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    ):
        self.directory = Path(directory) if directory else None
        self.ttl_seconds = ttl_seconds
        self._redis: Optional[Redis] = None

        if redis_url:
            try:
                self._redis = Redis.from_url(
                    redis_url,
                    socket_connect_timeout=5,
                    socket_timeout=5
                )
                self._redis.ping()
                logger.info(f"Baseline cache connected to Redis at {_sanitize_url(redis_url)}")
            except (RedisError, ValueError) as e:
                logger.warning(f"Baseline cache Redis unavailable: {e}")
                self._redis = None

    @classmethod
    def from_config(cls, config: CacheConfig) -> "BaselineCacheService":
        return cls(
            directory=config.directory,
            redis_url=config.redis_url,
            ttl_seconds=config.ttl_seconds
        )

    @property
    def redis_available(self) -> bool:
        return self._redis is not None

    def cache_path(self, instance_path: str) -> Path:
        """Cache file for an instance: beside it, or inside the cache directory."""
        path = Path(instance_path)
        if self.directory:
            return self.directory / (path.name + CACHE_FILE_SUFFIX)
        return path.with_name(path.name + CACHE_FILE_SUFFIX)

    def _make_key(self, fingerprint: str) -> str:
        return f"baseline:{fingerprint}"

    def read_file(self, instance_path: str, fingerprint: str) -> Optional[Baseline]:
        """
        Read a cached baseline file.

        Returns None when there is no file or it belongs to another version
        of the instance.

        Raises:
            CacheError: If the file cannot be read or decoded
        """
        path = self.cache_path(instance_path)
        if not path.exists():
            return None
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CacheError(f"failed to read cache file: {e}", str(path)) from e

        if data[:_DIGEST_SIZE] != bytes.fromhex(fingerprint):
            logger.info(f"Cache file {path} is stale, instance has changed")
            return None
        try:
            return decode_baseline(data[_DIGEST_SIZE:])
        except CacheError as e:
            raise CacheError(str(e), str(path)) from e

    def write_file(self, instance_path: str, fingerprint: str, blob: bytes) -> bool:
        path = self.cache_path(instance_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(bytes.fromhex(fingerprint) + blob)
        except OSError as e:
            logger.warning(f"Error writing cache file {path}: {e}")
            return False
        logger.info(f"Wrote baseline cache {path} ({len(blob)} bytes)")
        return True

    def read_redis(self, fingerprint: str) -> Optional[Baseline]:
        """
        Raises:
            CacheError: If the stored blob cannot be decoded
        """
        if not self.redis_available:
            return None
        try:
            data = self._redis.get(self._make_key(fingerprint))
        except RedisError as e:
            logger.warning(f"Error reading from baseline cache: {e}")
            return None
        if data is None:
            logger.debug(f"Redis cache miss for instance {fingerprint[:16]}...")
            return None
        return decode_baseline(data)

    def write_redis(self, fingerprint: str, blob: bytes) -> bool:
        if not self.redis_available:
            return False
        try:
            self._redis.setex(self._make_key(fingerprint), self.ttl_seconds, blob)
        except RedisError as e:
            logger.warning(f"Error writing to baseline cache: {e}")
            return False
        logger.debug(f"Cached baseline {fingerprint[:16]}... (TTL: {self.ttl_seconds}s)")
        return True

    def load_or_build(self, instance_path: str) -> Baseline:
        """
        Return a pristine baseline for an instance file.

        Tries Redis, then the cache file. A corrupt entry is logged and
        replaced by a freshly built baseline.

        Raises:
            ParseError: If the instance has to be rebuilt and does not parse
        """
        content = Path(instance_path).read_bytes()
        fingerprint = InstanceFingerprinter.calculate(content)

        for source, read in (
            ("redis", lambda: self.read_redis(fingerprint)),
            ("file", lambda: self.read_file(instance_path, fingerprint)),
        ):
            try:
                baseline = read()
            except CacheError as e:
                logger.warning(f"Ignoring unreadable {source} cache for {instance_path}: {e}")
                continue
            if baseline is not None:
                logger.info(f"Cache hit ({source}) for {instance_path}")
                if source == "file":
                    self.write_redis(fingerprint, encode_baseline(baseline))
                return baseline

        logger.info(f"Cache miss for {instance_path}, building baseline")
        baseline = build_baseline(parse_instance(content.decode('utf-8')))
        blob = encode_baseline(baseline)
        self.write_redis(fingerprint, blob)
        self.write_file(instance_path, fingerprint, blob)
        return baseline


# Global instance for application use
_baseline_cache: Optional[BaselineCacheService] = None


def get_baseline_cache() -> Optional[BaselineCacheService]:
    """Get global baseline cache instance."""
    return _baseline_cache


def init_baseline_cache(config: CacheConfig) -> BaselineCacheService:
    """Initialize global baseline cache."""
    global _baseline_cache
    _baseline_cache = BaselineCacheService.from_config(config)
    return _baseline_cache
