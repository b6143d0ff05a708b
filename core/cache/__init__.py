"""Cache Module - Baseline codec and caching services."""
from core.cache.codec import (
    FORMAT_VERSION,
    decode_baseline,
    encode_baseline,
)
from core.cache.baseline_cache import (
    BaselineCacheService,
    get_baseline_cache,
    init_baseline_cache,
)

__all__ = [
    'FORMAT_VERSION',
    'decode_baseline',
    'encode_baseline',
    'BaselineCacheService',
    'get_baseline_cache',
    'init_baseline_cache',
]
