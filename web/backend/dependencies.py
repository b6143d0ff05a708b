#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from .config import get_config
from .services.instance_service import InstanceRegistry


@lru_cache()
def get_instance_registry() -> InstanceRegistry:
    """
    FastAPI dependency returning the process-wide instance registry.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(registry: InstanceRegistry = Depends(get_instance_registry)):
            ...
    """
    return InstanceRegistry.from_config(get_config())
