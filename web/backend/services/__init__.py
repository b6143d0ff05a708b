"""Business logic services."""

from .instance_service import InstanceRegistry
