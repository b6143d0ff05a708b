"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For instance and plan builders, see tests/fixtures/instances.py
"""

import shutil
import pytest

from core.scorer import build_baseline
from tests.fixtures.instances import EXAMPLE_INSTANCE, EXAMPLE_PLAN, example_instance


@pytest.fixture
def example_baseline():
    """Pristine baseline of the official example instance."""
    return build_baseline(example_instance())


@pytest.fixture
def example_files(tmp_path):
    """Copies of the example instance and plan in a scratch directory."""
    instance_path = tmp_path / EXAMPLE_INSTANCE.name
    plan_path = tmp_path / EXAMPLE_PLAN.name
    shutil.copy(EXAMPLE_INSTANCE, instance_path)
    shutil.copy(EXAMPLE_PLAN, plan_path)
    return instance_path, plan_path
