#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

Shared instance/plan builders live in tests/fixtures/instances.py.
"""
