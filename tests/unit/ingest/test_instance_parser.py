#!/usr/bin/env python3
"""
Unit tests for the instance and plan text parsers.
"""

import pytest

from ingest import ParseError, parse_instance, parse_instance_file, parse_plan, parse_plan_file
from tests.fixtures.instances import EXAMPLE_INSTANCE, EXAMPLE_PLAN, example_instance, example_plan


class TestParseInstance:
    """Test suite for parse_instance."""

    def test_01_example_file(self):
        assert parse_instance_file(str(EXAMPLE_INSTANCE)) == example_instance()

    def test_02_crlf_and_trailing_blank_lines(self):
        text = "1 1\r\nAnna 1\r\nC++ 2\r\nLogging 5 10 5 1\r\nC++ 3\r\n\r\n\n"
        instance = parse_instance(text)

        assert instance.workers[0].skills[0].name == "C++"
        assert instance.jobs[0].roles[0].level == 3

    def test_03_zero_skill_worker_and_zero_role_job(self):
        instance = parse_instance("1 1\nIdle 0\nNothing 1 1 1 0\n")

        assert instance.workers[0].skills == []
        assert instance.jobs[0].roles == []

    @pytest.mark.parametrize("text, fragment", [
        ("1\n", "expected 2 token(s) for worker and job counts"),
        ("x 1\n", "worker count must be a non-negative integer"),
        ("1 0\nAnna -1\n", "skill count must be a non-negative integer"),
        ("1 0\nAnna 2\nC++ 2\n", "unexpected end of input"),
        ("0 1\nLogging 5 10 5\nC++ 3\n", "expected 5 token(s) for job header"),
        ("0 1\nLogging 5 10 5 1\nC++\n", "expected 2 token(s) for role of job Logging"),
        ("1 0\nAnna 1\nC++ 2\nBob 1\n", "unexpected content after last record"),
        ("1 0\nAnna 1\n\nC++ 2\n", "empty line"),
    ])
    def test_04_malformed(self, text, fragment):
        with pytest.raises(ParseError) as exc_info:
            parse_instance(text)
        assert fragment in str(exc_info.value)

    def test_05_error_carries_line_number(self):
        with pytest.raises(ParseError) as exc_info:
            parse_instance("1 1\nAnna 1\nC++ two\nLogging 5 10 5 1\nC++ 3\n")

        assert exc_info.value.line_number == 3
        assert str(exc_info.value).startswith("line 3:")


class TestParsePlan:
    """Test suite for parse_plan."""

    def test_01_example_file(self):
        assert parse_plan_file(str(EXAMPLE_PLAN)) == example_plan()

    def test_02_keeps_order_and_repeats(self):
        plan = parse_plan("2\nB\nx y\nA\nx\n")
        assert [(e.job_name, e.worker_names) for e in plan.entries] == [("B", ["x", "y"]), ("A", ["x"])]

    def test_03_empty_plan(self):
        assert parse_plan("0\n").entries == []

    @pytest.mark.parametrize("text, fragment", [
        ("", "unexpected end of input"),
        ("two\n", "planned job count must be a non-negative integer"),
        ("1\nLogging Extra\nAnna\n", "expected 1 token(s) for job name"),
        ("1\nLogging\n", "unexpected end of input, expected workers of job Logging"),
        ("1\nLogging\n\nAnna\n", "empty line, expected workers of job Logging"),
        ("1\nLogging\nAnna\nWebChat\n", "unexpected content after last record"),
    ])
    def test_04_malformed(self, text, fragment):
        with pytest.raises(ParseError) as exc_info:
            parse_plan(text)
        assert fragment in str(exc_info.value)
