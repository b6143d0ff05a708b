"""Ingest Module - Parsers for instance and plan files."""
from ingest.models import (
    ParsedInstance,
    ParsedJob,
    ParsedPlan,
    ParsedPlanEntry,
    ParsedSkill,
    ParsedWorker,
)
from ingest.parser import (
    ParseError,
    parse_instance,
    parse_instance_file,
    parse_plan,
    parse_plan_file,
)

__all__ = [
    'ParsedInstance',
    'ParsedJob',
    'ParsedPlan',
    'ParsedPlanEntry',
    'ParsedSkill',
    'ParsedWorker',
    'ParseError',
    'parse_instance',
    'parse_instance_file',
    'parse_plan',
    'parse_plan_file',
]
