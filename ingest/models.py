"""
Parsed Records - Strongly typed output of the text grammar parsers.

Names are kept as plain strings; nothing here is indexed yet.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ParsedSkill:
    """A (skill name, level) pair, used both for worker skills and job roles."""
    name: str
    level: int


@dataclass
class ParsedWorker:
    name: str
    skills: List[ParsedSkill] = field(default_factory=list)


@dataclass
class ParsedJob:
    name: str
    days_to_completion: int
    base_score: int
    deadline: int
    roles: List[ParsedSkill] = field(default_factory=list)


@dataclass
class ParsedInstance:
    """A problem instance as read from disk, in file order."""
    workers: List[ParsedWorker] = field(default_factory=list)
    jobs: List[ParsedJob] = field(default_factory=list)


@dataclass
class ParsedPlanEntry:
    """One planned job; worker_names are in role order."""
    job_name: str
    worker_names: List[str] = field(default_factory=list)


@dataclass
class ParsedPlan:
    entries: List[ParsedPlanEntry] = field(default_factory=list)
