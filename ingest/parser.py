"""
Instance and Plan Parser - Read the line-oriented contest formats.

Instance file:
    C P
    <worker> <skill count>        (C times)
    <skill> <level>               (skill count times)
    <job> <days> <score> <best before> <role count>   (P times)
    <skill> <level>               (role count times)

Plan file:
    E
    <job>                         (E times)
    <worker> <worker> ...         (one name per role, in role order)

Parsing is strict about counts: every record must be present and nothing
but blank lines may follow the last one.
"""
import logging
from pathlib import Path
from typing import List, Optional

from ingest.models import (
    ParsedInstance,
    ParsedJob,
    ParsedPlan,
    ParsedPlanEntry,
    ParsedSkill,
    ParsedWorker,
)

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when input text does not follow the expected grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class _LineReader:
    """Hands out tokenized lines and remembers where it is for error messages."""

    def __init__(self, text: str):
        self._lines = [line.rstrip('\r') for line in text.split('\n')]
        while self._lines and not self._lines[-1].strip():
            self._lines.pop()
        self._index = 0

    @property
    def line_number(self) -> int:
        return self._index

    def next_tokens(self, what: str, expected: Optional[int] = None) -> List[str]:
        if self._index >= len(self._lines):
            raise ParseError(f"unexpected end of input, expected {what}", self._index + 1)
        tokens = self._lines[self._index].split()
        self._index += 1
        if not tokens:
            raise ParseError(f"empty line, expected {what}", self._index)
        if expected is not None and len(tokens) != expected:
            raise ParseError(
                f"expected {expected} token(s) for {what}, got {len(tokens)}",
                self._index
            )
        return tokens

    def number(self, token: str, what: str) -> int:
        if not (token.isascii() and token.isdigit()):
            raise ParseError(f"{what} must be a non-negative integer, got '{token}'", self._index)
        return int(token)

    def skill(self, what: str) -> ParsedSkill:
        name, level = self.next_tokens(what, expected=2)
        return ParsedSkill(name=name, level=self.number(level, f"{what} level"))

    def expect_end(self):
        for offset, line in enumerate(self._lines[self._index:]):
            if line.strip():
                raise ParseError("unexpected content after last record", self._index + offset + 1)


def parse_instance(text: str) -> ParsedInstance:
    """Parse a problem instance.

    Raises:
        ParseError: If the text does not match the instance grammar
    """
    reader = _LineReader(text)
    n_workers, n_jobs = reader.next_tokens("worker and job counts", expected=2)
    n_workers = reader.number(n_workers, "worker count")
    n_jobs = reader.number(n_jobs, "job count")

    workers = []
    for _ in range(n_workers):
        name, n_skills = reader.next_tokens("worker header", expected=2)
        n_skills = reader.number(n_skills, "skill count")
        skills = [reader.skill(f"skill of worker {name}") for _ in range(n_skills)]
        workers.append(ParsedWorker(name=name, skills=skills))

    jobs = []
    for _ in range(n_jobs):
        name, days, score, deadline, n_roles = reader.next_tokens("job header", expected=5)
        roles_count = reader.number(n_roles, "role count")
        job = ParsedJob(
            name=name,
            days_to_completion=reader.number(days, "days to completion"),
            base_score=reader.number(score, "score"),
            deadline=reader.number(deadline, "best before"),
        )
        job.roles = [reader.skill(f"role of job {name}") for _ in range(roles_count)]
        jobs.append(job)

    reader.expect_end()
    logger.debug(f"Parsed instance with {len(workers)} workers and {len(jobs)} jobs")
    return ParsedInstance(workers=workers, jobs=jobs)


def parse_plan(text: str) -> ParsedPlan:
    """Parse an assignment plan, keeping file order.

    Raises:
        ParseError: If the text does not match the plan grammar
    """
    reader = _LineReader(text)
    (n_entries,) = reader.next_tokens("planned job count", expected=1)
    n_entries = reader.number(n_entries, "planned job count")

    entries = []
    for _ in range(n_entries):
        (job_name,) = reader.next_tokens("job name", expected=1)
        worker_names = reader.next_tokens(f"workers of job {job_name}")
        entries.append(ParsedPlanEntry(job_name=job_name, worker_names=worker_names))

    reader.expect_end()
    return ParsedPlan(entries=entries)


def parse_instance_file(file_path: str) -> ParsedInstance:
    logger.info(f"Parsing {file_path}")
    return parse_instance(Path(file_path).read_text(encoding='utf-8'))


def parse_plan_file(file_path: str) -> ParsedPlan:
    logger.info(f"Parsing {file_path}")
    return parse_plan(Path(file_path).read_text(encoding='utf-8'))
