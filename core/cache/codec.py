"""
Baseline Codec - Versioned binary encoding of a Baseline.

Layout (little-endian):
    magic    4s   b"HCSB"
    version  u16
    body     skills, workers, jobs, level map
    crc32    u32  over body

Strings are u32 length + UTF-8 bytes; counts and IDs are u32; levels, days,
scores and deadlines are u64. Availability is not stored: a decoded
baseline always starts with every worker free at time 0.
"""
import logging
import struct
import zlib
from typing import Dict, List, Tuple

from core.scorer.exceptions import CacheError
from core.scorer.models import Baseline, Job, Worker

logger = logging.getLogger(__name__)

MAGIC = b"HCSB"
FORMAT_VERSION = 1

_HEADER = struct.Struct("<4sH")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_PAIR = struct.Struct("<IQ")
_LEVEL_ENTRY = struct.Struct("<IIQ")
_JOB_ATTRS = struct.Struct("<QQQ")


class _Writer:
    def __init__(self):
        self._parts: List[bytes] = []

    def u32(self, value: int):
        self._parts.append(_U32.pack(value))

    def u64(self, value: int):
        self._parts.append(_U64.pack(value))

    def string(self, value: str):
        raw = value.encode('utf-8')
        self.u32(len(raw))
        self._parts.append(raw)

    def pack(self, fmt: struct.Struct, *values: int):
        self._parts.append(fmt.pack(*values))

    def getvalue(self) -> bytes:
        return b"".join(self._parts)


class _Reader:
    def __init__(self, data: bytes):
        self._data = memoryview(data)
        self._offset = 0

    def unpack(self, fmt: struct.Struct) -> Tuple:
        values = fmt.unpack_from(self._data, self._offset)
        self._offset += fmt.size
        return values

    def u32(self) -> int:
        return self.unpack(_U32)[0]

    def u64(self) -> int:
        return self.unpack(_U64)[0]

    def string(self) -> str:
        length = self.u32()
        end = self._offset + length
        if end > len(self._data):
            raise CacheError("truncated string in baseline blob")
        value = bytes(self._data[self._offset:end]).decode('utf-8')
        self._offset = end
        return value

    def at_end(self) -> bool:
        return self._offset == len(self._data)


def encode_baseline(baseline: Baseline) -> bytes:
    """
    Serialize a baseline's static records and level map.

    Encode a pristine baseline: a baseline that has already been scored
    persists its post-run levels.
    """
    body = _Writer()

    body.u32(len(baseline.skill_ids))
    for name in baseline.skill_names:
        body.string(name)

    body.u32(len(baseline.workers))
    for worker in baseline.workers:
        body.string(worker.name)
        body.u32(len(worker.skills))
        for skill_id in worker.skills:
            body.u32(skill_id)
        body.u32(len(worker.levels))
        for skill_id, level in worker.levels.items():
            body.pack(_PAIR, skill_id, level)

    body.u32(len(baseline.jobs))
    for job in baseline.jobs:
        body.string(job.name)
        body.pack(_JOB_ATTRS, job.days_to_completion, job.base_score, job.deadline)
        body.u32(len(job.roles))
        for skill_id, level in job.roles:
            body.pack(_PAIR, skill_id, level)

    body.u32(len(baseline.levels))
    for (worker_id, skill_id), level in baseline.levels.items():
        body.pack(_LEVEL_ENTRY, worker_id, skill_id, level)

    payload = body.getvalue()
    return _HEADER.pack(MAGIC, FORMAT_VERSION) + payload + _U32.pack(zlib.crc32(payload))


def _check_id(what: str, value: int, limit: int):
    if value >= limit:
        raise CacheError(f"{what} refers to id {value} outside 0..{limit - 1}")


def _decode_body(reader: _Reader) -> Baseline:
    skill_ids: Dict[str, int] = {}
    skill_count = reader.u32()
    for skill_id in range(skill_count):
        skill_ids[reader.string()] = skill_id
    if len(skill_ids) != skill_count:
        raise CacheError("duplicate skill names in baseline blob")

    worker_ids: Dict[str, int] = {}
    workers: List[Worker] = []
    for worker_id in range(reader.u32()):
        worker = Worker(id=worker_id, name=reader.string())
        worker.skills = [reader.u32() for _ in range(reader.u32())]
        for skill_id in worker.skills:
            _check_id(f"skill of worker {worker.name}", skill_id, len(skill_ids))
        for _ in range(reader.u32()):
            skill_id, level = reader.unpack(_PAIR)
            _check_id(f"level of worker {worker.name}", skill_id, len(skill_ids))
            worker.levels[skill_id] = level
        worker_ids[worker.name] = worker_id
        workers.append(worker)

    job_ids: Dict[str, int] = {}
    jobs: List[Job] = []
    for job_id in range(reader.u32()):
        name = reader.string()
        days, score, deadline = reader.unpack(_JOB_ATTRS)
        roles = [reader.unpack(_PAIR) for _ in range(reader.u32())]
        for skill_id, _ in roles:
            _check_id(f"role of job {name}", skill_id, len(skill_ids))
        job_ids[name] = job_id
        jobs.append(Job(
            id=job_id,
            name=name,
            roles=roles,
            days_to_completion=days,
            base_score=score,
            deadline=deadline
        ))

    levels = {}
    for _ in range(reader.u32()):
        worker_id, skill_id, level = reader.unpack(_LEVEL_ENTRY)
        _check_id("level map worker", worker_id, len(workers))
        _check_id("level map skill", skill_id, len(skill_ids))
        levels[(worker_id, skill_id)] = level

    return Baseline(
        worker_ids=worker_ids,
        job_ids=job_ids,
        skill_ids=skill_ids,
        workers=workers,
        jobs=jobs,
        levels=levels
    )


def decode_baseline(data: bytes) -> Baseline:
    """
    Rebuild a baseline from `encode_baseline` output.

    Raises:
        CacheError: If the blob is foreign, from another format version,
            corrupt, truncated or refers to ids outside its tables
    """
    minimum = _HEADER.size + _U32.size
    if len(data) < minimum:
        raise CacheError(f"baseline blob too short ({len(data)} bytes)")

    magic, version = _HEADER.unpack_from(data, 0)
    if magic != MAGIC:
        raise CacheError("not a baseline blob")
    if version != FORMAT_VERSION:
        raise CacheError(f"unsupported baseline format version {version} (expected {FORMAT_VERSION})")

    payload = data[_HEADER.size:-_U32.size]
    (checksum,) = _U32.unpack_from(data, len(data) - _U32.size)
    if zlib.crc32(payload) != checksum:
        raise CacheError("baseline blob checksum mismatch")

    reader = _Reader(payload)
    try:
        baseline = _decode_body(reader)
    except (struct.error, UnicodeDecodeError) as e:
        raise CacheError(f"failed to decode baseline: {e}") from e
    if not reader.at_end():
        raise CacheError("trailing bytes after baseline body")

    logger.debug(f"Decoded baseline: {len(baseline.workers)} workers, {len(baseline.jobs)} jobs")
    return baseline
