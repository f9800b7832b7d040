"""Mapping of task lifecycle statuses to the four display buckets.

Every ``TaskStatus`` member must appear in ``_BUCKETS``. A status the table
does not know about is treated as a programming error and raised, never
counted under a default bucket.
"""

from __future__ import annotations

from src.app.domain.exceptions import UnknownTaskStatusError
from src.app.domain.models.role_view import StatusBucket
from src.app.domain.models.task import TaskStatus

_BUCKETS: dict[TaskStatus, StatusBucket] = {
    TaskStatus.INIT: StatusBucket.PENDING,
    TaskStatus.PENDING: StatusBucket.PENDING,
    TaskStatus.ASSIGNED: StatusBucket.ACTIVE,
    TaskStatus.STARTING: StatusBucket.ACTIVE,
    TaskStatus.RESTARTING: StatusBucket.ACTIVE,
    TaskStatus.UPDATING: StatusBucket.ACTIVE,
    TaskStatus.RUNNING: StatusBucket.ACTIVE,
    TaskStatus.KILLING: StatusBucket.FINISHED,
    TaskStatus.KILLED: StatusBucket.FINISHED,
    TaskStatus.FINISHED: StatusBucket.FINISHED,
    TaskStatus.PREEMPTING: StatusBucket.FINISHED,
    TaskStatus.ROLLBACK: StatusBucket.FINISHED,
    TaskStatus.LOST: StatusBucket.FAILED,
    TaskStatus.FAILED: StatusBucket.FAILED,
    TaskStatus.UNKNOWN: StatusBucket.FAILED,
}


def parse_task_status(raw: TaskStatus | str) -> TaskStatus:
    """Coerce a raw status value, raising ``UnknownTaskStatusError`` for values outside the enum."""
    if isinstance(raw, TaskStatus):
        return raw
    try:
        return TaskStatus(raw)
    except ValueError:
        raise UnknownTaskStatusError(raw) from None


def classify(status: TaskStatus | str) -> StatusBucket:
    """Return the display bucket for ``status``."""
    bucket = _BUCKETS.get(parse_task_status(status))
    if bucket is None:
        raise UnknownTaskStatusError(status)
    return bucket


def statuses_in(*buckets: StatusBucket) -> frozenset[TaskStatus]:
    """Return every status that classifies into one of ``buckets``."""
    wanted = set(buckets)
    return frozenset(status for status, bucket in _BUCKETS.items() if bucket in wanted)
