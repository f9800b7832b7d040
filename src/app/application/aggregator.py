from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from src.app.domain.models.role_view import JobSummary, StatusBucket
from src.app.domain.models.task import Task
from src.app.domain.status_buckets import classify


def aggregate(tasks: Iterable[Task]) -> dict[str, JobSummary]:
    """
    Group ``tasks`` by job name and count them per status bucket.

    The returned mapping carries no meaningful order. ``UnknownTaskStatusError``
    propagates and aborts the whole aggregation.
    """
    counts: dict[str, Counter[StatusBucket]] = {}
    for task in tasks:
        job_counts = counts.get(task.job_name)
        if job_counts is None:
            job_counts = Counter()
            counts[task.job_name] = job_counts
        job_counts[classify(task.status)] += 1

    return {
        name: JobSummary(
            name=name,
            pending=job_counts[StatusBucket.PENDING],
            active=job_counts[StatusBucket.ACTIVE],
            finished=job_counts[StatusBucket.FINISHED],
            failed=job_counts[StatusBucket.FAILED],
        )
        for name, job_counts in counts.items()
    }
