import pytest

from src.app.domain.exceptions import UnknownTaskStatusError
from src.app.domain.models.role_view import StatusBucket
from src.app.domain.models.task import TaskStatus
from src.app.domain.status_buckets import classify, parse_task_status, statuses_in


@pytest.mark.parametrize(
    ("status", "bucket"),
    [
        (TaskStatus.INIT, StatusBucket.PENDING),
        (TaskStatus.PENDING, StatusBucket.PENDING),
        (TaskStatus.ASSIGNED, StatusBucket.ACTIVE),
        (TaskStatus.STARTING, StatusBucket.ACTIVE),
        (TaskStatus.RESTARTING, StatusBucket.ACTIVE),
        (TaskStatus.UPDATING, StatusBucket.ACTIVE),
        (TaskStatus.RUNNING, StatusBucket.ACTIVE),
        (TaskStatus.KILLING, StatusBucket.FINISHED),
        (TaskStatus.KILLED, StatusBucket.FINISHED),
        (TaskStatus.FINISHED, StatusBucket.FINISHED),
        (TaskStatus.PREEMPTING, StatusBucket.FINISHED),
        (TaskStatus.ROLLBACK, StatusBucket.FINISHED),
        (TaskStatus.LOST, StatusBucket.FAILED),
        (TaskStatus.FAILED, StatusBucket.FAILED),
        (TaskStatus.UNKNOWN, StatusBucket.FAILED),
    ],
)
def test_classify_maps_each_status(status: TaskStatus, bucket: StatusBucket) -> None:
    assert classify(status) is bucket


def test_every_status_has_exactly_one_bucket() -> None:
    covered = [statuses_in(bucket) for bucket in StatusBucket]
    assert frozenset().union(*covered) == frozenset(TaskStatus)
    assert sum(len(group) for group in covered) == len(TaskStatus)


def test_classify_accepts_raw_values() -> None:
    assert classify("RUNNING") is StatusBucket.ACTIVE


@pytest.mark.parametrize("raw", ["THROTTLED", "running", ""])
def test_classify_rejects_unknown_status(raw: str) -> None:
    with pytest.raises(UnknownTaskStatusError) as excinfo:
        classify(raw)
    assert excinfo.value.status == raw


def test_parse_task_status_passes_members_through() -> None:
    assert parse_task_status(TaskStatus.KILLED) is TaskStatus.KILLED


def test_statuses_in_combines_buckets() -> None:
    assert statuses_in(StatusBucket.PENDING, StatusBucket.ACTIVE) == frozenset(
        {
            TaskStatus.INIT,
            TaskStatus.PENDING,
            TaskStatus.ASSIGNED,
            TaskStatus.STARTING,
            TaskStatus.RESTARTING,
            TaskStatus.UPDATING,
            TaskStatus.RUNNING,
        }
    )
