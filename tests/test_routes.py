from collections.abc import Callable
from datetime import UTC, datetime

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from src.app.domain.exceptions import CollaboratorUnavailableError
from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.task import TaskStatus
from src.app.domain.repositories import TaskSource
from src.app.infrastructure.postgres.orm import PostgresOrm
from src.app.infrastructure.postgres.repositories import PostgresTaskSource
from tests.fakes import StubCronRegistry, StubQuotaService, StubTaskSource, make_task

HOURLY_NEXT = datetime(2024, 1, 1, 11, 0, tzinfo=UTC)


def test_role_view_renders_jobs_cron_jobs_and_quota(
    api_client: TestClient,
    task_source: StubTaskSource,
    cron_registry: StubCronRegistry,
    quota_service: StubQuotaService,
) -> None:
    task_source.tasks = [
        make_task("web", TaskStatus.PENDING, task_id="1"),
        make_task("web", TaskStatus.RUNNING, task_id="2"),
        make_task("batch", TaskStatus.FAILED, task_id="3"),
    ]
    cron_registry.jobs = [
        CronJobDefinition(owner_role="eng", name="hourly", task_config_count=3, cron_schedule="0 * * * *"),
        CronJobDefinition(owner_role="other", name="skip", task_config_count=1, cron_schedule="0 * * * *"),
    ]
    cron_registry.next_runs = {"0 * * * *": HOURLY_NEXT}
    quota_service.quota = ResourceFigure(num_cpus=4.0, ram_mb=4096, disk_mb=8192)

    response = api_client.get("/schedulerz/role", params={"role": "eng"})

    assert response.status_code == 200
    body = response.json()
    assert body["cluster_name"] == "test-cluster"
    assert body["role"] == "eng"
    assert body["exception"] is None
    assert body["jobs"] == [
        {
            "name": "batch",
            "pending_task_count": 0,
            "active_task_count": 0,
            "finished_task_count": 0,
            "failed_task_count": 1,
        },
        {
            "name": "web",
            "pending_task_count": 1,
            "active_task_count": 1,
            "finished_task_count": 0,
            "failed_task_count": 0,
        },
    ]
    (cron_job,) = body["cron_jobs"]
    assert cron_job["name"] == "hourly"
    assert cron_job["pending_task_count"] == 3
    assert cron_job["next_run_ms"] == int(HOURLY_NEXT.timestamp() * 1000)
    assert cron_job["error"] is None
    assert body["resource_quota"] == {"num_cpus": 4.0, "ram_mb": 4096, "disk_mb": 8192}
    assert body["resources_used"] == {"num_cpus": 0.0, "ram_mb": 0, "disk_mb": 0}


def test_role_view_without_role_asks_for_one(
    api_client: TestClient, task_source: StubTaskSource
) -> None:
    for params in ({}, {"role": ""}, {"role": "  "}):
        response = api_client.get("/schedulerz/role", params=params)

        assert response.status_code == 200
        body = response.json()
        assert body["exception"] == "Please specify a user."
        assert body["role"] is None
        assert body["jobs"] == []
        assert body["cron_jobs"] == []
    assert task_source.calls == []


def test_role_view_reports_bad_cron_schedule_per_row(
    api_client: TestClient, cron_registry: StubCronRegistry
) -> None:
    cron_registry.jobs = [
        CronJobDefinition(owner_role="eng", name="broken", task_config_count=1, cron_schedule="61 * * * *"),
    ]

    response = api_client.get("/schedulerz/role", params={"role": "eng"})

    assert response.status_code == 200
    (cron_job,) = response.json()["cron_jobs"]
    assert cron_job["next_run"] is None
    assert "61 * * * *" in cron_job["error"]


def test_role_view_unknown_status_is_internal_error(
    api_client: TestClient, task_source: StubTaskSource
) -> None:
    task = make_task("web", TaskStatus.RUNNING)
    task_source.tasks = [task.model_copy(update={"status": "THROTTLED"})]

    response = api_client.get("/schedulerz/role", params={"role": "eng"})

    assert response.status_code == 500


def test_role_view_unavailable_source_is_503(
    api_client: TestClient, task_source: StubTaskSource
) -> None:
    task_source.error = CollaboratorUnavailableError("task source", "connection refused")

    response = api_client.get("/schedulerz/role", params={"role": "eng"})

    assert response.status_code == 503
    assert response.json() == {"detail": "task source is unavailable"}


def test_role_view_database_failure_hides_driver_details(
    make_api_client: Callable[..., TestClient],
) -> None:
    # No tables are created, so the task query fails inside the driver.
    orm = PostgresOrm(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    client = make_api_client({TaskSource: PostgresTaskSource(orm)})

    response = client.get("/schedulerz/role", params={"role": "eng"})

    assert response.status_code == 503
    assert response.json() == {"detail": "task source is unavailable"}
    assert "SELECT" not in response.text
    assert "sqlite3" not in response.text
