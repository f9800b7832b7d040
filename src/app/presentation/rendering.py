from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.role_view import CronJobSummary, JobSummary, RoleView


class JobEntry(BaseModel):
    name: str
    pending_task_count: int
    active_task_count: int
    finished_task_count: int
    failed_task_count: int


class CronJobEntry(BaseModel):
    name: str
    pending_task_count: int
    cron_schedule: str
    next_run: datetime | None = None
    next_run_ms: int | None = Field(default=None, description="Next run as epoch milliseconds.")
    error: str | None = None


class ResourceEntry(BaseModel):
    num_cpus: float
    ram_mb: int
    disk_mb: int


class RoleViewResponse(BaseModel):
    cluster_name: str
    role: str | None = None
    exception: str | None = Field(default=None, description="Set instead of data when no role was given.")
    jobs: list[JobEntry] = Field(default_factory=list)
    cron_jobs: list[CronJobEntry] = Field(default_factory=list)
    resources_used: ResourceEntry | None = None
    resource_quota: ResourceEntry | None = None


def _job_entry(job: JobSummary) -> JobEntry:
    return JobEntry(
        name=job.name,
        pending_task_count=job.pending,
        active_task_count=job.active,
        finished_task_count=job.finished,
        failed_task_count=job.failed,
    )


def _cron_job_entry(job: CronJobSummary) -> CronJobEntry:
    next_run_ms = None
    if job.next_run is not None:
        next_run_ms = int(job.next_run.timestamp() * 1000)
    return CronJobEntry(
        name=job.name,
        pending_task_count=job.pending,
        cron_schedule=job.cron_schedule,
        next_run=job.next_run,
        next_run_ms=next_run_ms,
        error=job.error,
    )


def _resource_entry(figure: ResourceFigure | None) -> ResourceEntry | None:
    if figure is None:
        return None
    return ResourceEntry(num_cpus=figure.num_cpus, ram_mb=figure.ram_mb, disk_mb=figure.disk_mb)


def render_role_view(view: RoleView) -> RoleViewResponse:
    """Turn an assembled view into the response payload."""
    return RoleViewResponse(
        cluster_name=view.cluster_name,
        role=view.role,
        exception=view.error,
        jobs=[_job_entry(job) for job in view.jobs],
        cron_jobs=[_cron_job_entry(job) for job in view.cron_jobs],
        resources_used=_resource_entry(view.resources_used),
        resource_quota=_resource_entry(view.resource_quota),
    )
