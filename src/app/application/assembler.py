from __future__ import annotations

import logging
from collections.abc import Iterable

from src.app.application.aggregator import aggregate
from src.app.application.cron_projector import project
from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.role_view import JobSummary, RoleView
from src.app.domain.repositories import Clock, CronRegistry, QuotaService, TaskSource

logger = logging.getLogger(__name__)

MISSING_ROLE_MESSAGE = "Please specify a user."


def order_jobs(jobs: Iterable[JobSummary]) -> list[JobSummary]:
    # Job names are unique within a role, so the name alone is a total order.
    return sorted(jobs, key=lambda job: job.name)


def order_job_configs(jobs: Iterable[CronJobDefinition]) -> list[CronJobDefinition]:
    return sorted(
        jobs,
        key=lambda job: (job.name, job.cron_schedule, job.task_config_count),
    )


async def assemble(
    role: str | None,
    task_source: TaskSource,
    cron_registry: CronRegistry,
    quota_service: QuotaService,
    cluster_name: str,
    *,
    clock: Clock,
) -> RoleView:
    """
    Collect, classify and order everything the role page shows.

    A blank ``role`` short-circuits into a view carrying only an explanatory
    error; no collaborator is called in that case. Collaborator failures and
    unknown task statuses propagate to the caller.
    """
    if role is None or not role.strip():
        logger.info("Role view requested without a role", extra={"cluster": cluster_name})
        return RoleView(cluster_name=cluster_name, error=MISSING_ROLE_MESSAGE)

    tasks = await task_source.get_tasks_by_role(role)
    jobs = order_jobs(aggregate(tasks).values())

    cron_definitions = order_job_configs(await cron_registry.get_cron_jobs())
    cron_jobs = project(cron_definitions, role, cron_registry, clock.now())

    resources_used = await quota_service.get_consumption(role)
    resource_quota = await quota_service.get_quota(role)

    logger.debug(
        "Role view assembled",
        extra={
            "role": role,
            "tasks": len(tasks),
            "jobs": len(jobs),
            "cron_jobs": len(cron_jobs),
        },
    )
    return RoleView(
        cluster_name=cluster_name,
        role=role,
        jobs=jobs,
        cron_jobs=cron_jobs,
        resources_used=resources_used,
        resource_quota=resource_quota,
    )
