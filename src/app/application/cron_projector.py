from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from src.app.domain.exceptions import InvalidCronScheduleError
from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.role_view import CronJobSummary
from src.app.domain.repositories import CronRegistry

logger = logging.getLogger(__name__)


def project(
    cron_jobs: Iterable[CronJobDefinition],
    role: str,
    registry: CronRegistry,
    now: datetime,
) -> list[CronJobSummary]:
    """
    Build one summary per cron job owned by ``role``, keeping input order.

    A schedule the registry cannot parse produces a row with ``error`` set
    instead of failing the remaining rows.
    """
    summaries: list[CronJobSummary] = []
    for job in cron_jobs:
        if job.owner_role != role:
            continue
        summaries.append(_summarize(job, registry, now))
    return summaries


def _summarize(job: CronJobDefinition, registry: CronRegistry, now: datetime) -> CronJobSummary:
    try:
        next_run = registry.predict_next_run(job.cron_schedule, after=now)
    except InvalidCronScheduleError as exc:
        logger.warning(
            "Cron schedule could not be projected",
            extra={"role": job.owner_role, "job": job.name, "cron_schedule": job.cron_schedule},
        )
        return CronJobSummary(
            name=job.name,
            pending=job.task_config_count,
            cron_schedule=job.cron_schedule,
            error=str(exc),
        )
    return CronJobSummary(
        name=job.name,
        pending=job.task_config_count,
        cron_schedule=job.cron_schedule,
        next_run=next_run,
    )
