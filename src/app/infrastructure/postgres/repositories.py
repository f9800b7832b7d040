from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from src.app.domain.exceptions import CollaboratorUnavailableError
from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.role_view import StatusBucket
from src.app.domain.models.task import Task
from src.app.domain.repositories import CronRegistry, QuotaService, TaskSource
from src.app.domain.status_buckets import statuses_in
from src.app.infrastructure.cron.schedule import predict_next_run
from src.app.infrastructure.postgres.mappers import OrmMapper
from src.app.infrastructure.postgres.orm import (
    CronJobRow,
    PostgresOrm,
    RoleQuotaRow,
    TaskRow,
)

logger = logging.getLogger(__name__)

# Tasks in these buckets still hold their requested resources.
_LIVE_STATUSES = sorted(
    status.value for status in statuses_in(StatusBucket.PENDING, StatusBucket.ACTIVE)
)


class PostgresTaskSource(TaskSource):
    """Reads the scheduler's task table."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def get_tasks_by_role(self, role: str) -> list[Task]:
        """Fetch every task owned by ``role``."""
        try:
            async with self._orm.session_factory() as session:
                result = await session.execute(
                    select(TaskRow).where(TaskRow.role == role).order_by(TaskRow.id)
                )
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Task query failed", extra={"role": role})
            raise CollaboratorUnavailableError("task source", str(exc)) from exc
        return [OrmMapper.to_domain_task(row) for row in rows]


class PostgresCronRegistry(CronRegistry):
    """Cron job definitions from the ``cron_jobs`` table, projected with croniter."""

    def __init__(self, orm: PostgresOrm, timezone: str = "UTC") -> None:
        self._orm = orm
        self._timezone = timezone

    async def get_cron_jobs(self) -> list[CronJobDefinition]:
        """Fetch every cron job definition across roles."""
        try:
            async with self._orm.session_factory() as session:
                result = await session.execute(select(CronJobRow))
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.exception("Cron job query failed")
            raise CollaboratorUnavailableError("cron registry", str(exc)) from exc
        return [OrmMapper.to_domain_cron_job(row) for row in rows]

    def predict_next_run(self, cron_schedule: str, after: datetime) -> datetime:
        return predict_next_run(cron_schedule, after, self._timezone)


class PostgresQuotaService(QuotaService):
    """Quota limits from ``role_quotas``; consumption summed over live tasks."""

    def __init__(self, orm: PostgresOrm) -> None:
        self._orm = orm

    async def get_consumption(self, role: str) -> ResourceFigure:
        statement = select(
            func.coalesce(func.sum(TaskRow.num_cpus), 0.0),
            func.coalesce(func.sum(TaskRow.ram_mb), 0),
            func.coalesce(func.sum(TaskRow.disk_mb), 0),
        ).where(TaskRow.role == role, TaskRow.status.in_(_LIVE_STATUSES))
        try:
            async with self._orm.session_factory() as session:
                result = await session.execute(statement)
                num_cpus, ram_mb, disk_mb = result.one()
        except SQLAlchemyError as exc:
            logger.exception("Quota consumption query failed", extra={"role": role})
            raise CollaboratorUnavailableError("quota service", str(exc)) from exc
        return ResourceFigure(num_cpus=float(num_cpus), ram_mb=int(ram_mb), disk_mb=int(disk_mb))

    async def get_quota(self, role: str) -> ResourceFigure:
        """Return the stored quota, or an all-zero figure when the role has none."""
        try:
            async with self._orm.session_factory() as session:
                row = await session.get(RoleQuotaRow, role)
        except SQLAlchemyError as exc:
            logger.exception("Quota query failed", extra={"role": role})
            raise CollaboratorUnavailableError("quota service", str(exc)) from exc
        return OrmMapper.to_domain_quota(row)
