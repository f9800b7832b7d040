from __future__ import annotations

from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.task import Task
from src.app.domain.status_buckets import parse_task_status
from src.app.infrastructure.postgres.orm import CronJobRow, RoleQuotaRow, TaskRow


class OrmMapper:
    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            role=row.role,
            job_name=row.job_name,
            status=parse_task_status(row.status),
            num_cpus=row.num_cpus,
            ram_mb=row.ram_mb,
            disk_mb=row.disk_mb,
        )

    @staticmethod
    def to_domain_cron_job(row: CronJobRow) -> CronJobDefinition:
        return CronJobDefinition(
            owner_role=row.owner_role,
            name=row.name,
            task_config_count=row.task_config_count,
            cron_schedule=row.cron_schedule,
        )

    @staticmethod
    def to_domain_quota(row: RoleQuotaRow | None) -> ResourceFigure:
        if row is None:
            return ResourceFigure.zero()
        return ResourceFigure(num_cpus=row.num_cpus, ram_mb=row.ram_mb, disk_mb=row.disk_mb)
