from __future__ import annotations

from datetime import datetime
from typing import Protocol

from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.task import Task


class TaskSource(Protocol):
    """Read access to the scheduler's current tasks."""

    async def get_tasks_by_role(self, role: str) -> list[Task]:
        """Return every task owned by ``role``; empty when there are none."""


class CronRegistry(Protocol):
    """Read access to cron job definitions and schedule projection."""

    async def get_cron_jobs(self) -> list[CronJobDefinition]:
        """Return all known cron job definitions, across roles."""

    def predict_next_run(self, cron_schedule: str, after: datetime) -> datetime:
        """Return the first execution instant strictly after ``after``.

        Raises ``InvalidCronScheduleError`` for malformed expressions.
        """


class QuotaService(Protocol):
    """Resource quota lookups for a role."""

    async def get_consumption(self, role: str) -> ResourceFigure:
        """Return the resources currently requested by the role's live tasks."""

    async def get_quota(self, role: str) -> ResourceFigure:
        """Return the role's resource quota."""


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current, timezone-aware time."""
