from src.app.domain.models.cron_job import CronJobDefinition
from src.app.domain.models.resources import ResourceFigure
from src.app.domain.models.role_view import (
    CronJobSummary,
    JobSummary,
    RoleView,
    StatusBucket,
)
from src.app.domain.models.task import Task, TaskStatus

__all__ = [
    "Task",
    "TaskStatus",
    "StatusBucket",
    "CronJobDefinition",
    "ResourceFigure",
    "JobSummary",
    "CronJobSummary",
    "RoleView",
]
