from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.app.domain.models.resources import ResourceFigure


class StatusBucket(str, Enum):
    """Display category a task status is classified into."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class JobSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Job name.")
    pending: int = Field(default=0, ge=0)
    active: int = Field(default=0, ge=0)
    finished: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)


class CronJobSummary(BaseModel):
    """One row per cron job; ``error`` replaces ``next_run`` when the schedule is unusable."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Cron job name.")
    pending: int = Field(ge=0, description="Declared task config count.")
    cron_schedule: str = Field(description="Cron expression as declared.")
    next_run: datetime | None = Field(default=None, description="Next execution instant (UTC).")
    error: str | None = Field(default=None, description="Why next_run could not be projected.")

    @model_validator(mode="after")
    def _next_run_or_error(self) -> CronJobSummary:
        if (self.next_run is None) == (self.error is None):
            raise ValueError("Exactly one of next_run and error must be set.")
        return self


class RoleView(BaseModel):
    model_config = ConfigDict(frozen=True)

    cluster_name: str
    role: str | None = None
    error: str | None = None
    jobs: list[JobSummary] = Field(default_factory=list)
    cron_jobs: list[CronJobSummary] = Field(default_factory=list)
    resources_used: ResourceFigure | None = None
    resource_quota: ResourceFigure | None = None
