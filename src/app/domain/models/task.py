from enum import Enum

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    INIT = "INIT"
    PENDING = "PENDING"
    ASSIGNED = "ASSIGNED"
    STARTING = "STARTING"
    RESTARTING = "RESTARTING"
    UPDATING = "UPDATING"
    RUNNING = "RUNNING"
    KILLING = "KILLING"
    KILLED = "KILLED"
    FINISHED = "FINISHED"
    PREEMPTING = "PREEMPTING"
    ROLLBACK = "ROLLBACK"
    LOST = "LOST"
    FAILED = "FAILED"
    UNKNOWN = "UNKNOWN"


class Task(BaseModel):
    id: str = Field(description="Unique task identifier.")
    role: str = Field(description="Role that owns the task's job.")
    job_name: str = Field(description="Name of the job the task belongs to.")
    status: TaskStatus = Field(description="Lifecycle status at observation time.")
    num_cpus: float = Field(default=0.0, ge=0, description="Requested CPUs.")
    ram_mb: int = Field(default=0, ge=0, description="Requested RAM in megabytes.")
    disk_mb: int = Field(default=0, ge=0, description="Requested disk in megabytes.")
