from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResourceFigure(BaseModel):
    """Aggregate resource amounts, used for both quota limits and consumption."""

    model_config = ConfigDict(frozen=True)

    num_cpus: float = Field(default=0.0, ge=0, description="CPU cores.")
    ram_mb: int = Field(default=0, ge=0, description="RAM in megabytes.")
    disk_mb: int = Field(default=0, ge=0, description="Disk in megabytes.")

    @classmethod
    def zero(cls) -> ResourceFigure:
        return cls()
