from pydantic import BaseModel, Field


class CronJobDefinition(BaseModel):
    owner_role: str = Field(description="Role that owns the cron job.")
    name: str = Field(description="Job name, unique within the owner role.")
    task_config_count: int = Field(ge=0, description="Number of declared task configs.")
    cron_schedule: str = Field(description="Cron expression driving the job.")
