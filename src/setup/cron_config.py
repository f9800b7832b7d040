from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class CronSettings(BaseSettings):
    """Time zone in which cron expressions are evaluated."""

    CRON_TIMEZONE: str = "UTC"

    model_config = ConfigDict(env_file=".env", extra="ignore")

    @field_validator("CRON_TIMEZONE")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        if value == "UTC":
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown time zone: {value}") from exc
        return value


def get_cron_settings() -> CronSettings:
    return CronSettings()
