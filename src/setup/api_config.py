from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    APP_NAME: str = "schedulerz-role"
    APP_VERSION: str = "0.1.0"
    CLUSTER_NAME: str = "local"

    model_config = ConfigDict(env_file=".env", extra="ignore")

    @field_validator("CLUSTER_NAME")
    @classmethod
    def _cluster_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("CLUSTER_NAME must not be blank")
        return value


def get_api_settings() -> ApiSettings:
    return ApiSettings()  # type: ignore[call-arg]
