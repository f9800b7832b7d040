from fastapi import FastAPI

import inject

from src.app.infrastructure.postgres.orm import PostgresOrm
from src.setup.api_config import ApiSettings
from src.setup.app_config import configure_di
from src.setup.logging_config import configure_logging

settings = ApiSettings()
configure_logging()
configure_di()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=f"Scheduler role view for cluster {settings.CLUSTER_NAME}",
)

async def _dispose_orm() -> None:
    await inject.instance(PostgresOrm).dispose()

app.add_event_handler("shutdown", _dispose_orm)

from src.app.presentation.routes import router as role_router  # noqa: E402

app.include_router(role_router, prefix="")
