import inject

from src.app.domain.repositories import Clock, CronRegistry, QuotaService, TaskSource
from src.app.infrastructure.clock import SystemClock
from src.app.infrastructure.postgres.orm import PostgresOrm
from src.app.infrastructure.postgres.repositories import (
    PostgresCronRegistry,
    PostgresQuotaService,
    PostgresTaskSource,
)
from src.setup.cron_config import CronSettings, get_cron_settings
from src.setup.db_config import DatabaseSettings, get_database_settings


def build_bindings(
    db_settings: DatabaseSettings | None = None,
    cron_settings: CronSettings | None = None,
):
    """Return an inject config function binding the role view collaborators."""
    if db_settings is None:
        db_settings = get_database_settings()
    if cron_settings is None:
        cron_settings = get_cron_settings()

    def _config(binder: inject.Binder) -> None:
        orm = PostgresOrm(db_settings.DATABASE_URL, echo=db_settings.DATABASE_ECHO)
        binder.bind(PostgresOrm, orm)
        binder.bind(TaskSource, PostgresTaskSource(orm))
        binder.bind(CronRegistry, PostgresCronRegistry(orm, cron_settings.CRON_TIMEZONE))
        binder.bind(QuotaService, PostgresQuotaService(orm))
        binder.bind(Clock, SystemClock())

    return _config


def configure_di(
    db_settings: DatabaseSettings | None = None,
    cron_settings: CronSettings | None = None,
) -> None:
    """Configure the global injector; a no-op when it is already configured."""
    if inject.is_configured():
        return
    inject.configure(build_bindings(db_settings, cron_settings))
