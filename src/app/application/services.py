from typing import cast

import inject

from src.app.application.assembler import assemble
from src.app.domain.models.role_view import RoleView
from src.app.domain.repositories import Clock, CronRegistry, QuotaService, TaskSource
from src.setup.api_config import get_api_settings


class RoleViewService:
    """Builds the per-role scheduling view from the injected collaborators."""

    def __init__(
        self,
        task_source: TaskSource | None = None,
        cron_registry: CronRegistry | None = None,
        quota_service: QuotaService | None = None,
        clock: Clock | None = None,
        cluster_name: str | None = None,
    ) -> None:
        self._task_source = task_source or cast(TaskSource, inject.instance(TaskSource))
        self._cron_registry = cron_registry or cast(CronRegistry, inject.instance(CronRegistry))
        self._quota_service = quota_service or cast(QuotaService, inject.instance(QuotaService))
        self._clock = clock or cast(Clock, inject.instance(Clock))
        self._cluster_name = cluster_name or get_api_settings().CLUSTER_NAME

    async def build_role_view(self, role: str | None, cluster_name: str | None = None) -> RoleView:
        """Return the view for ``role``; ``cluster_name`` overrides the configured one."""
        return await assemble(
            role,
            self._task_source,
            self._cron_registry,
            self._quota_service,
            cluster_name or self._cluster_name,
            clock=self._clock,
        )
