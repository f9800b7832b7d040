from __future__ import annotations

from typing import Any

from sqlalchemy import Float, Integer, String
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class TaskRow(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    role: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    job_name: Mapped[str] = mapped_column(String(256), nullable=False)
    # Stored as plain text so statuses added upstream surface as errors on read.
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    num_cpus: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    ram_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    disk_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class CronJobRow(Base):
    __tablename__ = "cron_jobs"

    owner_role: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), primary_key=True)
    cron_schedule: Mapped[str] = mapped_column(String(128), nullable=False)
    task_config_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class RoleQuotaRow(Base):
    __tablename__ = "role_quotas"

    role: Mapped[str] = mapped_column(String(128), primary_key=True)
    num_cpus: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    ram_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    disk_mb: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class PostgresOrm:
    """
    SQLAlchemy async ORM holder. Create once and inject where needed.
    """

    def __init__(self, database_url: str, *, echo: bool = False, **engine_options: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(database_url, echo=echo, **engine_options)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine, expire_on_commit=False
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        return self._session_factory

    async def dispose(self) -> None:
        await self._engine.dispose()
