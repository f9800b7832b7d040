from __future__ import annotations

import importlib
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient
from fastapi import FastAPI

from src.app.domain.repositories import Clock, CronRegistry, QuotaService, TaskSource
from tests.fakes import FixedClock, StubCronRegistry, StubQuotaService, StubTaskSource


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("CLUSTER_NAME", "test-cluster")


@pytest.fixture
def task_source() -> StubTaskSource:
    return StubTaskSource()


@pytest.fixture
def cron_registry() -> StubCronRegistry:
    return StubCronRegistry()


@pytest.fixture
def quota_service() -> StubQuotaService:
    return StubQuotaService()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    bindings: dict[object, object],
) -> Callable[[object], object]:
    """Patch `inject.instance` to return the stub bound to each interface."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface in bindings:
            return bindings[interface]
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def stub_bindings(
    task_source: StubTaskSource,
    cron_registry: StubCronRegistry,
    quota_service: StubQuotaService,
    clock: FixedClock,
) -> dict[object, object]:
    return {
        TaskSource: task_source,
        CronRegistry: cron_registry,
        QuotaService: quota_service,
        Clock: clock,
    }


@pytest.fixture
def make_api_client(
    env_settings: None,
    monkeypatch: pytest.MonkeyPatch,
    stub_bindings: dict[object, object],
) -> Callable[..., TestClient]:
    """Build a FastAPI test client; ``overrides`` replace individual stub bindings."""

    def _make(overrides: dict[object, object] | None = None) -> TestClient:
        _patch_inject_instance(monkeypatch, {**stub_bindings, **(overrides or {})})

        # Reload so the module-level service picks up the patched injector.
        importlib.reload(importlib.import_module("src.app.application.services"))
        routes_module = importlib.reload(importlib.import_module("src.app.presentation.routes"))

        app = FastAPI()
        app.include_router(routes_module.router)
        return TestClient(app)

    return _make


@pytest.fixture
def api_client(make_api_client: Callable[..., TestClient]) -> TestClient:
    """FastAPI test client with the role view wired to the stub collaborators."""
    return make_api_client()
