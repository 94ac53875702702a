"""Shared fixtures: an app wired to the in-memory mock customers."""

from __future__ import annotations

import pytest

from reward_program.app import create_app
from reward_program.db import InMemoryCustomerProvider
from reward_program.mock_customers import MOCK_CUSTOMERS
from reward_program.services import RewardsService


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep settings from the developer's shell or .env out of the tests."""
    for name in ("REWARDS_DATA_SOURCE", "MONGODB_URI", "MONGODB_DB", "REWARDS_COLLECTION", "LOG_LEVEL", "CLIENT_ORIGIN"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("reward_program.app.load_environment", lambda: None)


@pytest.fixture
def provider() -> InMemoryCustomerProvider:
    return InMemoryCustomerProvider(MOCK_CUSTOMERS)


@pytest.fixture
def service(provider: InMemoryCustomerProvider) -> RewardsService:
    return RewardsService(provider)


@pytest.fixture
def app(provider: InMemoryCustomerProvider):
    app = create_app(provider=provider)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
