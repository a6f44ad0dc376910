"""Shared test fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from user_api.app.core.config import Settings
from user_api.app.main import create_app
from user_api.app.repositories.memory import InMemoryUserRepository
from user_api.app.services.user_service import UserService


class FakeClock:
    """Deterministic UTC clock advancing one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository(clock: FakeClock) -> InMemoryUserRepository:
    """Fresh repository with a controllable clock."""
    return InMemoryUserRepository(clock=clock)


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserService:
    return UserService(repository)


@pytest.fixture
def app(repository: InMemoryUserRepository):
    return create_app(repository=repository, settings=Settings())


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
