"""Root conftest: shared settings, database and client fixtures.

Invariants:
    - Every test that touches the database gets a fresh SQLite file under tmp_path
    - Clients are built with create_app(settings); the lifespan does not run under
      ASGITransport, so the container is attached to app.state by the fixture
    - InMemoryUserRepository records every call for "never reached" assertions
"""

import os
from dataclasses import replace
from uuid import UUID

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

from user_api.api.dependencies import get_user_service  # noqa: E402
from user_api.config import Settings  # noqa: E402
from user_api.container import ServiceContainer  # noqa: E402
from user_api.core.domain_types import UserRecord  # noqa: E402
from user_api.db.base import Base  # noqa: E402
from user_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from user_api.infrastructure.user_repository import SqlUserRepository  # noqa: E402
from user_api.main import create_app  # noqa: E402
from user_api.services.user_service import UserService  # noqa: E402
import user_api.models  # noqa: E402,F401

TEST_API_KEY = "test-api-key"


class InMemoryUserRepository:
    """Dict-backed UserRepository that logs each call by name."""

    def __init__(self):
        self.rows: dict[UUID, UserRecord] = {}
        self.calls: list[str] = []

    async def list_all(self) -> list[UserRecord]:
        self.calls.append("list_all")
        return [replace(u) for u in self.rows.values()]

    async def get_by_id(self, user_id: UUID) -> UserRecord | None:
        self.calls.append("get_by_id")
        user = self.rows.get(user_id)
        return replace(user) if user else None

    async def insert(self, user: UserRecord) -> None:
        self.calls.append("insert")
        self.rows[user.id] = replace(user)

    async def update(self, user: UserRecord) -> None:
        self.calls.append("update")
        if user.id in self.rows:
            self.rows[user.id] = replace(user)

    async def delete(self, user_id: UUID) -> None:
        self.calls.append("delete")
        self.rows.pop(user_id, None)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def auth_headers(api_key) -> dict[str, str]:
    return {"X-Api-Key": api_key}


@pytest.fixture
def settings(tmp_path, api_key) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
        database_pool_size=5,
        database_max_overflow=0,
        api_key=api_key,
        log_format="text",
    )


@pytest.fixture
async def db_manager(settings):
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
def repository(db_manager) -> SqlUserRepository:
    return SqlUserRepository(db_manager)


@pytest.fixture
def container(settings, db_manager, repository) -> ServiceContainer:
    return ServiceContainer(
        settings=settings, db=db_manager, users=UserService(repository),
    )


@pytest.fixture
async def client(settings, container):
    """Client over the full stack: gate, routes, service, SQLite."""
    app = create_app(settings)
    app.state.container = container
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
async def memory_client(settings, memory_repository):
    """Client whose UserService runs on the in-memory repository."""
    app = create_app(settings)
    service = UserService(memory_repository)
    app.dependency_overrides[get_user_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
