"""Application Factory: lifespan wiring and documentation toggle."""

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError

from user_api.config import Settings
from user_api.container import ServiceContainer
from user_api.main import create_app


async def test_lifespan_builds_container(settings):
    app = create_app(settings)

    async with app.router.lifespan_context(app):
        container = app.state.container
        assert isinstance(container, ServiceContainer)
        assert container.settings is settings


async def test_readiness_uses_container_database(client, auth_headers):
    res = await client.get("/api/health/ready", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_docs_can_be_disabled(tmp_path):
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
        api_key="k", docs_enabled=False,
    )
    app = create_app(settings)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/swagger/v1/swagger.json")

    assert res.status_code == 404


def test_postgres_url_is_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/usuarios")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/usuarios"


def test_missing_api_key_fails_settings(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)

    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)

    assert exc_info.value.errors()[0]["loc"] == ("api_key",)
