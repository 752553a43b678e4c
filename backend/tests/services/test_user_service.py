"""User Service: validate-then-persist orchestration against an in-memory repository.

Tests cover:
    - reads delegate to the repository unchanged
    - insert assigns a fresh id and stores the user
    - failed validation never reaches the repository
    - update performs no existence check
    - repository errors propagate unchanged
"""

from uuid import uuid4

import pytest

from user_api.core.domain_types import FieldError, UserRecord
from user_api.core.errors import ConnectivityError
from user_api.services.user_service import UserService


def _valid_user(**overrides) -> UserRecord:
    fields = {"name": "Teste", "email": "teste@teste.com", "password": "123456"}
    fields.update(overrides)
    return UserRecord(**fields)


@pytest.fixture
def service(memory_repository) -> UserService:
    return UserService(memory_repository)


async def test_get_all_returns_repository_rows(service, memory_repository):
    user = _valid_user(id=uuid4())
    memory_repository.rows[user.id] = user

    assert await service.get_all() == [user]
    assert memory_repository.calls == ["list_all"]


async def test_get_by_id_returns_user(service, memory_repository):
    user = _valid_user(id=uuid4())
    memory_repository.rows[user.id] = user

    assert await service.get_by_id(user.id) == user


async def test_get_by_id_absent_returns_none(service):
    assert await service.get_by_id(uuid4()) is None


async def test_insert_assigns_new_id_and_persists(service, memory_repository):
    client_id = uuid4()
    result = await service.insert(_valid_user(id=client_id))

    assert result.ok
    assert result.user.id is not None
    assert result.user.id != client_id
    assert memory_repository.calls == ["insert"]
    assert memory_repository.rows[result.user.id] == result.user


async def test_insert_without_id_gets_one(service):
    result = await service.insert(_valid_user())
    assert result.ok
    assert result.user.id is not None


async def test_insert_ids_are_unique(service):
    first = await service.insert(_valid_user())
    second = await service.insert(_valid_user())
    assert first.user.id != second.user.id


async def test_insert_invalid_user_is_not_persisted(service, memory_repository):
    result = await service.insert(_valid_user(name=""))

    assert not result.ok
    assert result.errors == [FieldError("name", "Name is required.")]
    assert "insert" not in memory_repository.calls
    assert memory_repository.rows == {}


async def test_update_valid_user_calls_repository(service, memory_repository):
    user = _valid_user(id=uuid4())
    memory_repository.rows[user.id] = user
    changed = _valid_user(id=user.id, name="Outro")

    result = await service.update(changed)

    assert result.ok
    assert memory_repository.calls == ["update"]
    assert memory_repository.rows[user.id].name == "Outro"


async def test_update_missing_user_is_silent(service, memory_repository):
    result = await service.update(_valid_user(id=uuid4()))

    assert result.ok
    assert memory_repository.calls == ["update"]
    assert memory_repository.rows == {}


async def test_update_invalid_user_is_not_persisted(service, memory_repository):
    user = _valid_user(id=uuid4())
    memory_repository.rows[user.id] = user

    result = await service.update(_valid_user(id=user.id, email="broken"))

    assert not result.ok
    assert result.errors == [FieldError("email", "Email is invalid.")]
    assert memory_repository.calls == []
    assert memory_repository.rows[user.id].email == "teste@teste.com"


async def test_delete_delegates(service, memory_repository):
    user = _valid_user(id=uuid4())
    memory_repository.rows[user.id] = user

    await service.delete(user.id)

    assert memory_repository.calls == ["delete"]
    assert memory_repository.rows == {}


async def test_delete_missing_user_is_silent(service, memory_repository):
    await service.delete(uuid4())
    assert memory_repository.calls == ["delete"]


async def test_repository_errors_propagate():
    class _DownRepository:
        async def list_all(self):
            raise ConnectivityError("Database unreachable")

        async def insert(self, user):
            raise ConnectivityError("Database unreachable")

    service = UserService(_DownRepository())
    with pytest.raises(ConnectivityError):
        await service.get_all()
    with pytest.raises(ConnectivityError):
        await service.insert(_valid_user())
