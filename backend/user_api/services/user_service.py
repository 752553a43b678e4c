"""User Service: validate-then-persist for writes, pass-through for reads and deletes.

Invariants:
    - insert/update never call the repository when validation fails
    - insert always assigns a fresh uuid4, discarding any caller-supplied id
    - update performs no existence check (missing id is a silent no-op)
    - Repository errors propagate unchanged
"""

import logging
from dataclasses import replace
from uuid import UUID, uuid4

from user_api.core.domain_types import UserRecord, WriteResult
from user_api.core.repository_protocols import UserRepository
from user_api.core.validate_user import validate_user

logger = logging.getLogger(__name__)


class UserService:
    """Use cases for the User entity."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_all(self) -> list[UserRecord]:
        return await self._repository.list_all()

    async def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return await self._repository.get_by_id(user_id)

    async def insert(self, user: UserRecord) -> WriteResult:
        """Validate and store a new user under a server-generated id."""
        errors = validate_user(user)
        if errors:
            return WriteResult.failure(errors)
        created = replace(user, id=uuid4())
        await self._repository.insert(created)
        logger.info("User created", extra={"user_id": str(created.id)})
        return WriteResult.success(created)

    async def update(self, user: UserRecord) -> WriteResult:
        """Validate and overwrite the row identified by user.id."""
        errors = validate_user(user)
        if errors:
            return WriteResult.failure(errors)
        await self._repository.update(user)
        logger.info("User updated", extra={"user_id": str(user.id)})
        return WriteResult.success(user)

    async def delete(self, user_id: UUID) -> None:
        await self._repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": str(user_id)})
