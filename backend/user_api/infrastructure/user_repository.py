"""SQL User Repository: UserRepository implementation on async SQLAlchemy.

Invariants:
    - Each operation opens its own session and releases it before returning
    - Each operation issues exactly one parameterized statement
    - update/delete on a missing id affect zero rows and are not errors
    - Returns UserRecord, never ORM instances

Design Decisions:
    - Statements built with select/update/delete constructs: SQLAlchemy binds
      every value as a parameter
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select, update

from user_api.core.domain_types import UserRecord
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Persists users in the Usuarios table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_all(self) -> list[UserRecord]:
        async with self._db.session() as session:
            result = await session.execute(select(User))
            return [row.to_record() for row in result.scalars().all()]

    async def get_by_id(self, user_id: UUID) -> UserRecord | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(User).where(User.id == user_id),
            )
            row = result.scalar_one_or_none()
            return row.to_record() if row else None

    async def insert(self, user: UserRecord) -> None:
        async with self._db.session() as session:
            session.add(User.from_record(user))
            await session.commit()

    async def update(self, user: UserRecord) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                update(User)
                .where(User.id == user.id)
                .values(
                    name=user.name, email=user.email, password=user.password,
                )
                .execution_options(synchronize_session=False),
            )
            await session.commit()
            if result.rowcount == 0:
                logger.debug(
                    "Update matched no rows", extra={"user_id": str(user.id)},
                )

    async def delete(self, user_id: UUID) -> None:
        async with self._db.session() as session:
            await session.execute(
                delete(User)
                .where(User.id == user_id)
                .execution_options(synchronize_session=False),
            )
            await session.commit()
