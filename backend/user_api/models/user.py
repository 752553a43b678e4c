"""User ORM: persists the User entity in the Usuarios table.

Invariants:
    - id is a UUID primary key, always assigned by the service before insert
    - Nome, Email, Senha are non-nullable text
    - Column names match the existing Usuarios schema (Id, Nome, Email, Senha)

Design Decisions:
    - Generic Uuid type: native UUID on PostgreSQL, CHAR(32) on SQLite (tests)
    - Python attribute names are English; the mapping happens only here
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from user_api.core.domain_types import UserRecord
from user_api.db.base import Base


class User(Base):
    """User row."""
    __tablename__ = "Usuarios"

    id: Mapped[uuid.UUID] = mapped_column("Id", Uuid, primary_key=True)
    name: Mapped[str] = mapped_column("Nome", Text, nullable=False)
    email: Mapped[str] = mapped_column("Email", Text, nullable=False)
    password: Mapped[str] = mapped_column("Senha", Text, nullable=False)

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id, name=self.name,
            email=self.email, password=self.password,
        )

    @classmethod
    def from_record(cls, record: UserRecord) -> "User":
        return cls(
            id=record.id, name=record.name,
            email=record.email, password=record.password,
        )
