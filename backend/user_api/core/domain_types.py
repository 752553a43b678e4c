"""Domain Types: the User entity and the write outcome shared by core and shell.

Invariants:
    - UserRecord is a plain data holder, no behavior
    - WriteResult carries either a stored user or a non-empty error list, never both
    - FieldError.field uses the public JSON field name (name, email, password)

Design Decisions:
    - Dataclasses over ORM rows: core stays independent of SQLAlchemy
    - WriteResult instead of raising on validation failure: the handler branches
      on result.ok and maps errors to 400
"""

from dataclasses import dataclass, field
from typing import NewType
from uuid import UUID


UserId = NewType("UserId", UUID)


@dataclass
class UserRecord:
    """A user as seen by the service layer."""
    name: str
    email: str
    password: str
    id: UUID | None = None


@dataclass(frozen=True)
class FieldError:
    """One failed field rule."""
    field: str
    message: str


@dataclass
class WriteResult:
    """Outcome of an insert/update: the persisted user, or the validation errors."""
    user: UserRecord | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls, user: UserRecord) -> "WriteResult":
        return cls(user=user)

    @classmethod
    def failure(cls, errors: list[FieldError]) -> "WriteResult":
        return cls(errors=list(errors))
