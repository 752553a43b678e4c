"""User Schemas: wire shape of the User entity.

Invariants:
    - UserPayload accepts missing text fields; they become "" so the validator
      reports them with its own messages
    - UserPayload.id is optional; insert ignores it, update compares it to the path
    - UserResponse echoes all four fields, password included
"""

from dataclasses import asdict
from uuid import UUID

from pydantic import BaseModel, Field

from user_api.core.domain_types import FieldError, UserRecord


class UserPayload(BaseModel):
    """Request body for insert and update."""
    id: UUID | None = None
    name: str | None = Field(None, examples=["Ana"])
    email: str | None = Field(None, examples=["ana@example.com"])
    password: str | None = Field(None, examples=["secret"])

    def to_record(self) -> UserRecord:
        return UserRecord(
            id=self.id,
            name=self.name or "",
            email=self.email or "",
            password=self.password or "",
        )


class UserResponse(BaseModel):
    """A stored user."""
    id: UUID
    name: str
    email: str
    password: str

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserResponse":
        return cls(**asdict(record))


class FieldErrorResponse(BaseModel):
    """One entry of the 400 error list."""
    field: str
    message: str

    @classmethod
    def from_error(cls, error: FieldError) -> "FieldErrorResponse":
        return cls(field=error.field, message=error.message)
