"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via the service container

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Async in Protocol: implementations do IO; the pure validator never awaits
"""

from typing import Protocol
from uuid import UUID

from user_api.core.domain_types import UserRecord


class UserRepository(Protocol):
    """Contract for user persistence: one statement per call."""
    async def list_all(self) -> list[UserRecord]: ...
    async def get_by_id(self, user_id: UUID) -> UserRecord | None: ...
    async def insert(self, user: UserRecord) -> None: ...
    async def update(self, user: UserRecord) -> None: ...
    async def delete(self, user_id: UUID) -> None: ...
