"""Service Container: the explicit dependency graph, built once at startup.

Invariants:
    - One container per app instance, stored on app.state.container
    - Everything inside is read-only or stateless after construction
    - Route handlers reach services only through api/dependencies.py

Design Decisions:
    - Plain dataclass over a DI framework: three collaborators, wired by hand
"""

from dataclasses import dataclass

from user_api.config import Settings
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.infrastructure.user_repository import SqlUserRepository
from user_api.services.user_service import UserService


@dataclass(frozen=True)
class ServiceContainer:
    settings: Settings
    db: DatabaseSessionManager
    users: UserService


def build_container(settings: Settings) -> ServiceContainer:
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    return ServiceContainer(
        settings=settings, db=db, users=UserService(SqlUserRepository(db)),
    )
