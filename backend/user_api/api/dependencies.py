"""Route Dependencies: hand the startup-built services to route handlers."""

from fastapi import Request

from user_api.container import ServiceContainer
from user_api.services.user_service import UserService


def get_container(request: Request) -> ServiceContainer:
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container not initialized")
    return container


def get_user_service(request: Request) -> UserService:
    return get_container(request).users
