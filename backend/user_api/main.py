"""User API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - API key gate wraps every route; CORS sits outside it so preflights are answered
    - Global error handlers map UserApiError → structured JSON responses
    - The service container is built on startup via the lifespan context manager
      and disposed on shutdown

Design Decisions:
    - create_app(settings) factory: tests build isolated apps with their own settings
    - Swagger UI served under /swagger, the prefix exempt from the gate
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.api_key_gate import ApiKeyGateMiddleware
from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.container import build_container
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

DOCS_URL = "/swagger"
OPENAPI_URL = "/swagger/v1/swagger.json"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    container = build_container(settings)
    app.state.container = container
    logger.info("User API started")
    yield
    logger.info("User API shutting down")
    await container.db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="User API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=DOCS_URL if settings.docs_enabled else None,
        openapi_url=OPENAPI_URL if settings.docs_enabled else None,
        redoc_url=None,
    )
    app.state.settings = settings

    app.add_middleware(
        ApiKeyGateMiddleware,
        api_key=settings.api_key,
        header_name=settings.api_key_header,
        exempt_paths=settings.api_key_exempt_paths,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
