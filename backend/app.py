"""FastAPI application factory."""

from __future__ import annotations

from datetime import timedelta

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from api.errors import register_exception_handlers
from api.middleware import RequestLogMiddleware
from api.v1 import api_router
from core import Settings, TokenService, get_settings
from db import create_engine, create_session_maker

API_PREFIX = "/api"


def create_app(
    *,
    app_settings: Settings | None = None,
    session_maker: async_sessionmaker[AsyncSession] | None = None,
    token_service: TokenService | None = None,
) -> FastAPI:
    """Build the application with explicitly provided storage and token handles.

    Tests pass their own ``session_maker``; otherwise one is built from
    ``DATABASE_URL``.
    """
    resolved_settings = app_settings or get_settings()

    application = FastAPI(title="Bulletin Board API")
    application.state.settings = resolved_settings
    application.state.session_maker = session_maker or create_session_maker(
        create_engine(resolved_settings.database_url, echo=resolved_settings.database_echo)
    )
    application.state.token_service = token_service or TokenService(
        resolved_settings.secret_key,
        lifetime=timedelta(minutes=resolved_settings.access_token_expire_minutes),
    )

    application.add_middleware(RequestLogMiddleware)
    register_exception_handlers(application)
    application.include_router(api_router, prefix=API_PREFIX)

    @application.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return application
