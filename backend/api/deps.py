"""FastAPI dependencies wiring storage, services and the current principal."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core import AuthenticationError, InternalError, Settings, TokenService
from models import User
from repositories import CommentRepository, LikeRepository, PostRepository, UserRepository
from services import AccountService, CommentService, LikeService, PostService
from services.auth import authenticate

logger = logging.getLogger(__name__)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_maker = request.app.state.session_maker
    async with session_maker() as session:
        yield session


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_current_user(
    request: Request,
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
    app_settings: Settings = Depends(get_app_settings),
) -> User:
    """Resolve the request principal from the credential cookie.

    Rejections raise ``AuthenticationError``; the exception handler clears
    the cookie and answers 401 before the route body runs.
    """
    try:
        user = await authenticate(
            request.cookies.get(app_settings.auth_cookie_name),
            tokens=tokens,
            users=UserRepository(session),
        )
    except AuthenticationError as exc:
        logger.info(
            "Rejected credential on %s %s: %s",
            request.method,
            request.url.path,
            exc.reason.value,
        )
        raise
    request.state.user = user
    return user


def get_account_service(
    session: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(UserRepository(session), tokens)


def get_post_service(session: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(PostRepository(session))


def get_comment_service(session: AsyncSession = Depends(get_db)) -> CommentService:
    return CommentService(PostRepository(session), CommentRepository(session))


def get_like_service(session: AsyncSession = Depends(get_db)) -> LikeService:
    return LikeService(PostRepository(session), LikeRepository(session))


def principal_id(user: User) -> int:
    if user.id is None:
        raise InternalError("User record missing identifier")
    return user.id
