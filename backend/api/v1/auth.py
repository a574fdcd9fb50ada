"""Signup, login and logout endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from api.deps import get_account_service, get_app_settings
from core import Settings
from services import AccountService
from services.auth import clear_auth_cookie, set_auth_cookie

router = APIRouter(tags=["auth"])


class SignupRequest(BaseModel):
    nickname: str | None = None
    password: str | None = None
    confirm: str | None = None


class LoginRequest(BaseModel):
    nickname: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
async def signup(
    payload: SignupRequest,
    accounts: AccountService = Depends(get_account_service),
) -> MessageResponse:
    await accounts.signup(payload.nickname, payload.password, payload.confirm)
    return MessageResponse(message="Signed up successfully")


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    accounts: AccountService = Depends(get_account_service),
    app_settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    _, token = await accounts.login(payload.nickname, payload.password)
    set_auth_cookie(response, token, app_settings)
    return TokenResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    app_settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    # Tokens cannot be revoked; dropping the cookie is all logout does.
    clear_auth_cookie(response, app_settings)
    return MessageResponse(message="Logged out")
