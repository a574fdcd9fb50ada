"""HTTP cookie helpers for bearer credential transport."""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

from starlette.responses import Response

from core import Settings
from .authentication import format_bearer_credential

COOKIE_PATH = "/"
COOKIE_SAMESITE: Literal["lax", "strict", "none"] = "lax"


def cookie_secure(app_settings: Settings) -> bool:
    return (
        app_settings.app_env.strip().lower() not in {"local", "test"}
        and not app_settings.allow_insecure_http_cookies
    )


def _auth_cookie_ttl(app_settings: Settings) -> timedelta:
    return timedelta(minutes=app_settings.access_token_expire_minutes)


def set_auth_cookie(response: Response, token: str, app_settings: Settings) -> None:
    response.set_cookie(
        key=app_settings.auth_cookie_name,
        value=format_bearer_credential(token),
        httponly=True,
        secure=cookie_secure(app_settings),
        samesite=COOKIE_SAMESITE,
        max_age=int(_auth_cookie_ttl(app_settings).total_seconds()),
        path=COOKIE_PATH,
    )


def clear_auth_cookie(response: Response, app_settings: Settings) -> None:
    response.delete_cookie(
        key=app_settings.auth_cookie_name,
        path=COOKIE_PATH,
        secure=cookie_secure(app_settings),
        samesite=COOKIE_SAMESITE,
    )
