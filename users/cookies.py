"""Session cookie helpers."""

from django.conf import settings

from .tokens import token_max_age


def _cookie_kwargs():
    return {
        "path": "/",
        "httponly": True,
        "samesite": "Lax",
        "secure": bool(getattr(settings, "IS_PRODUCTION", False)),
    }


def set_session_cookie(response, token: str) -> None:
    """Attach ``token`` to ``response`` for as long as the token is valid."""
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        token,
        max_age=token_max_age(token),
        **_cookie_kwargs(),
    )


def clear_session_cookie(response) -> None:
    response.set_cookie(settings.AUTH_COOKIE_NAME, "", max_age=0, **_cookie_kwargs())
