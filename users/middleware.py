"""
Token authentication middleware.

Resolves ``request.user`` from the signed session cookie, falling back to an
``Authorization: Bearer`` header for non-browser clients. Requests without a
token keep whatever Django's AuthenticationMiddleware assigned; a token that
does not verify leaves the request anonymous.
"""

import logging
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.utils.deprecation import MiddlewareMixin
from django.utils.functional import SimpleLazyObject

from .tokens import extract_bearer_token, verify_auth_token

User = get_user_model()
logger = logging.getLogger(__name__)


def get_request_token(request) -> Optional[str]:
    """Return the raw session token carried by ``request``, if any."""
    token = request.COOKIES.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token
    return extract_bearer_token(request.META.get("HTTP_AUTHORIZATION"))


def get_user_for_token(token: Optional[str]):
    """Return the active user a token belongs to, or None."""
    secret = getattr(settings, "AUTH_SECRET", "")
    if not token or not secret:
        return None

    user_id = verify_auth_token(token, secret)
    if user_id is None:
        return None

    user = User.objects.filter(pk=user_id, is_active=True).first()
    if user is None:
        logger.info(f"Session token for unknown user {user_id} ignored")
    return user


class TokenAuthenticationMiddleware(MiddlewareMixin):
    """Authenticate requests carrying a session token."""

    def process_request(self, request):
        token = get_request_token(request)
        if not token:
            return None

        def _resolve():
            return get_user_for_token(token) or AnonymousUser()

        request.user = SimpleLazyObject(_resolve)
        return None
