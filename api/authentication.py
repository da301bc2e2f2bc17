"""
Session token authentication for the GraphQL endpoint.

Requests are authenticated from the signed session cookie (or a Bearer
header). A missing or invalid token leaves the request anonymous rather than
failing it, so public catalog queries keep working.
"""

from rest_framework.authentication import BaseAuthentication

from users.middleware import get_request_token, get_user_for_token


class SessionTokenAuthentication(BaseAuthentication):
    """Authenticate with the ``cyberdallasSession`` cookie or a Bearer token."""

    def authenticate(self, request):
        token = get_request_token(request._request)
        if not token:
            return None

        user = get_user_for_token(token)
        if user is None:
            return None
        return (user, token)

    def authenticate_header(self, request):
        return "Bearer"
