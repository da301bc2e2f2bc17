"""Per-request context handed to every resolver."""

from users.cookies import clear_session_cookie, set_session_cookie


class GraphQLContext:
    """
    Request, user and pending cookie changes for one GraphQL execution.

    Resolvers never touch the HTTP response directly; login, register and
    logout record the cookie change here and the view applies it once the
    result has been rendered.
    """

    def __init__(self, request, user=None):
        self.request = request
        self.user = user
        self._session_token = None
        self._clear_session = False

    def set_session(self, token: str) -> None:
        self._session_token = token
        self._clear_session = False

    def clear_session(self) -> None:
        self._session_token = None
        self._clear_session = True

    def apply_cookies(self, response) -> None:
        if self._session_token:
            set_session_cookie(response, self._session_token)
        elif self._clear_session:
            clear_session_cookie(response)
