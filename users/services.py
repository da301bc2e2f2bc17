"""
Account service: registration, credential checks and session token issuance.

Input shape (email format, password length) is validated by the API
serializers before these methods run; the service owns everything that needs
the database or the signing secret.
"""

import logging
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from .exceptions import (
    AuthSecretMissingError,
    DuplicateEmailError,
    InvalidCredentialsError,
)
from .models import normalize_email
from .tokens import issue_auth_token

User = get_user_model()
logger = logging.getLogger(__name__)


class AccountService:
    """Create accounts, check credentials and sign session tokens."""

    def __init__(self, secret: Optional[str] = None):
        self.secret = secret if secret is not None else settings.AUTH_SECRET
        self.token_ttl = timedelta(days=getattr(settings, "AUTH_TOKEN_TTL_DAYS", 7))

    def _require_secret(self) -> str:
        if not self.secret:
            logger.error("AUTH_SECRET is not configured; cannot issue session tokens")
            raise AuthSecretMissingError()
        return self.secret

    def register(self, email: str, password: str):
        """
        Create a user with a hashed password.

        Args:
            email: Email address; stored canonical (trimmed, lower-case)
            password: Plain-text password

        Returns:
            User: The created user

        Raises:
            DuplicateEmailError: If the canonical email is already registered
            AuthSecretMissingError: If no signing secret is configured
        """
        email = normalize_email(email)
        self._require_secret()

        if User.objects.filter(email=email).exists():
            raise DuplicateEmailError()

        try:
            with transaction.atomic():
                user = User.objects.create_account(email=email, password=password)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            raise DuplicateEmailError()

        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str):
        """
        Return the active user matching the credentials.

        Raises:
            InvalidCredentialsError: Unknown email, inactive user or bad password
        """
        user = User.objects.get_by_email(email)
        if user is None or not user.is_active or not user.check_password(password):
            logger.info("Login failed: invalid credentials")
            raise InvalidCredentialsError()

        self._require_secret()
        logger.info(f"User {user.id} logged in")
        return user

    def issue_token(self, user) -> str:
        return issue_auth_token(user.id, self._require_secret(), ttl=self.token_ttl)
