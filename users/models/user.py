from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.contrib.auth.validators import UnicodeUsernameValidator
from django.db import models

from core.models import PrefixedIdMixin
from users.validators import MAX_EMAIL_LENGTH


def normalize_email(email: str) -> str:
    """Return the canonical (trimmed, lower-case) form of an email address."""
    return (email or "").strip().lower()


class UserManager(DjangoUserManager):
    """Manager for accounts that sign in with their email address."""

    def create_account(self, email: str, password: str) -> "User":
        """Create an account whose username mirrors its canonical email."""
        email = normalize_email(email)
        return self.create_user(username=email, email=email, password=password)

    def get_by_email(self, email: str):
        """Return the user with this email (case-insensitive), or None."""
        return self.filter(email=normalize_email(email)).first()


class User(PrefixedIdMixin, AbstractUser):
    """Custom User model extending Django's AbstractUser."""

    ID_PREFIX = "u"

    # Wide enough to mirror any email address
    username = models.CharField(  # type: ignore[var-annotated]
        "username",
        max_length=MAX_EMAIL_LENGTH,
        unique=True,
        validators=[UnicodeUsernameValidator()],
        error_messages={"unique": "A user with that username already exists."},
    )
    email = models.EmailField(  # type: ignore[var-annotated]
        max_length=MAX_EMAIL_LENGTH,
        unique=True,
        help_text="Canonical (lower-case) sign-in email",
    )

    created_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]
    updated_at = models.DateTimeField(auto_now=True)  # type: ignore[var-annotated]

    objects = UserManager()

    class Meta:
        db_table = "users_user"
        ordering = ["email"]
        verbose_name = "User"
        verbose_name_plural = "Users"

    def save(self, *args, **kwargs):
        if self.email:
            self.email = normalize_email(self.email)
        if not self.username:
            self.username = self.email
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.email
