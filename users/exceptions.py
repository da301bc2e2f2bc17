"""Account errors raised by :mod:`users.services`."""

from core.exceptions import DomainError


class AccountError(DomainError):
    default_message = "Account error"


class DuplicateEmailError(AccountError):
    default_message = "User already exists"


class InvalidCredentialsError(AccountError):
    default_message = "Invalid credentials"


class AuthSecretMissingError(AccountError):
    default_message = "Server misconfigured: AUTH_SECRET is missing"
