"""
Error translation for GraphQL resolvers.

Domain exceptions and serializer validation errors become ``GraphQLError``
instances whose message is returned to the client as-is.
"""

import functools

from graphql import GraphQLError
from rest_framework import serializers

from api.messages import ErrorMessages
from core.exceptions import DomainError


def first_error_message(detail) -> str:
    """
    Return the first message from a DRF error structure.

    Args:
        detail: ``ValidationError.detail``; nested dicts and lists are walked
            depth first in declaration order

    Returns:
        The first message found, or a generic bad request message
    """
    if isinstance(detail, dict):
        for value in detail.values():
            message = first_error_message(value)
            if message:
                return message
        return ""
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return ""
    return str(detail) if detail else ""


def require_user(info):
    """Return the authenticated user or raise ``Not authenticated``."""
    user = getattr(info.context, "user", None)
    if user is None or not user.is_authenticated:
        raise GraphQLError(ErrorMessages.NOT_AUTHENTICATED)
    return user


def graphql_errors(resolver):
    """Translate domain and validation failures raised by ``resolver``."""

    @functools.wraps(resolver)
    def wrapper(*args, **kwargs):
        try:
            return resolver(*args, **kwargs)
        except DomainError as exc:
            raise GraphQLError(exc.message) from exc
        except serializers.ValidationError as exc:
            message = first_error_message(exc.detail) or ErrorMessages.BAD_REQUEST
            raise GraphQLError(message) from exc

    return wrapper


def validated_data(serializer_class, data):
    """Validate ``data`` with ``serializer_class`` and return the cleaned dict."""
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data
