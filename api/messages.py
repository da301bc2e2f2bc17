"""
Centralized error messages for consistent API responses.

This module provides a single source of truth for the messages resolvers
return in the GraphQL ``errors`` array.
"""


class ErrorMessages:
    """Centralized error messages for consistent API responses."""

    # Authentication
    NOT_AUTHENTICATED = "Not authenticated"
    INVALID_CREDENTIALS = "Invalid credentials"
    AUTH_SECRET_MISSING = "Server misconfigured: AUTH_SECRET is missing"

    # Registration and invite input
    INVALID_EMAIL = "Invalid email"
    PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
    USER_EXISTS = "User already exists"

    # Campaigns
    CAMPAIGN_NOT_FOUND = "Campaign not found"
    NOT_AUTHORIZED = "Not authorized"

    # Character input
    NAME_REQUIRED = "Name is required"
    NAME_TOO_LONG = "Name must be at most 100 characters"
    STAT_NEGATIVE = "Stats must be zero or greater"
    SKILL_LEVEL_NEGATIVE = "Skill level must be zero or greater"
    SKILL_NAME_REQUIRED = "Skill name is required"

    # Request layer
    FORBIDDEN = "Forbidden"
    BAD_REQUEST = "Bad request"
    INVALID_JSON = "POST body sent invalid JSON."
    UNSUPPORTED_CONTENT_TYPE = "Requests must use Content-Type: application/json."
    QUERY_REQUIRED = "Must provide query string."
    MUTATION_OVER_GET = "Can only perform a mutation operation from a POST request."
