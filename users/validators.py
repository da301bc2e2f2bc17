"""Lightweight input validators shared by the account and invite flows."""

import re

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Column width of every email (and username) field.
MAX_EMAIL_LENGTH = 254

MIN_PASSWORD_LENGTH = 8


def is_valid_email(email) -> bool:
    # Shape check only; no DNS or MX lookups.
    if not isinstance(email, str) or len(email) > MAX_EMAIL_LENGTH:
        return False
    return bool(EMAIL_RE.match(email))
