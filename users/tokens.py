"""
Signed session tokens.

A token is ``<payload>.<signature>`` where ``payload`` is the base64url JSON
``{"sub": user_id, "iat": ms, "exp": ms}`` and ``signature`` is the base64url
HMAC-SHA256 of the encoded payload keyed with ``AUTH_SECRET``. Timestamps are
epoch milliseconds.
"""

import hashlib
import hmac
import json
import re
from datetime import datetime, timedelta
from typing import Optional

from django.utils import timezone

from .passwords import b64url_decode, b64url_encode

DEFAULT_TOKEN_TTL = timedelta(days=7)

BEARER_RE = re.compile(r"^Bearer\s+(.+)$", re.IGNORECASE)


def _to_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def _now_ms(now: Optional[datetime]) -> int:
    return _to_ms(now or timezone.now())


def _sign(payload_b64: str, secret: str) -> str:
    digest = hmac.new(
        secret.encode("utf-8"), payload_b64.encode("ascii"), hashlib.sha256
    ).digest()
    return b64url_encode(digest)


def _read_payload(payload_b64: str) -> Optional[dict]:
    try:
        payload = json.loads(b64url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def issue_auth_token(
    user_id: str,
    secret: str,
    ttl: timedelta = DEFAULT_TOKEN_TTL,
    now: Optional[datetime] = None,
) -> str:
    """Issue a token for ``user_id`` valid for ``ttl`` from ``now``."""
    iat = _now_ms(now)
    exp = iat + int(ttl.total_seconds() * 1000)
    payload = json.dumps(
        {"sub": user_id, "iat": iat, "exp": exp}, separators=(",", ":")
    )
    payload_b64 = b64url_encode(payload.encode("utf-8"))
    return f"{payload_b64}.{_sign(payload_b64, secret)}"


def verify_auth_token(
    token: str, secret: str, now: Optional[datetime] = None
) -> Optional[str]:
    """
    Return the user id carried by ``token``, or None.

    None is returned for a malformed token, a bad signature, a payload without
    a string ``sub`` or a numeric ``exp``, and for expired tokens.
    """
    payload_b64, _, signature = (token or "").partition(".")
    if not payload_b64 or not signature:
        return None
    if not token.isascii():
        return None

    expected = _sign(payload_b64, secret)
    if not hmac.compare_digest(signature.encode("ascii"), expected.encode("ascii")):
        return None

    payload = _read_payload(payload_b64)
    if payload is None:
        return None
    sub = payload.get("sub")
    exp = payload.get("exp")
    if not isinstance(sub, str) or not _is_number(exp):
        return None
    if _now_ms(now) >= exp:
        return None
    return sub


def token_max_age(token: str, now: Optional[datetime] = None) -> int:
    """Seconds until ``token`` expires; the default TTL when unreadable."""
    default = int(DEFAULT_TOKEN_TTL.total_seconds())
    payload = _read_payload((token or "").partition(".")[0])
    if payload is None or not _is_number(payload.get("exp")):
        return default
    remaining_ms = payload["exp"] - _now_ms(now)
    return max(0, int(remaining_ms // 1000))


def extract_bearer_token(header: Optional[str]) -> Optional[str]:
    if not header:
        return None
    match = BEARER_RE.match(header)
    return match.group(1) if match else None
