"""
scrypt password hashing.

Two encodings are produced and accepted:

    scrypt$<salt>$<hash>                     scrypt defaults (N=16384, r=8, p=1)
    scrypt$N=<n>,r=<r>,p=<p>$<salt>$<hash>   explicit cost parameters

Salt (16 bytes) and hash (32 bytes) are unpadded base64url. The explicit form
lets deployments lower the cost (for example in end-to-end environments)
without invalidating hashes written with the defaults.
"""

import base64
import binascii
import hashlib
import hmac
import secrets
from typing import Dict, Optional

ALGORITHM = "scrypt"
SALT_BYTES = 16
KEY_BYTES = 32
DEFAULT_PARAMS = {"N": 16384, "r": 8, "p": 1}

ScryptParams = Dict[str, int]


def b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def _positive_int(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


def serialize_params(params: ScryptParams) -> str:
    return f"N={params['N']},r={params['r']},p={params['p']}"


def parse_params(serialized: str) -> Optional[ScryptParams]:
    """Parse ``N=..,r=..,p=..``; None unless all three are positive integers."""
    values = {}
    for part in serialized.split(","):
        key, sep, value = part.strip().partition("=")
        if not sep or not key.strip():
            continue
        values[key.strip()] = value.strip()

    n = _positive_int(values.get("N"))
    r = _positive_int(values.get("r"))
    p = _positive_int(values.get("p"))
    if n is None or r is None or p is None:
        return None
    return {"N": n, "r": r, "p": p}


def _derive(
    password: str, salt: bytes, length: int, params: Optional[ScryptParams]
) -> bytes:
    cost = params or DEFAULT_PARAMS
    # OpenSSL needs roughly 128 * N * r bytes; leave headroom above that.
    maxmem = 256 * cost["N"] * cost["r"] + 1024 * 1024
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt,
        n=cost["N"],
        r=cost["r"],
        p=cost["p"],
        maxmem=maxmem,
        dklen=length,
    )


def hash_password(
    password: str,
    params: Optional[ScryptParams] = None,
    salt: Optional[bytes] = None,
) -> str:
    """Hash a password; the legacy format is used when ``params`` is None."""
    if salt is None:
        salt = secrets.token_bytes(SALT_BYTES)
    derived = _derive(password, salt, KEY_BYTES, params)

    if not params:
        return f"{ALGORITHM}${b64url_encode(salt)}${b64url_encode(derived)}"
    return (
        f"{ALGORITHM}${serialize_params(params)}"
        f"${b64url_encode(salt)}${b64url_encode(derived)}"
    )


def decode_hash(encoded: str) -> Optional[dict]:
    """Split an encoded hash into its parts, or None when malformed."""
    parts = encoded.split("$")
    if parts[0] != ALGORITHM:
        return None

    if len(parts) == 3:
        params = None
        salt_part, hash_part = parts[1], parts[2]
    elif len(parts) == 4:
        params = parse_params(parts[1])
        if params is None:
            return None
        salt_part, hash_part = parts[2], parts[3]
    else:
        return None

    if not salt_part or not hash_part:
        return None

    try:
        salt = b64url_decode(salt_part)
        expected = b64url_decode(hash_part)
    except (binascii.Error, ValueError):
        return None

    return {"params": params, "salt": salt, "hash": expected}


def verify_password(password: str, encoded: str) -> bool:
    """Check a password against an encoded hash in constant time."""
    decoded = decode_hash(encoded or "")
    if decoded is None or not decoded["hash"]:
        return False

    expected = decoded["hash"]
    try:
        actual = _derive(password, decoded["salt"], len(expected), decoded["params"])
    except (ValueError, MemoryError):
        # Unusable cost parameters in a stored hash
        return False
    if len(actual) != len(expected):
        return False
    return hmac.compare_digest(actual, expected)
