"""
Origin checks for state-changing GraphQL requests.

Django's CSRF token middleware does not fit a JSON API consumed by ``fetch``;
instead, mutation requests must come from the site's own origin or from
``APP_BASE_URL``.
"""

import json
import logging
import re
from typing import Optional, Set
from urllib.parse import urlsplit

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}
MUTATION_RE = re.compile(r"^\s*mutation\b")
JSON_CONTENT_TYPE_RE = re.compile(r"application/json", re.IGNORECASE)


def origin_of(url: Optional[str]) -> Optional[str]:
    """
    Return the ``scheme://host[:port]`` origin of ``url``.

    Default ports are dropped, so ``https://example.com:443/x`` and
    ``https://example.com`` share an origin. Returns None for anything that
    is not an absolute http(s) URL.
    """
    if not url:
        return None
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS or not parts.hostname:
        return None

    host = parts.hostname.lower()
    if ":" in host:
        host = f"[{host}]"
    if port is None or port == DEFAULT_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def is_json_request(request) -> bool:
    return bool(JSON_CONTENT_TYPE_RE.search(request.META.get("CONTENT_TYPE", "")))


def is_mutation_request(request) -> bool:
    """
    Decide whether a request may change state.

    Only POSTs qualify. A POST counts as a mutation unless its body is JSON
    whose ``query`` clearly starts with something other than ``mutation``;
    bodies that cannot be inspected are treated as mutations.
    """
    if request.method.upper() != "POST":
        return False
    if not is_json_request(request):
        return True

    try:
        body = json.loads(request.body or b"")
    except (TypeError, ValueError):
        return True
    if not isinstance(body, dict):
        return True

    query = body.get("query")
    if not isinstance(query, str):
        query = ""
    return bool(MUTATION_RE.match(query))


def allowed_origins(request) -> Set[str]:
    allowed = set()
    own = origin_of(request.build_absolute_uri("/"))
    if own:
        allowed.add(own)
    configured = origin_of(getattr(settings, "APP_BASE_URL", ""))
    if configured:
        allowed.add(configured)
    return allowed


def request_origin(request) -> Optional[str]:
    """
    Return the raw ``Origin`` header, else the origin of ``Referer``.

    An unparsable Referer counts as no header at all.
    """
    origin = request.META.get("HTTP_ORIGIN")
    if origin:
        return origin
    return origin_of(request.META.get("HTTP_REFERER"))


def check_origin(request) -> bool:
    """Return True when a mutation request may proceed."""
    header_origin = request_origin(request)
    if not header_origin:
        if getattr(settings, "IS_PRODUCTION", False):
            logger.warning("Rejected mutation without Origin or Referer header")
            return False
        return True

    if origin_of(header_origin) in allowed_origins(request):
        return True

    logger.warning(f"Rejected mutation from origin {header_origin}")
    return False
