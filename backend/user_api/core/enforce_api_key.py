"""API Key Enforcement: pure checks behind the request gate.

Invariants:
    - All functions are PURE: no IO, no request objects
    - check_api_key returns the rejection message on violation, None on success
    - Comparison is plain case-sensitive equality
    - A present-but-empty header is a mismatch, not a missing key

Design Decisions:
    - Kept apart from the middleware so the rules are testable without an ASGI app
"""

from collections.abc import Sequence

API_KEY_MISSING = "API Key is missing"
UNAUTHORIZED_CLIENT = "Unauthorized client"


def check_api_key(provided: str | None, expected: str) -> str | None:
    """Return the 401 body for a bad key, or None when the key matches."""
    if provided is None:
        return API_KEY_MISSING
    if provided != expected:
        return UNAUTHORIZED_CLIENT
    return None


def is_exempt_path(path: str, exempt_prefixes: Sequence[str]) -> bool:
    """True when path equals a prefix or sits below it (segment match)."""
    for prefix in exempt_prefixes:
        prefix = prefix.rstrip("/")
        if not prefix:
            continue
        if path == prefix or path.startswith(prefix + "/"):
            return True
    return False
