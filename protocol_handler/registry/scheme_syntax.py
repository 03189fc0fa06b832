from __future__ import annotations

import re
from typing import Optional

# letters, digits and "+" only, at least two characters, one trailing colon
VALID_SCHEME_PATTERN: re.Pattern[str] = re.compile(
    r"^[a-z0-9+]{2,}:$"
)

URL_SCHEME_PATTERN: re.Pattern[str] = re.compile(
    r"^[a-z0-9.+-]+:", re.IGNORECASE
)

AUTHORITY_SUFFIX = "://"


def normalize_scheme(raw: Optional[str]) -> str:
    """
    Normalize registration input to ``<scheme>:``.

    ``"S3://"``, ``" s3: "`` and ``"s3:"`` all normalize to ``"s3:"``.
    """
    scheme = (raw or "").lower().strip()
    if scheme.endswith(AUTHORITY_SUFFIX):
        scheme = scheme[: -len(AUTHORITY_SUFFIX)] + ":"
    return scheme


def normalize_blacklist_entry(raw: Optional[str]) -> str:
    """Normalize a blacklist entry, adding the colon when it is missing."""
    scheme = normalize_scheme(raw)
    if scheme and not scheme.endswith(":"):
        scheme += ":"
    return scheme


def is_valid_scheme(scheme: str) -> bool:
    return VALID_SCHEME_PATTERN.fullmatch(scheme) is not None


def is_protocol_relative(url: str) -> bool:
    return url.strip().startswith("//")


def extract_scheme(url: str) -> Optional[str]:
    """
    Return the lowercased scheme of ``url`` including its colon.

    Returns None for protocol-relative URLs and for anything without a
    leading ``<token>:`` prefix.
    """
    if is_protocol_relative(url):
        return None

    match = URL_SCHEME_PATTERN.match(url.strip())
    if match is None:
        return None
    return match.group(0).lower()
