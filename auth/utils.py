"""
Utility functions for the auth module.

Parsing helpers for the `Authorization` header. They never raise on bad
client input: anything that cannot be parsed comes back as None so the
caller can turn it into the uniform 401.
"""

import base64
import binascii
from typing import Optional, Tuple

BASIC_SCHEME = "Basic"


def parse_authorization_header(value: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split an `Authorization` header value into (scheme, parameter).

    The split happens on the first whitespace boundary. A header without a
    parameter part is treated as unparseable.

    Examples:
        >>> parse_authorization_header("Basic YWRtaW46cGFzc3dvcmQxMjM=")
        ('Basic', 'YWRtaW46cGFzc3dvcmQxMjM=')
        >>> parse_authorization_header("Basic") is None
        True
    """
    if not value:
        return None
    parts = value.strip().split(None, 1)
    if len(parts) != 2:
        return None
    scheme, parameter = parts[0], parts[1].strip()
    if not parameter:
        return None
    return scheme, parameter


def decode_basic_credentials(parameter: str) -> Optional[Tuple[str, str]]:
    """
    Decode a Basic parameter into (username, password).

    Steps:
        1. strict standard base64 decode (invalid alphabet or padding → None)
        2. UTF-8 decode (invalid bytes → None)
        3. split on the FIRST colon; the password keeps any further colons
    """
    try:
        raw = base64.b64decode(parameter, validate=True)
    except (binascii.Error, ValueError):
        return None

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None

    username, sep, password = text.partition(":")
    if not sep:
        return None
    return username, password


def encode_basic_credentials(username: str, password: str) -> str:
    """Return the base64 token for `username:password` (standard alphabet, padded)."""
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


def is_basic_scheme(scheme: str) -> bool:
    """Case-insensitive check against the Basic scheme literal."""
    return scheme.lower() == BASIC_SCHEME.lower()
