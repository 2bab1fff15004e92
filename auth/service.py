"""
Core authentication logic.

This module validates an `Authorization` header against a credential table
and returns a typed result instead of raising:

    AuthSuccess(principal)  - credentials accepted
    AuthFailure(reason)     - anything else

The reason is for tests and debugging only. Callers at the HTTP boundary must
collapse every AuthFailure into the same 401 so clients cannot tell a bad
username from a bad password.
"""

import hmac
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .utils import decode_basic_credentials, is_basic_scheme, parse_authorization_header


@dataclass(frozen=True)
class AuthSuccess:
    """Verified identity for a single request."""
    principal: str


@dataclass(frozen=True)
class AuthFailure:
    """Rejected request. `reason` never leaves the server."""
    reason: str


AuthResult = Union[AuthSuccess, AuthFailure]


def authenticate_user(users: Mapping[str, str], username: str, password: str) -> AuthResult:
    """
    Authenticate a user by validating their username and password.

    Args:
        users (Mapping[str, str]): Credential table (username → password).
        username (str): The username provided by the client.
        password (str): The password provided by the client.

    Returns:
        AuthResult: AuthSuccess with the username, or AuthFailure.
    """
    stored_password = users.get(username)
    if stored_password is None:
        return AuthFailure("unknown user")

    # Exact byte comparison, constant time.
    if hmac.compare_digest(stored_password.encode("utf-8"), password.encode("utf-8")):
        return AuthSuccess(username)
    return AuthFailure("invalid password")


def authenticate(users: Mapping[str, str], header_value: Optional[str]) -> AuthResult:
    """
    Verify a raw `Authorization` header value.

    Args:
        users (Mapping[str, str]): Credential table.
        header_value (Optional[str]): Header value, or None when absent.

    Returns:
        AuthResult: never raises for malformed client input.
    """
    if header_value is None:
        return AuthFailure("missing header")

    parsed = parse_authorization_header(header_value)
    if parsed is None:
        return AuthFailure("malformed header")

    scheme, parameter = parsed
    if not is_basic_scheme(scheme):
        return AuthFailure("unsupported scheme")

    credentials = decode_basic_credentials(parameter)
    if credentials is None:
        return AuthFailure("undecodable credentials")

    username, password = credentials
    return authenticate_user(users, username, password)
