"""
Auth package for the Book Manager API.

Provides the HTTP Basic Auth gate (middleware), the credential verification
logic behind it, and a FastAPI dependency for reading the resolved principal.
Nothing here knows about books: the gate sits strictly upstream of the routes.
"""

from .middleware import BasicAuthMiddleware
from .service import AuthFailure, AuthSuccess, authenticate

__all__ = ["BasicAuthMiddleware", "AuthFailure", "AuthSuccess", "authenticate"]
