"""
FastAPI dependency functions for authentication.

The gate has already verified the request by the time a route runs; these
dependencies only read what it attached.
"""

from fastapi import HTTPException, Request, status


def get_current_user(request: Request) -> str:
    """
    Dependency that returns the principal resolved by the auth gate.

    Args:
        request (Request): Incoming request.

    Returns:
        str: The authenticated username.

    Raises:
        HTTPException: 401 if the route is reached without a principal
            (e.g. the app was built without the gate).
    """
    user = getattr(request.state, "user", None)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user
