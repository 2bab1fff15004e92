"""
Pydantic schemas for request/response models in the auth module.
"""

from pydantic import BaseModel


class UserOut(BaseModel):
    """Schema for responses containing the authenticated user."""
    username: str
    message: str
