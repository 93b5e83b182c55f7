"""
Pydantic schemas for login and the authenticated user profile.
"""

from pydantic import BaseModel, EmailStr, Field
from app.models.user import UserRole
from app.schemas.base import CamelSchema


class UserLoginRequest(BaseModel):
    """Request schema for email/password login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelSchema):
    """User profile response (no sensitive data)."""
    id: int
    name: str
    email: str
    role: UserRole


class TokenResponse(BaseModel):
    """JWT token response. `token` repeats access_token for the dashboard's login call."""
    access_token: str
    token: str
    token_type: str = "bearer"
    user: UserResponse
