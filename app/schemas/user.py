"""
Pydantic schemas for user registration and login.
"""

from pydantic import BaseModel, EmailStr, Field

from app.schemas.base import StrictCamelModel


class UserRegisterRequest(StrictCamelModel):
    """Request schema for user registration."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserLoginRequest(StrictCamelModel):
    """Request schema for login."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str
