"""Pydantic schemas for user and session endpoints."""

from typing import Optional

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Request model for user registration. Presence is checked by the service."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    """Response model for a user; never carries the password hash."""
    id: str
    email: str


class TokenResponse(BaseModel):
    """Response model for login."""
    token: str
