"""Common schemas used across multiple endpoints."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Response model for errors."""
    error: str


class StatusResponse(BaseModel):
    """Response model for store liveness."""
    redis: bool
    db: bool


class StatsResponse(BaseModel):
    """Response model for aggregate counts."""
    users: int
    files: int
