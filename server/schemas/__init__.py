"""Pydantic schemas for API requests and responses."""

from server.schemas.users import (
    RegisterRequest,
    UserResponse,
    TokenResponse
)
from server.schemas.files import (
    UploadFileRequest,
    FileResponse
)
from server.schemas.common import ErrorResponse, StatusResponse, StatsResponse

__all__ = [
    "RegisterRequest",
    "UserResponse",
    "TokenResponse",
    "UploadFileRequest",
    "FileResponse",
    "ErrorResponse",
    "StatusResponse",
    "StatsResponse",
]
