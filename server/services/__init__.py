"""Service layer for business logic."""

from server.services.app_service import AppService
from server.services.auth_service import AuthService
from server.services.file_service import FileService
from server.services.user_service import UserService

__all__ = [
    "AppService",
    "AuthService",
    "FileService",
    "UserService",
]
