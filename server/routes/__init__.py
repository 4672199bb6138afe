"""API routes package."""

from server.routes.app_routes import router as app_router
from server.routes.auth_routes import router as auth_router
from server.routes.file_routes import router as file_router
from server.routes.user_routes import router as user_router

__all__ = ["app_router", "auth_router", "file_router", "user_router"]
