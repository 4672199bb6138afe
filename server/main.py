"""Entry point for the API server."""

import time
import uuid
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from common.logging_config import setup_logging
from server.config import SERVER_HOST, SERVER_PORT
from server.container import ServiceContainer
from server.exceptions import (
    BadRequestError,
    FilesManagerError,
    NotFoundError,
    UnauthorizedError,
)
from server.routes.app_routes import router as app_router
from server.routes.auth_routes import router as auth_router
from server.routes.file_routes import router as file_router
from server.routes.user_routes import router as user_router

logger = setup_logging('server')

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _request_id(request: Request) -> str:
    return getattr(request.state, 'request_id', 'unknown')


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BadRequestError)
    async def bad_request_handler(request: Request, exc: BadRequestError):
        logger.warning(
            f"Bad request: {exc} [request_id={_request_id(request)}] path={request.url.path}"
        )
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Request validation failed: {exc.errors()} [request_id={_request_id(request)}] "
            f"path={request.url.path}"
        )
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        logger.warning(
            f"Unauthorized: [request_id={_request_id(request)}] path={request.url.path}"
        )
        return _error(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.info(
            f"Not found: [request_id={_request_id(request)}] path={request.url.path}"
        )
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(FilesManagerError)
    async def files_manager_error_handler(request: Request, exc: FilesManagerError):
        logger.error(
            f"Unhandled service error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
            exc_info=True
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError):
        logger.error(
            f"MongoDB error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
            exc_info=True
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(RedisError)
    async def redis_error_handler(request: Request, exc: RedisError):
        logger.error(
            f"Redis error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
            exc_info=True
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(OSError)
    async def storage_error_handler(request: Request, exc: OSError):
        logger.error(
            f"Storage error: {exc} [request_id={_request_id(request)}] path={request.url.path}",
            exc_info=True
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: Store handles to serve from. When omitted, stores are
            connected from the environment on startup and closed on shutdown.
    """
    app = FastAPI(
        title="Files Manager",
        description="Token-authenticated file storage with asynchronous thumbnails",
        version="1.0.0"
    )
    app.state.container = container
    owns_container = container is None

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Middleware to log all HTTP requests and responses.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Request started: {request.method} {request.url.path} [request_id={request_id}]"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Unexpected error: {e} [request_id={request_id}] path={request.url.path}",
                exc_info=True
            )
            response = _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

        duration = time.time() - start_time

        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} duration={duration:.3f}s [request_id={request_id}]"
        )

        response.headers["X-Request-ID"] = request_id

        return response

    @app.on_event("startup")
    async def startup_event():
        logger.info("Files manager starting up...")

        if app.state.container is None:
            app.state.container = ServiceContainer.from_config()

        try:
            app.state.container.database.ensure_indexes()
            logger.info("Database indexes ensured")
        except PyMongoError as e:
            logger.warning(f"Could not ensure database indexes: {e}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Files manager shutting down...")
        if owns_container and app.state.container is not None:
            app.state.container.close()
            logger.info("Store connections closed")

    register_exception_handlers(app)

    app.include_router(app_router)
    app.include_router(user_router)
    app.include_router(auth_router)
    app.include_router(file_router)

    return app


app = create_app()


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "server.main:app",
        host=SERVER_HOST,
        port=SERVER_PORT,
    )


if __name__ == "__main__":
    main()
