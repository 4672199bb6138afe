"""User account service for business logic."""

from typing import Optional

from pymongo.errors import DuplicateKeyError

from common.database import Database
from common.logging_config import get_logger
from common.repositories.user_repository import UserRepository
from common.types import User
from server.auth import hash_password
from server.exceptions import BadRequestError, UnauthorizedError

logger = get_logger(__name__)


class UserService:
    def __init__(self, database: Database):
        self.user_repo = UserRepository(database)

    def register_user(self, email: Optional[str], password: Optional[str]) -> User:
        if not email:
            raise BadRequestError("Missing email")
        if not password:
            raise BadRequestError("Missing password")

        logger.info(f"Attempting to register user: {email}")
        if self.user_repo.get_by_email(email) is not None:
            logger.warning(f"Registration failed: email '{email}' already exists")
            raise BadRequestError("Already exist")

        try:
            user = self.user_repo.create_user(email, hash_password(password))
        except DuplicateKeyError:
            logger.warning(f"Registration failed due to unique index: email '{email}'")
            raise BadRequestError("Already exist")

        logger.info(f"Successfully registered user: {email} [user_id={user.user_id}]")
        return user

    def get_user(self, user_id: str) -> User:
        user = self.user_repo.get_by_user_id(user_id)
        if user is None:
            logger.warning(f"Session references missing user [user_id={user_id}]")
            raise UnauthorizedError()
        return user
