"""User repository for database operations."""

from typing import Optional

from common.database import Database
from common.logging_config import get_logger
from common.types import User
from common.utils import parse_object_id

logger = get_logger(__name__)


class UserRepository:
    def __init__(self, database: Database):
        self.database = database

    def create_user(self, email: str, password_hash: str) -> User:
        logger.debug(f"Creating user: {email}")
        try:
            result = self.database.users.insert_one({
                "email": email,
                "password": password_hash,
            })
        except Exception as e:
            logger.error(f"Failed to create user {email}: {e}", exc_info=True)
            raise

        user_id = str(result.inserted_id)
        logger.info(f"User created successfully: {email} [user_id={user_id}]")
        return User(user_id=user_id, email=email, password_hash=password_hash)

    def get_by_email(self, email: str) -> Optional[User]:
        logger.debug(f"Fetching user by email: {email}")
        doc = self.database.users.find_one({"email": email})
        if doc is None:
            logger.debug(f"User not found: {email}")
            return None
        return User.from_document(doc)

    def get_by_user_id(self, user_id: str) -> Optional[User]:
        logger.debug(f"Fetching user by user_id: {user_id}")
        object_id = parse_object_id(user_id)
        if object_id is None:
            return None
        doc = self.database.users.find_one({"_id": object_id})
        if doc is None:
            logger.debug(f"User not found: {user_id}")
            return None
        return User.from_document(doc)
