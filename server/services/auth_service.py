"""Authentication service for business logic."""

from typing import Optional

from common.database import Database
from common.logging_config import get_logger
from common.repositories.user_repository import UserRepository
from server.auth import generate_token, parse_basic_auth, verify_password
from server.exceptions import UnauthorizedError
from server.session_store import SessionStore

logger = get_logger(__name__)


class AuthService:
    def __init__(self, database: Database, sessions: SessionStore):
        self.user_repo = UserRepository(database)
        self.sessions = sessions

    def login(self, authorization: Optional[str]) -> str:
        credentials = parse_basic_auth(authorization)
        if credentials is None:
            logger.warning("Login failed: missing or malformed credentials header")
            raise UnauthorizedError()

        email, password = credentials
        logger.info(f"Login attempt for user: {email}")
        user = self.user_repo.get_by_email(email)
        if user is None:
            logger.warning(f"Login failed: email '{email}' not found")
            raise UnauthorizedError()

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: invalid password for '{email}'")
            raise UnauthorizedError()

        token = generate_token()
        self.sessions.create(token, user.user_id)
        logger.info(f"Successfully logged in user: {email} [user_id={user.user_id}]")
        return token

    def logout(self, token: Optional[str]) -> None:
        user_id = self.resolve_session(token)
        self.sessions.delete(token)
        logger.info(f"Session closed [user_id={user_id}]")

    def resolve_session(self, token: Optional[str]) -> str:
        if not token:
            raise UnauthorizedError()
        user_id = self.sessions.get_user_id(token)
        if user_id is None:
            logger.debug("Session lookup failed: unknown or expired token")
            raise UnauthorizedError()
        return user_id
