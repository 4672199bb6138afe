"""Redis-backed mapping from session tokens to user ids."""

from typing import Optional

import redis
from redis.exceptions import RedisError

from common.config import REDIS_HOST, REDIS_PORT
from common.constants import SESSION_KEY_PREFIX, SESSION_TTL_SECONDS
from common.logging_config import get_logger

logger = get_logger(__name__)


class SessionStore:
    """
    Sessions are plain keys with an absolute TTL set at creation.

    Expiry is enforced by Redis; the application never renews a session.
    """

    def __init__(self, client: redis.Redis, ttl_seconds: int = SESSION_TTL_SECONDS):
        self.client = client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_config(cls, host: str = REDIS_HOST, port: int = REDIS_PORT) -> "SessionStore":
        client = redis.Redis(host=host, port=port, decode_responses=True)
        logger.info(f"Redis client created for {host}:{port}")
        return cls(client)

    @staticmethod
    def _key(token: str) -> str:
        return f"{SESSION_KEY_PREFIX}{token}"

    def create(self, token: str, user_id: str) -> None:
        self.client.setex(self._key(token), self.ttl_seconds, user_id)

    def get_user_id(self, token: str) -> Optional[str]:
        if not token:
            return None
        value = self.client.get(self._key(token))
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def delete(self, token: str) -> None:
        self.client.delete(self._key(token))

    def is_alive(self) -> bool:
        try:
            return bool(self.client.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def close(self) -> None:
        self.client.close()
