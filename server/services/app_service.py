"""Liveness and aggregate counts for the stores."""

from typing import Dict

from common.database import FILES_COLLECTION, USERS_COLLECTION, Database
from server.session_store import SessionStore


class AppService:
    def __init__(self, database: Database, sessions: SessionStore):
        self.database = database
        self.sessions = sessions

    def status(self) -> Dict[str, bool]:
        return {
            "redis": self.sessions.is_alive(),
            "db": self.database.is_alive(),
        }

    def stats(self) -> Dict[str, int]:
        return {
            "users": self.database.count(USERS_COLLECTION),
            "files": self.database.count(FILES_COLLECTION),
        }
