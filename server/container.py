"""Store handles shared by request handlers for the lifetime of the app."""

from dataclasses import dataclass

from common.content_store import ContentStore
from common.database import Database
from common.job_queue import JobQueue
from server.session_store import SessionStore


@dataclass
class ServiceContainer:
    database: Database
    sessions: SessionStore
    queue: JobQueue
    storage: ContentStore

    @classmethod
    def from_config(cls) -> "ServiceContainer":
        """Connect every store using the environment configuration."""
        return cls(
            database=Database.from_config(),
            sessions=SessionStore.from_config(),
            queue=JobQueue.from_config(),
            storage=ContentStore(),
        )

    def close(self) -> None:
        self.database.close()
        self.sessions.close()
        self.queue.close()
