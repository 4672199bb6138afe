"""rq-backed thumbnail job queue shared by the server (producer) and worker (consumer)."""

from typing import Any, Dict, List

import redis
from rq import Queue
from rq.job import Job

from common.config import REDIS_HOST, REDIS_PORT, THUMBNAIL_JOB_TIMEOUT
from common.constants import QUEUE_NAME, THUMBNAIL_TASK
from common.logging_config import get_logger

logger = get_logger(__name__)


class JobQueue:
    """
    Producer side of ``fileQueue``.

    Jobs are referenced by task path so the server never imports worker
    code. Failed jobs, including jobs abandoned by a worker that died
    mid-run, end up in rq's failed job registry and are not retried.
    """

    def __init__(self, client: redis.Redis, name: str = QUEUE_NAME, job_timeout: int = THUMBNAIL_JOB_TIMEOUT):
        self.client = client
        self.queue = Queue(name, connection=client)
        self.job_timeout = job_timeout

    @classmethod
    def from_config(cls, host: str = REDIS_HOST, port: int = REDIS_PORT, name: str = QUEUE_NAME) -> "JobQueue":
        # rq stores pickled payloads, so responses must stay as bytes
        client = redis.Redis(host=host, port=port)
        return cls(client, name)

    @property
    def name(self) -> str:
        return self.queue.name

    def enqueue(self, data: Dict[str, Any]) -> Job:
        job = self.queue.enqueue(THUMBNAIL_TASK, data, job_timeout=self.job_timeout)
        logger.info(f"Job {job.id} queued on {self.name}")
        return job

    def pending_count(self) -> int:
        return self.queue.count

    def failed_job_ids(self) -> List[str]:
        return self.queue.failed_job_registry.get_job_ids()

    def failed_count(self) -> int:
        return len(self.failed_job_ids())

    def close(self) -> None:
        self.client.close()
