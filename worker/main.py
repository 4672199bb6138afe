"""Entry point for the thumbnail worker."""

from redis.exceptions import RedisError
from rq import Worker

from common.content_store import ContentStore
from common.job_queue import JobQueue
from common.logging_config import setup_logging
from worker.config import WORKER_NAME

logger = setup_logging('worker')


def main() -> None:
    """Bootstrap the worker process."""
    logger.info("Initializing thumbnail worker...")

    ContentStore().ensure_root()
    queue = JobQueue.from_config()
    worker = Worker([queue.queue], connection=queue.client, name=WORKER_NAME)

    try:
        # rq installs SIGINT/SIGTERM handlers that let the current job finish
        worker.work()
    except RedisError as e:
        logger.error(f"Queue connection error: {e}", exc_info=True)
        raise
    finally:
        queue.close()
        logger.info("Worker shutdown complete")


if __name__ == "__main__":
    main()
