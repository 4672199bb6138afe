"""Task functions executed by rq workers on ``fileQueue``."""

from typing import Any, Dict, Optional

from rq import get_current_job

from common.content_store import ContentStore
from common.database import Database
from common.logging_config import get_logger
from worker.thumbnail_worker import ThumbnailWorker

logger = get_logger(__name__)

_processor: Optional[ThumbnailWorker] = None


def configure(processor: Optional[ThumbnailWorker]) -> None:
    """Set the processor used by tasks in this process (None resets it)."""
    global _processor
    _processor = processor


def get_processor() -> ThumbnailWorker:
    """
    Return the processor for this process, connecting on first use.

    rq forks a work horse per job, so the MongoDB client is created inside
    the horse rather than inherited from the parent.
    """
    global _processor
    if _processor is None:
        _processor = ThumbnailWorker(Database.from_config(), ContentStore())
    return _processor


def generate_thumbnails(data: Dict[str, Any]) -> Dict[int, bool]:
    job = get_current_job()
    job_id = job.id if job is not None else "inline"

    try:
        results = get_processor().process_job(data or {})
    except Exception as e:
        logger.error(f"Job {job_id} failed: {e}")
        raise

    logger.info(f"Job {job_id} completed")
    return results
