"""Renders thumbnails for queued images and writes them next to the original."""

from typing import Any, Dict

from common.constants import IMAGE_TYPE, THUMBNAIL_WIDTHS
from common.content_store import ContentStore
from common.database import Database
from common.logging_config import get_logger
from common.repositories.file_repository import FileRepository
from common.utils import parse_object_id
from worker.thumbnails import render_thumbnail

logger = get_logger(__name__)


class ThumbnailJobError(Exception):
    """
    Raised when a job cannot be processed; the job is marked failed.
    """
    pass


class ThumbnailWorker:
    """
    Handles the payload of one thumbnail job.

    Job states: received -> validated -> (skipped | rendering -> persisted).
    """

    def __init__(self, database: Database, storage: ContentStore):
        self.file_repo = FileRepository(database)
        self.storage = storage

    def process_job(self, data: Dict[str, Any]) -> Dict[int, bool]:
        """
        Render every thumbnail width for the image named by a job payload.

        Args:
            data: Job payload with fileId and userId

        Returns:
            Mapping of width to whether that thumbnail was written; empty
            when the file is not an image

        Raises:
            ThumbnailJobError: missing or malformed ids, or no matching file
        """
        file_id = data.get("fileId")
        user_id = data.get("userId")

        if not file_id:
            raise ThumbnailJobError("Missing fileId")
        if not user_id:
            raise ThumbnailJobError("Missing userId")
        if parse_object_id(file_id) is None:
            raise ThumbnailJobError("Invalid fileId")
        if parse_object_id(user_id) is None:
            raise ThumbnailJobError("Invalid userId")

        record = self.file_repo.get_by_id_and_owner(file_id, user_id)
        if record is None:
            raise ThumbnailJobError("File not found")

        if record.type != IMAGE_TYPE:
            logger.info(f"Skipping file {file_id}: it is a {record.type}")
            return {}

        source = self.storage.read(record.local_path)

        results = {}
        for width in THUMBNAIL_WIDTHS:
            try:
                thumbnail = render_thumbnail(source, width)
                path = self.storage.write_variant(record.local_path, width, thumbnail)
                logger.info(f"Generated {width}px thumbnail at {path}")
                results[width] = True
            except Exception as e:
                logger.error(f"Error generating {width}px thumbnail for file {file_id}: {e}", exc_info=True)
                results[width] = False
        return results

