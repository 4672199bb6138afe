"""File service for business logic."""

import base64
import binascii
import mimetypes
from typing import List, Optional, Tuple

from common.constants import (
    DEFAULT_MIME_TYPE,
    FILE_TYPES,
    FOLDER_TYPE,
    IMAGE_TYPE,
    ROOT_PARENT_ID,
    THUMBNAIL_WIDTHS,
)
from common.content_store import ContentStore
from common.database import Database
from common.job_queue import JobQueue
from common.logging_config import get_logger
from common.repositories.file_repository import FileRepository
from common.types import FileRecord
from server.exceptions import BadRequestError, NotFoundError

logger = get_logger(__name__)


class FileService:
    def __init__(self, database: Database, storage: ContentStore, queue: JobQueue):
        self.file_repo = FileRepository(database)
        self.storage = storage
        self.queue = queue

    def upload_file(
        self,
        user_id: str,
        name: Optional[str],
        file_type: Optional[str],
        parent_id: str = ROOT_PARENT_ID,
        is_public: bool = False,
        data: Optional[str] = None,
    ) -> FileRecord:
        if not name:
            raise BadRequestError("Missing name")
        if not file_type or file_type not in FILE_TYPES:
            raise BadRequestError("Missing type")
        if file_type != FOLDER_TYPE and not data:
            raise BadRequestError("Missing data")

        if parent_id != ROOT_PARENT_ID:
            self._check_parent(parent_id, user_id)

        if file_type == FOLDER_TYPE:
            return self.file_repo.create_file(
                user_id=user_id,
                name=name,
                file_type=file_type,
                is_public=is_public,
                parent_id=parent_id,
            )

        try:
            content = base64.b64decode(data)
        except (binascii.Error, ValueError):
            raise BadRequestError("Invalid data")

        # Disk write and metadata insert are not atomic; a crash in between
        # leaves an orphaned file on disk.
        local_path = self.storage.write_new(content)
        record = self.file_repo.create_file(
            user_id=user_id,
            name=name,
            file_type=file_type,
            is_public=is_public,
            parent_id=parent_id,
            local_path=local_path,
        )

        if file_type == IMAGE_TYPE:
            self._enqueue_thumbnails(record)

        return record

    def _check_parent(self, parent_id: str, user_id: str) -> None:
        parent = self.file_repo.get_by_id_and_owner(parent_id, user_id)
        if parent is None:
            logger.warning(f"Upload rejected: parent {parent_id} not found [user_id={user_id}]")
            raise BadRequestError("Parent not found")
        if parent.type != FOLDER_TYPE:
            logger.warning(f"Upload rejected: parent {parent_id} is a {parent.type} [user_id={user_id}]")
            raise BadRequestError("Parent is not a folder")

    def _enqueue_thumbnails(self, record: FileRecord) -> None:
        try:
            self.queue.enqueue({"userId": record.user_id, "fileId": record.file_id})
        except Exception as e:
            logger.error(f"Failed to queue thumbnail job for file {record.file_id}: {e}")

    def get_file(self, file_id: str, user_id: str) -> FileRecord:
        record = self.file_repo.get_by_id_and_owner(file_id, user_id)
        if record is None:
            raise NotFoundError()
        return record

    def list_files(self, user_id: str, parent_id: str = ROOT_PARENT_ID, page: int = 0) -> List[FileRecord]:
        return self.file_repo.list_by_parent(user_id, parent_id, page)

    def set_visibility(self, file_id: str, user_id: str, is_public: bool) -> FileRecord:
        record = self.file_repo.set_public(file_id, user_id, is_public)
        if record is None:
            raise NotFoundError()
        return record

    def read_content(
        self,
        file_id: str,
        user_id: Optional[str] = None,
        size: Optional[str] = None,
    ) -> Tuple[bytes, str]:
        """
        Load file content for download.

        Args:
            file_id: Id of the file to read
            user_id: Caller's user id, or None for anonymous requests
            size: Optional thumbnail width ("500", "250" or "100")

        Returns:
            (content bytes, MIME type)

        Raises:
            NotFoundError: unknown id, private file not owned by the caller,
                or content missing on disk
            BadRequestError: the file is a folder, or size is not allowed;
                only raised once the caller is allowed to see the record
        """
        record = self.file_repo.get_by_id(file_id)
        if record is None:
            raise NotFoundError()

        if not record.is_public and (user_id is None or user_id != record.user_id):
            logger.warning(f"Download denied for private file {file_id} [user_id={user_id or 'anonymous'}]")
            raise NotFoundError()

        if record.type == FOLDER_TYPE:
            raise BadRequestError("A folder doesn't have content")

        width = self._parse_size(size)

        if not record.local_path or not self.storage.exists(record.local_path, width):
            logger.info(f"Content missing on disk for file {file_id} (width={width})")
            raise NotFoundError()

        try:
            content = self.storage.read(record.local_path, width)
        except FileNotFoundError:
            raise NotFoundError()

        mime_type, _ = mimetypes.guess_type(record.name)
        return content, mime_type or DEFAULT_MIME_TYPE

    @staticmethod
    def _parse_size(size: Optional[str]) -> Optional[int]:
        if size is None or size == "":
            return None
        try:
            width = int(size)
        except (TypeError, ValueError):
            raise BadRequestError("Invalid size")
        if width not in THUMBNAIL_WIDTHS:
            raise BadRequestError("Invalid size")
        return width
