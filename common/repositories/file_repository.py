"""File repository for database operations."""

from typing import List, Optional

from pymongo import ReturnDocument

from common.constants import PAGE_SIZE
from common.database import Database
from common.logging_config import get_logger
from common.types import FileRecord
from common.utils import parse_object_id

logger = get_logger(__name__)


class FileRepository:
    def __init__(self, database: Database):
        self.database = database

    def create_file(
        self,
        user_id: str,
        name: str,
        file_type: str,
        is_public: bool,
        parent_id: str,
        local_path: Optional[str] = None,
    ) -> FileRecord:
        document = {
            "userId": parse_object_id(user_id),
            "name": name,
            "type": file_type,
            "isPublic": is_public,
            "parentId": parent_id,
        }
        if local_path is not None:
            document["localPath"] = local_path

        try:
            result = self.database.files.insert_one(document)
        except Exception as e:
            logger.error(f"Failed to create file {name} [user_id={user_id}]: {e}", exc_info=True)
            raise

        document["_id"] = result.inserted_id
        record = FileRecord.from_document(document)
        logger.info(f"File created: {name} type={file_type} [file_id={record.file_id}] [user_id={user_id}]")
        return record

    def get_by_id(self, file_id: str) -> Optional[FileRecord]:
        object_id = parse_object_id(file_id)
        if object_id is None:
            return None
        doc = self.database.files.find_one({"_id": object_id})
        return FileRecord.from_document(doc) if doc else None

    def get_by_id_and_owner(self, file_id: str, user_id: str) -> Optional[FileRecord]:
        file_oid = parse_object_id(file_id)
        user_oid = parse_object_id(user_id)
        if file_oid is None or user_oid is None:
            return None
        doc = self.database.files.find_one({"_id": file_oid, "userId": user_oid})
        return FileRecord.from_document(doc) if doc else None

    def list_by_parent(self, user_id: str, parent_id: str, page: int = 0) -> List[FileRecord]:
        user_oid = parse_object_id(user_id)
        if user_oid is None:
            return []
        cursor = (
            self.database.files
            .find({"userId": user_oid, "parentId": parent_id})
            .skip(page * PAGE_SIZE)
            .limit(PAGE_SIZE)
        )
        return [FileRecord.from_document(doc) for doc in cursor]

    def set_public(self, file_id: str, user_id: str, is_public: bool) -> Optional[FileRecord]:
        """
        Atomically update visibility and return the post-update record.
        """
        file_oid = parse_object_id(file_id)
        user_oid = parse_object_id(user_id)
        if file_oid is None or user_oid is None:
            return None
        doc = self.database.files.find_one_and_update(
            {"_id": file_oid, "userId": user_oid},
            {"$set": {"isPublic": is_public}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return None
        logger.info(f"Visibility updated: isPublic={is_public} [file_id={file_id}] [user_id={user_id}]")
        return FileRecord.from_document(doc)
