"""Shared data type definitions (User, FileRecord)."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class User:
    """
    A registered account as stored in the users collection.
    """
    user_id: str
    email: str
    password_hash: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            user_id=str(doc["_id"]),
            email=doc["email"],
            password_hash=doc["password"],
        )


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata for a file or folder in a user's namespace.
    """
    file_id: str
    user_id: str
    name: str
    type: str
    is_public: bool
    parent_id: str
    local_path: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "FileRecord":
        parent_id = doc.get("parentId", "0")
        return cls(
            file_id=str(doc["_id"]),
            user_id=str(doc["userId"]),
            name=doc["name"],
            type=doc["type"],
            is_public=bool(doc.get("isPublic", False)),
            parent_id=str(parent_id),
            local_path=doc.get("localPath"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation, with localPath only for content-bearing types."""
        data = {
            "id": self.file_id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.type,
            "isPublic": self.is_public,
            "parentId": self.parent_id,
        }
        if self.local_path is not None:
            data["localPath"] = self.local_path
        return data

