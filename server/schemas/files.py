"""Pydantic schemas for file operation endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, field_validator

from common.constants import ROOT_PARENT_ID
from common.types import FileRecord


class UploadFileRequest(BaseModel):
    """
    Request model for file upload.

    name, type and data are optional here so that the service can report
    which one is missing.
    """
    name: Optional[str] = None
    type: Optional[str] = None
    parentId: Union[str, int] = ROOT_PARENT_ID
    isPublic: bool = False
    data: Optional[str] = None

    @field_validator("parentId", mode="before")
    @classmethod
    def normalize_parent_id(cls, value):
        if value is None or value == "" or value == 0:
            return ROOT_PARENT_ID
        return str(value)


class FileResponse(BaseModel):
    """Response model for file metadata."""
    id: str
    userId: str
    name: str
    type: str
    isPublic: bool
    parentId: str
    localPath: Optional[str] = None

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileResponse":
        return cls(**record.to_dict())
