"""File operation API routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import Response

from common.constants import ROOT_PARENT_ID
from server.auth import get_current_user, get_optional_user
from server.schemas.files import FileResponse, UploadFileRequest
from server.services.file_service import FileService

router = APIRouter(prefix="/files", tags=["Files"])


def get_file_service(request: Request) -> FileService:
    container = request.app.state.container
    return FileService(container.database, container.storage, container.queue)


def parse_page(page: Optional[str]) -> int:
    try:
        value = int(page)
    except (TypeError, ValueError):
        return 0
    return value if value >= 0 else 0


@router.post(
    "",
    response_model=FileResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def upload_file(
    request: UploadFileRequest,
    current_user: str = Depends(get_current_user),
    file_service: FileService = Depends(get_file_service),
):
    """
    Create a folder, or store a file or image.

    Parameters:
        - name: File name (required)
        - type: folder, file or image (required)
        - parentId: Id of the parent folder, "0" for the root (default)
        - isPublic: Visibility (default false)
        - data: Base64 content (required unless type is folder)
        - X-Token header (required)

    Returns:
        - The stored file record

    Raises:
        - 400: Missing name/type/data, Parent not found, Parent is not a folder
        - 401: Missing or unknown token
    """
    record = file_service.upload_file(
        user_id=current_user,
        name=request.name,
        file_type=request.type,
        parent_id=request.parentId,
        is_public=request.isPublic,
        data=request.data,
    )
    return FileResponse.from_record(record)


@router.get("", response_model=List[FileResponse], response_model_exclude_none=True)
def list_files(
    parentId: str = Query(ROOT_PARENT_ID),
    page: Optional[str] = Query(None),
    current_user: str = Depends(get_current_user),
    file_service: FileService = Depends(get_file_service),
):
    """
    List the caller's files under one parent, 20 per page.
    """
    records = file_service.list_files(current_user, parentId or ROOT_PARENT_ID, parse_page(page))
    return [FileResponse.from_record(record) for record in records]


@router.get("/{file_id}", response_model=FileResponse, response_model_exclude_none=True)
def get_file(
    file_id: str,
    current_user: str = Depends(get_current_user),
    file_service: FileService = Depends(get_file_service),
):
    """
    Fetch one of the caller's files.

    Raises:
        - 401: Missing or unknown token
        - 404: Unknown id, or the file belongs to another user
    """
    return FileResponse.from_record(file_service.get_file(file_id, current_user))


@router.put("/{file_id}/publish", response_model=FileResponse, response_model_exclude_none=True)
def publish_file(
    file_id: str,
    current_user: str = Depends(get_current_user),
    file_service: FileService = Depends(get_file_service),
):
    """Make a file readable without a token."""
    return FileResponse.from_record(file_service.set_visibility(file_id, current_user, True))


@router.put("/{file_id}/unpublish", response_model=FileResponse, response_model_exclude_none=True)
def unpublish_file(
    file_id: str,
    current_user: str = Depends(get_current_user),
    file_service: FileService = Depends(get_file_service),
):
    """Restrict a file to its owner."""
    return FileResponse.from_record(file_service.set_visibility(file_id, current_user, False))


@router.get("/{file_id}/data")
def get_file_data(
    file_id: str,
    size: Optional[str] = Query(None),
    current_user: Optional[str] = Depends(get_optional_user),
    file_service: FileService = Depends(get_file_service),
):
    """
    Return raw file content, or one of its thumbnails.

    Parameters:
        - size: 500, 250 or 100 to read the matching thumbnail
        - X-Token header (required only for private files)

    Raises:
        - 400: The file is a folder, or size is not allowed
        - 404: Unknown id, private file not owned by the caller, or content
               not on disk (including thumbnails not generated yet)
    """
    content, mime_type = file_service.read_content(file_id, current_user, size)
    return Response(content=content, media_type=mime_type)
