from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from foldersync.schemas import ApiError, ApiResponse, FileResponse, FileSyncRequest, FileUpdate
from foldersync.services import device_service, file_service
from foldersync.utils import get_device_id, ok

router = APIRouter(
    tags=["Files"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        404: {"model": ApiError, "description": "Not Found"},
        422: {"model": ApiError, "description": "Validation Error"},
        500: {"model": ApiError, "description": "Internal Server Error"}
    }
)


def _files(files) -> List[FileResponse]:
    return [FileResponse.model_validate(file) for file in files]


@router.post("/sync", response_model=ApiResponse[List[FileResponse]], summary="Sync files")
async def sync_files(request: FileSyncRequest, device_id: str = Depends(get_device_id)):
    await device_service.register(device_id, request.device_info)
    files = await file_service.sync_files(device_id, request.files)
    return ok(data=_files(files), message="Files synced successfully")


@router.get("", response_model=ApiResponse[List[FileResponse]], summary="List files")
async def list_files(
    folder_id: Optional[str] = Query(None, description="Only files filed directly in this folder"),
    unfiled: bool = Query(False, description="Only files that are not in any folder"),
    device_id: str = Depends(get_device_id),
):
    await device_service.touch(device_id)
    files = await file_service.list_files(device_id, folder_id=folder_id, unfiled=unfiled)
    return ok(data=_files(files), message="Files retrieved successfully")


@router.patch("/{file_id}", response_model=ApiResponse[FileResponse], summary="Update file")
async def update_file(
    request: FileUpdate,
    file_id: str = Path(..., description="File to update"),
    device_id: str = Depends(get_device_id),
):
    file = await file_service.update_file(device_id, file_id, request)
    return ok(data=FileResponse.model_validate(file), message="File updated successfully")


@router.delete("/{file_id}", response_model=ApiResponse[bool], summary="Delete file")
async def delete_file(
    file_id: str = Path(..., description="File to delete"),
    device_id: str = Depends(get_device_id),
):
    await file_service.delete_file(device_id, file_id)
    return ok(data=True, message="File deleted successfully")
