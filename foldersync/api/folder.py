from typing import List

from fastapi import APIRouter, Depends, Path, status

from foldersync.schemas import (
    ApiError, ApiResponse, FileResponse, FolderCreateRequest, FolderResponse,
    FolderTreeNode, FolderUpdate, MoveFilesRequest
)
from foldersync.services import device_service, folder_service
from foldersync.utils import created, get_device_id, ok

router = APIRouter(
    tags=["Folders"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        404: {"model": ApiError, "description": "Not Found"},
        422: {"model": ApiError, "description": "Validation Error"},
        500: {"model": ApiError, "description": "Internal Server Error"}
    }
)


def _folders(folders) -> List[FolderResponse]:
    return [FolderResponse.model_validate(folder) for folder in folders]


@router.get("", response_model=ApiResponse[List[FolderResponse]], summary="List folders")
async def list_folders(device_id: str = Depends(get_device_id)):
    await device_service.touch(device_id)
    folders = await folder_service.list_folders(device_id)
    return ok(data=_folders(folders), message="Folders retrieved successfully")


@router.get("/tree", response_model=ApiResponse[List[FolderTreeNode]], summary="Folder tree")
async def get_folder_tree(device_id: str = Depends(get_device_id)):
    tree = await folder_service.get_folder_tree(device_id)
    return ok(data=tree, message="Folder tree retrieved successfully")


@router.post(
    "",
    response_model=ApiResponse[List[FolderResponse]],
    status_code=status.HTTP_201_CREATED,
    summary="Create folder",
    description="Create a folder at the root or under parent_id; returns every folder of the device",
)
async def create_folder(request: FolderCreateRequest, device_id: str = Depends(get_device_id)):
    await device_service.register(device_id, request.device_info)
    folders = await folder_service.create_folder(device_id, request.name, request.parent_id)
    return created(_folders(folders), message="Folder created successfully")


@router.patch(
    "/{folder_id}",
    response_model=ApiResponse[List[FolderResponse]],
    summary="Rename or move folder",
    description="Send name to rename, parent_id to move (null moves to the root); paths below are rewritten",
)
async def update_folder(
    request: FolderUpdate,
    folder_id: str = Path(..., description="Folder to update"),
    device_id: str = Depends(get_device_id),
):
    folders = await folder_service.rename_or_move(device_id, folder_id, request)
    return ok(data=_folders(folders), message="Folder updated successfully")


@router.delete(
    "/{folder_id}",
    response_model=ApiResponse[List[FolderResponse]],
    summary="Delete folder",
    description="Delete the folder, its subfolders and every file filed in them",
)
async def delete_folder(
    folder_id: str = Path(..., description="Folder to delete"),
    device_id: str = Depends(get_device_id),
):
    folders = await folder_service.delete_folder(device_id, folder_id)
    return ok(data=_folders(folders), message="Folder deleted successfully")


@router.post("/move-files", response_model=ApiResponse[List[FileResponse]], summary="Move files to a folder")
async def move_files(request: MoveFilesRequest, device_id: str = Depends(get_device_id)):
    files = await folder_service.move_files(device_id, request.file_ids, request.target_folder_id)
    return ok(
        data=[FileResponse.model_validate(file) for file in files],
        message="Files moved successfully",
    )
