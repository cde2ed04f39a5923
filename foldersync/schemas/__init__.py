from foldersync.schemas.response import ApiResponse, ApiError, ErrorDetail, HealthCheck
from foldersync.schemas.folder import (
    FolderCreate, FolderCreateRequest, FolderUpdate, FolderResponse,
    FolderTreeNode, MoveFilesRequest
)
from foldersync.schemas.file import FileSyncItem, FileSyncRequest, FileUpdate, FileResponse
from foldersync.schemas.device import DeviceResponse

__all__ = [
    "ApiResponse",
    "ApiError",
    "ErrorDetail",
    "HealthCheck",
    # Folder schemas
    "FolderCreate",
    "FolderCreateRequest",
    "FolderUpdate",
    "FolderResponse",
    "FolderTreeNode",
    "MoveFilesRequest",
    # File schemas
    "FileSyncItem",
    "FileSyncRequest",
    "FileUpdate",
    "FileResponse",
    # Device schemas
    "DeviceResponse",
]
