from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from foldersync.models.device import DeviceInfo


class FolderCreate(BaseModel):
    """Internal schema for creating folder with all required fields"""
    device_id: str
    folder_id: str
    name: str
    parent_id: Optional[str] = None
    path: str


class FolderCreateRequest(BaseModel):
    """Body of a create-folder request"""
    name: str = Field(..., description="Folder name")
    parent_id: Optional[str] = Field(None, description="Parent folder id, omitted or null for a root folder")
    device_info: Optional[DeviceInfo] = Field(None, description="Fingerprint refresh sent by the extension")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "2024",
                "parent_id": "9b1deb4d3b7d4bad9bdd2b0d7b3dcb6d"
            }
        }
    )


class FolderUpdate(BaseModel):
    """Rename and/or move. Only the keys that are sent are applied;
    an explicit null parent_id moves the folder to the root."""
    name: Optional[str] = None
    parent_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Papers",
                "parent_id": None
            }
        }
    )


class FolderResponse(BaseModel):
    """Schema for returning folder information"""
    folder_id: str
    device_id: str
    name: str
    parent_id: Optional[str] = None
    path: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FolderTreeNode(BaseModel):
    """Folder with nested children, for clients that want the tree prebuilt"""
    folder_id: str
    name: str
    path: str
    parent_id: Optional[str] = None
    children: List["FolderTreeNode"] = Field(default_factory=list)


class MoveFilesRequest(BaseModel):
    """Re-file a batch of files; a null target moves them to the root"""
    file_ids: List[str] = Field(..., min_length=1, description="Files to move")
    target_folder_id: Optional[str] = Field(None, description="Destination folder id, null for root")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "file_ids": ["lq2k3j4abc", "lq2k3j4def"],
                "target_folder_id": "9b1deb4d3b7d4bad9bdd2b0d7b3dcb6d"
            }
        }
    )
