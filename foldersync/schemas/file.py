from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Dict, List, Optional

from foldersync.models.device import DeviceInfo
from foldersync.models.file import FileStatus


class FileSyncItem(BaseModel):
    """One file entry pushed by the extension"""
    file_id: Optional[str] = Field(None, description="Extension side file id")
    name: str = Field(..., description="File name")
    type: Optional[str] = Field(None, description="MIME type")
    size: Optional[int] = Field(None, ge=0, description="Size in bytes")
    url: Optional[str] = Field(None, description="Source URL")
    tags: List[str] = Field(default_factory=list)
    status: FileStatus = "pending_analysis"
    date_added: Optional[datetime] = Field(None, description="When the extension first saw the file")


class FileSyncRequest(BaseModel):
    """Schema for a sync batch"""
    files: List[FileSyncItem] = Field(default_factory=list)
    device_info: Optional[DeviceInfo] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "files": [
                    {
                        "file_id": "lq2k3j4abc",
                        "name": "invoice.pdf",
                        "type": "application/pdf",
                        "size": 1024000,
                        "tags": ["finance"]
                    }
                ]
            }
        }
    )


class FileUpdate(BaseModel):
    """Schema for updating catalogue fields of a file.

    Folder placement is changed through move-files only."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[str] = None
    size: Optional[int] = Field(None, ge=0)
    url: Optional[str] = None
    tags: Optional[List[str]] = None
    status: Optional[FileStatus] = None
    metadata: Optional[Dict[str, Any]] = None


class FileResponse(BaseModel):
    """Schema for returning file information"""
    file_id: str
    device_id: str
    name: str
    type: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    status: FileStatus
    metadata: Dict[str, Any] = Field(default_factory=dict)
    folder_id: Optional[str] = None
    folder_path: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
