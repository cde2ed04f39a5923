from typing import Any, Dict, List, Literal, Optional
from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from foldersync.models.time_mixin import TimeMixin

ROOT_PATH = "/"

FileStatus = Literal["pending_analysis", "analyzing", "analyzed", "error"]


class File(TimeMixin, Document):
    """File catalogue entry synced from the extension"""

    device_id: str = Field(..., description="Owning device")
    file_id: str = Field(..., description="Identifier unique within the device")
    name: str = Field(..., description="File name")
    type: Optional[str] = Field(default=None, description="MIME type")
    size: Optional[int] = Field(default=None, description="Size in bytes")
    url: Optional[str] = Field(default=None, description="Source URL")
    tags: List[str] = Field(default_factory=list)
    status: FileStatus = Field(default="pending_analysis", description="Analysis status")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    # Denormalized from the owning folder; "/" when unfiled
    folder_id: Optional[str] = Field(default=None, description="Owning folder id")
    folder_path: str = Field(default=ROOT_PATH, description="Owning folder path")

    class Settings:
        name = "files"
        indexes = [
            IndexModel([("device_id", ASCENDING), ("file_id", ASCENDING)], unique=True),
            IndexModel([("device_id", ASCENDING), ("folder_id", ASCENDING)]),
        ]
