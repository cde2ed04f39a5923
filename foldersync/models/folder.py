from typing import Optional
from beanie import Document
from pydantic import Field
from pymongo import ASCENDING, IndexModel

from foldersync.models.time_mixin import TimeMixin


class Folder(TimeMixin, Document):
    """Folder node; the tree is rebuilt from parent_id links"""

    device_id: str = Field(..., description="Owning device")
    folder_id: str = Field(..., description="Identifier unique within the device")
    name: str = Field(..., min_length=1, description="Display name")
    parent_id: Optional[str] = Field(default=None, description="Parent folder id, None for a root folder")
    path: str = Field(..., description="Materialized path, e.g. /Docs/2024")

    class Settings:
        name = "folders"
        indexes = [
            IndexModel([("device_id", ASCENDING), ("folder_id", ASCENDING)], unique=True),
            IndexModel([("device_id", ASCENDING), ("parent_id", ASCENDING)]),
        ]
