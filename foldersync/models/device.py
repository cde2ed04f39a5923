from datetime import datetime
from typing import Annotated, Optional
from beanie import Document, Indexed
from pydantic import BaseModel, Field

from foldersync.models.time_mixin import TimeMixin


class DeviceInfo(BaseModel):
    """Browser fingerprint details reported by the extension"""

    user_agent: Optional[str] = None
    language: Optional[str] = None
    platform: Optional[str] = None
    hardware_concurrency: Optional[int] = None
    screen_resolution: Optional[str] = None
    timezone: Optional[str] = None
    color_depth: Optional[int] = None
    device_memory: Optional[str] = None


class Device(TimeMixin, Document):
    device_id: Annotated[str, Indexed(unique=True)] = Field(..., description="Extension installation identifier")
    device_info: DeviceInfo = Field(default_factory=DeviceInfo, description="Latest reported fingerprint")
    last_seen: datetime = Field(default_factory=datetime.utcnow, description="Last request from this device")

    class Settings:
        name = "devices"
