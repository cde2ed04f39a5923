from datetime import datetime
from pydantic import BaseModel, ConfigDict

from foldersync.models.device import DeviceInfo


class DeviceResponse(BaseModel):
    device_id: str
    device_info: DeviceInfo
    last_seen: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
