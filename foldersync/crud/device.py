from datetime import datetime
from typing import Optional

from foldersync.crud.base import BaseCRUD
from foldersync.models.device import Device, DeviceInfo


class DeviceCRUD(BaseCRUD[Device, DeviceInfo, DeviceInfo]):
    id_field = "device_id"

    def __init__(self):
        super().__init__(Device)

    async def create_device(self, device_id: str, device_info: Optional[DeviceInfo] = None) -> Device:
        device = Device(device_id=device_id, device_info=device_info or DeviceInfo())
        await device.insert()
        return device

    async def touch(self, device_id: str) -> None:
        """Bump last_seen without loading the document"""
        await self.update_many(device_id, {}, {"last_seen": datetime.utcnow()})


device_crud = DeviceCRUD()
