from datetime import datetime
from typing import Optional

from foldersync.core.exceptions import NotFoundError
from foldersync.crud import DeviceCRUD, device_crud
from foldersync.models.device import Device, DeviceInfo
from foldersync.utils import get_logger, store_guard

logger = get_logger(__name__)


class DeviceService:
    def __init__(self, crud: Optional[DeviceCRUD] = None):
        self.crud = crud or device_crud

    @store_guard("register device")
    async def register(self, device_id: str, device_info: Optional[DeviceInfo] = None) -> Device:
        """Get or create the device and merge any newly reported fingerprint fields"""
        device = await self.crud.get(device_id, device_id)
        if not device:
            logger.info(f"Registering new device {device_id}")
            return await self.crud.create_device(device_id, device_info)

        if device_info:
            device.device_info = device.device_info.model_copy(
                update=device_info.model_dump(exclude_none=True)
            )
        device.last_seen = datetime.utcnow()
        device.updated_at = datetime.utcnow()
        await device.save()
        return device

    @store_guard("update device")
    async def touch(self, device_id: str) -> None:
        await self.crud.touch(device_id)

    @store_guard("get device")
    async def get_device(self, device_id: str) -> Device:
        device = await self.crud.get(device_id, device_id)
        if not device:
            raise NotFoundError("Device not found", field="device_id")
        return device


device_service = DeviceService()
