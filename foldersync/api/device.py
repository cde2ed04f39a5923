from fastapi import APIRouter, Depends

from foldersync.schemas import ApiError, ApiResponse, DeviceResponse
from foldersync.services import device_service
from foldersync.utils import get_device_id, ok

router = APIRouter(
    tags=["Devices"],
    responses={
        400: {"model": ApiError, "description": "Bad Request"},
        404: {"model": ApiError, "description": "Not Found"},
    }
)


@router.get("/me", response_model=ApiResponse[DeviceResponse], summary="Current device")
async def get_device_info(device_id: str = Depends(get_device_id)):
    device = await device_service.get_device(device_id)
    return ok(data=DeviceResponse.model_validate(device), message="Device retrieved successfully")
