from typing import Optional

from fastapi import Header

from foldersync.core.exceptions import AppError


def get_device_id(
    x_device_id: Optional[str] = Header(None, alias="X-Device-Id", description="Calling extension's device identifier")
) -> str:
    """
    FastAPI dependency resolving the device scope of a request.

    The extension sends its fingerprint in the X-Device-Id header; every
    folder and file operation is filtered by it.

    Usage:
        @router.get("/endpoint")
        async def my_endpoint(device_id: str = Depends(get_device_id)):
            ...
    """
    if not x_device_id or not x_device_id.strip():
        raise AppError("Device ID is required", code="device_id_required", field="X-Device-Id")
    return x_device_id.strip()
