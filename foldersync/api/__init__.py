from foldersync.api.folder import router as folder_router
from foldersync.api.file import router as file_router
from foldersync.api.device import router as device_router

__all__ = ["folder_router", "file_router", "device_router"]
