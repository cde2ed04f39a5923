from .path_service import PathService, path_service
from .folder_service import FolderService, folder_service
from .file_service import FileService, file_service
from .device_service import DeviceService, device_service

__all__ = ["PathService", "path_service", "FolderService", "folder_service", "FileService", "file_service", "DeviceService", "device_service"]
