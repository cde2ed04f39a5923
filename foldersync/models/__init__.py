from foldersync.models.time_mixin import TimeMixin
from foldersync.models.device import Device, DeviceInfo
from foldersync.models.folder import Folder
from foldersync.models.file import File, FileStatus, ROOT_PATH

# Export all models for easy import
__all__ = [
    "TimeMixin",
    "Device",
    "DeviceInfo",
    "Folder",
    "File",
    "FileStatus",
    "ROOT_PATH",
]

# List of all document models for Beanie initialization
DOCUMENT_MODELS = [
    Device,
    Folder,
    File,
]
