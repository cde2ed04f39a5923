from foldersync.crud.device import device_crud, DeviceCRUD
from foldersync.crud.folder import folder_crud, FolderCRUD
from foldersync.crud.file import file_crud, FileCRUD

__all__ = ["device_crud", "DeviceCRUD", "folder_crud", "FolderCRUD", "file_crud", "FileCRUD"]
