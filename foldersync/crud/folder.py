from foldersync.crud.base import BaseCRUD
from foldersync.models.folder import Folder
from foldersync.schemas import FolderCreate, FolderUpdate
from typing import List


class FolderCRUD(BaseCRUD[Folder, FolderCreate, FolderUpdate]):
    id_field = "folder_id"

    def __init__(self):
        super().__init__(Folder)

    async def get_children(self, device_id: str, parent_id: str) -> List[Folder]:
        """Direct child folders of a folder"""
        return await self.list(device_id, {"parent_id": parent_id})

    async def set_path(self, device_id: str, folder_id: str, path: str) -> None:
        """Write a folder's materialized path. Only PathService calls this."""
        await self.update_many(device_id, {"folder_id": folder_id}, {"path": path})


folder_crud = FolderCRUD()
