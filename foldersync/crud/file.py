from datetime import datetime
from foldersync.crud.base import BaseCRUD
from foldersync.models.file import File, ROOT_PATH
from foldersync.schemas.file import FileSyncItem, FileUpdate
from typing import Iterable, List, Optional


class FileCRUD(BaseCRUD[File, FileSyncItem, FileUpdate]):
    id_field = "file_id"

    def __init__(self):
        super().__init__(File)

    async def get_files_in_folder(self, device_id: str, folder_id: Optional[str]) -> List[File]:
        """Files filed directly under folder_id; None lists unfiled files"""
        return await self.list(device_id, {"folder_id": folder_id})

    async def set_folder_path(self, device_id: str, folder_id: str, folder_path: str) -> None:
        """Refresh the denormalized path of every file in a folder"""
        await self.update_many(device_id, {"folder_id": folder_id}, {"folder_path": folder_path})

    async def assign_folder(
        self,
        device_id: str,
        file_ids: Iterable[str],
        folder_id: Optional[str],
        folder_path: str,
    ) -> None:
        """Re-file files; ids that do not exist match nothing"""
        await self.update_by_ids(device_id, file_ids, {
            "folder_id": folder_id,
            "folder_path": folder_path,
            "updated_at": datetime.utcnow(),
        })

    async def delete_in_folders(self, device_id: str, folder_ids: Iterable[str]) -> None:
        await self.delete_many(device_id, {"folder_id": {"$in": list(folder_ids)}})

    async def upsert(self, device_id: str, item: FileSyncItem) -> None:
        """Insert or refresh a synced file's catalogue fields, keeping its folder placement"""
        now = datetime.utcnow()
        values = item.model_dump(exclude={"file_id", "date_added"}, exclude_unset=True)
        values["updated_at"] = now
        # Fields the client left out only get their defaults on first insert
        on_insert = item.model_dump(exclude=set(values) | {"file_id", "date_added"})
        on_insert.update({"folder_id": None, "folder_path": ROOT_PATH, "metadata": {}})
        if item.date_added:
            values["created_at"] = item.date_added
        else:
            on_insert["created_at"] = now
        await self.model.get_motor_collection().update_one(
            self._scoped(device_id, {"file_id": item.file_id}),
            {"$set": values, "$setOnInsert": on_insert},
            upsert=True,
        )


file_crud = FileCRUD()
