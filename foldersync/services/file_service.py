from typing import List, Optional

from foldersync.core.exceptions import NotFoundError
from foldersync.crud import FileCRUD, file_crud
from foldersync.models.file import File
from foldersync.schemas.file import FileSyncItem, FileUpdate
from foldersync.utils import get_logger, store_guard

logger = get_logger(__name__)


class FileService:
    """Catalogue operations on synced files.

    Folder placement (folder_id / folder_path) is owned by FolderService and
    is never written from here.
    """

    def __init__(self, crud: Optional[FileCRUD] = None):
        self.crud = crud or file_crud

    @store_guard("sync files")
    async def sync_files(self, device_id: str, files: List[FileSyncItem]) -> List[File]:
        logger.info(f"[FILE_SYNC] Syncing {len(files)} files for device {device_id}")
        for item in files:
            if not item.file_id:
                logger.warning(f"[FILE_SYNC] Skipping file without file_id: {item.name}")
                continue
            await self.crud.upsert(device_id, item)
        return await self.crud.list(device_id)

    @store_guard("list files")
    async def list_files(
        self,
        device_id: str,
        folder_id: Optional[str] = None,
        unfiled: bool = False,
    ) -> List[File]:
        """All files of the device, or only those directly in one folder / unfiled"""
        if unfiled:
            return await self.crud.get_files_in_folder(device_id, None)
        if folder_id is not None:
            return await self.crud.get_files_in_folder(device_id, folder_id)
        return await self.crud.list(device_id)

    @store_guard("update file")
    async def update_file(self, device_id: str, file_id: str, obj_in: FileUpdate) -> File:
        file = await self.crud.get(device_id, file_id)
        if not file:
            raise NotFoundError("File not found", field="file_id")
        return await self.crud.update(file, obj_in.model_dump(exclude_unset=True, exclude_none=True))

    @store_guard("delete file")
    async def delete_file(self, device_id: str, file_id: str) -> None:
        file = await self.crud.get(device_id, file_id)
        if not file:
            logger.warning(f"[FILE_DELETE] File not found - file_id: {file_id}, device_id: {device_id}")
            raise NotFoundError("File not found", field="file_id")

        await self.crud.delete(file)
        logger.info(f"[FILE_DELETE] Deleted file {file_id} ({file.name}) for device {device_id}")


file_service = FileService()
