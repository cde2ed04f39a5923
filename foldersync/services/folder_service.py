from typing import Dict, List, Optional

from foldersync.configs.settings import settings
from foldersync.core.exceptions import InvalidInputError, NotFoundError
from foldersync.crud import FolderCRUD, FileCRUD, folder_crud, file_crud
from foldersync.models.file import File, ROOT_PATH
from foldersync.models.folder import Folder
from foldersync.schemas import FolderCreate, FolderTreeNode, FolderUpdate
from foldersync.services.path_service import PathService
from foldersync.utils import generate_id, get_logger, store_guard

logger = get_logger(__name__)


class FolderService:
    """Folder hierarchy operations.

    Mutations validate everything before their first write and return the
    device's complete folder list, so callers never reconcile deltas.
    """

    def __init__(
        self,
        folders: Optional[FolderCRUD] = None,
        files: Optional[FileCRUD] = None,
        paths: Optional[PathService] = None,
        max_depth: Optional[int] = None,
    ):
        self.crud = folders or folder_crud
        self.file_crud = files or file_crud
        self.paths = paths or PathService(self.crud, self.file_crud)
        self.max_depth = settings.FOLDER_MAX_DEPTH if max_depth is None else max_depth

    @staticmethod
    def _clean_name(name: Optional[str]) -> str:
        if not name or not name.strip():
            raise InvalidInputError("Folder name is required", field="name")
        return name.strip()

    def _check_depth(self, depth: int) -> None:
        if self.max_depth and depth > self.max_depth:
            raise InvalidInputError(
                f"Folder nesting is limited to {self.max_depth} levels",
                code="depth_exceeded",
                field="parent_id",
            )

    @store_guard("list folders")
    async def list_folders(self, device_id: str) -> List[Folder]:
        return await self.crud.list(device_id)

    @store_guard("create folder")
    async def create_folder(self, device_id: str, name: str, parent_id: Optional[str] = None) -> List[Folder]:
        name = self._clean_name(name)
        logger.info(f"Creating folder for device {device_id}: {name} (parent: {parent_id})")

        path = await self.paths.compute_path(device_id, parent_id, name)
        if parent_id is not None and self.max_depth:
            self._check_depth(await self.paths.folder_depth(device_id, parent_id) + 1)

        folder = await self.crud.create(FolderCreate(
            device_id=device_id,
            folder_id=generate_id(),
            name=name,
            parent_id=parent_id,
            path=path,
        ))
        logger.info(f"Folder created successfully: {folder.folder_id} at {folder.path}")
        return await self.crud.list(device_id)

    @store_guard("update folder")
    async def rename_or_move(self, device_id: str, folder_id: str, obj_in: FolderUpdate) -> List[Folder]:
        """Rename and/or re-parent a folder, then rewrite paths below it.

        Only fields present in `obj_in` are considered; an explicit
        `parent_id=None` moves the folder to the root.
        """
        folder = await self.crud.get(device_id, folder_id)
        if not folder:
            raise NotFoundError("Folder not found", field="folder_id")

        changes = obj_in.model_dump(exclude_unset=True)
        name = folder.name
        parent_id = folder.parent_id
        path_changed = False

        if changes.get("name") is not None:
            new_name = self._clean_name(changes["name"])
            if new_name != folder.name:
                name = new_name
                path_changed = True

        if "parent_id" in changes and changes["parent_id"] != folder.parent_id:
            parent_depth = await self.paths.validate_move(device_id, folder_id, changes["parent_id"])
            if self.max_depth:
                self._check_depth(parent_depth + await self.paths.subtree_height(device_id, folder_id))
            parent_id = changes["parent_id"]
            path_changed = True

        if not path_changed:
            await self.crud.update(folder, {})
            return await self.crud.list(device_id)

        new_path = await self.paths.compute_path(device_id, parent_id, name)
        logger.info(f"Updating folder {folder_id} for device {device_id}: {folder.path} -> {new_path}")

        # Name and parent are stored last so a retry after a failed
        # propagation still sees the change and propagates again
        await self.paths.propagate_path_change(device_id, folder_id, new_path)
        await self.crud.update(folder, {"name": name, "parent_id": parent_id})
        return await self.crud.list(device_id)

    @store_guard("delete folder")
    async def delete_folder(self, device_id: str, folder_id: str) -> List[Folder]:
        """Delete a folder, all of its descendants and every file filed in them"""
        folder = await self.crud.get(device_id, folder_id)
        if not folder:
            raise NotFoundError("Folder not found", field="folder_id")

        folder_ids = await self.paths.collect_subtree_ids(device_id, folder_id)
        logger.info(f"Deleting folder {folder.path} for device {device_id} ({len(folder_ids)} folders)")

        await self.file_crud.delete_in_folders(device_id, folder_ids)
        await self.crud.delete_by_ids(device_id, folder_ids)
        return await self.crud.list(device_id)

    @store_guard("move files")
    async def move_files(self, device_id: str, file_ids: List[str], target_folder_id: Optional[str]) -> List[File]:
        """File a batch of files under `target_folder_id`, or unfile them when it is None.

        Ids that match no file for the device are ignored.
        """
        if not file_ids:
            raise InvalidInputError("File IDs are required", field="file_ids")

        folder_path = ROOT_PATH
        if target_folder_id is not None:
            target = await self.crud.get(device_id, target_folder_id)
            if not target:
                raise NotFoundError("Target folder not found", field="target_folder_id")
            folder_path = target.path

        await self.file_crud.assign_folder(device_id, file_ids, target_folder_id, folder_path)
        logger.info(f"Moved {len(file_ids)} files to {folder_path} for device {device_id}")
        return await self.file_crud.list_by_ids(device_id, file_ids)

    @store_guard("build folder tree")
    async def get_folder_tree(self, device_id: str) -> List[FolderTreeNode]:
        """Nest the device's folders by parent_id.

        Folders whose parent is missing, or that sit on a stored parent
        cycle, become roots so that every folder appears exactly once.
        """
        folders = await self.crud.list(device_id)

        nodes: Dict[str, FolderTreeNode] = {
            folder.folder_id: FolderTreeNode(
                folder_id=folder.folder_id,
                name=folder.name,
                path=folder.path,
                parent_id=folder.parent_id,
            )
            for folder in folders
        }

        def on_cycle(node: FolderTreeNode) -> bool:
            seen = set()
            parent_id = node.parent_id
            while parent_id in nodes and parent_id not in seen:
                if parent_id == node.folder_id:
                    return True
                seen.add(parent_id)
                parent_id = nodes[parent_id].parent_id
            return False

        tree = []
        for node in sorted(nodes.values(), key=lambda n: n.path):
            parent = nodes.get(node.parent_id) if node.parent_id else None
            if parent and on_cycle(node):
                logger.warning(f"Folder {node.folder_id} of device {device_id} is part of a parent cycle, listing it as a root")
                parent = None
            if parent:
                parent.children.append(node)
            else:
                tree.append(node)
        return tree


folder_service = FolderService()
