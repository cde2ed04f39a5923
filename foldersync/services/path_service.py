"""
Materialized path maintenance for the folder forest.

A folder's `path` is `/<name>` at the root and `<parent.path>/<name>` below
it. Files carry a copy of their folder's path in `folder_path`. PathService
is the only writer of `Folder.path` and keeps both consistent after names or
parents change.

Tree walks issue one awaited store call per node, parents before children,
so a subtree rewrite is replayable: running it again with the same target
path rewrites the same values.
"""
from typing import AsyncIterator, List, Optional

from foldersync.core.exceptions import InvalidMoveError, NotFoundError
from foldersync.crud import FolderCRUD, FileCRUD, folder_crud, file_crud
from foldersync.models.folder import Folder
from foldersync.utils import get_logger

logger = get_logger(__name__)


class PathService:
    def __init__(self, folders: Optional[FolderCRUD] = None, files: Optional[FileCRUD] = None):
        self.folders = folders or folder_crud
        self.files = files or file_crud

    async def compute_path(self, device_id: str, parent_id: Optional[str], name: str) -> str:
        """Path a folder called `name` gets under `parent_id`"""
        if parent_id is None:
            return f"/{name}"

        parent = await self.folders.get(device_id, parent_id)
        if not parent:
            raise NotFoundError("Parent folder not found", field="parent_id")
        return f"{parent.path}/{name}"

    async def propagate_path_change(self, device_id: str, folder_id: str, new_path: str) -> None:
        """Rewrite the path of a folder, its descendants and the files they hold"""
        await self.folders.set_path(device_id, folder_id, new_path)

        children = await self.folders.get_children(device_id, folder_id)
        for child in children:
            await self.propagate_path_change(device_id, child.folder_id, f"{new_path}/{child.name}")

        await self.files.set_folder_path(device_id, folder_id, new_path)

    async def _ancestry(self, device_id: str, folder: Folder) -> AsyncIterator[Folder]:
        """Yield `folder` then each ancestor up to its root.

        A dangling parent_id ends the walk; a revisited folder means the
        stored chain is cyclic and is reported as an invalid move.
        """
        seen = set()
        current: Optional[Folder] = folder
        while current is not None:
            if current.folder_id in seen:
                logger.error(f"Cyclic folder ancestry for device {device_id} at {current.folder_id}")
                raise InvalidMoveError("Folder hierarchy contains a cycle")
            seen.add(current.folder_id)
            yield current
            if current.parent_id is None:
                return
            current = await self.folders.get(device_id, current.parent_id)

    async def validate_move(self, device_id: str, folder_id: str, new_parent_id: Optional[str]) -> int:
        """
        Check that `folder_id` may be re-parented under `new_parent_id`.

        Returns:
            Depth of the new parent (root level is 1, moving to the root is 0)

        Raises:
            InvalidMoveError: new parent is the folder itself or one of its descendants
            NotFoundError: new parent does not exist for the device
        """
        if new_parent_id is None:
            return 0
        if new_parent_id == folder_id:
            raise InvalidMoveError("Cannot move a folder into itself", field="parent_id")

        new_parent = await self.folders.get(device_id, new_parent_id)
        if not new_parent:
            raise NotFoundError("Target parent folder not found", field="parent_id")

        depth = 0
        async for ancestor in self._ancestry(device_id, new_parent):
            if ancestor.folder_id == folder_id:
                raise InvalidMoveError("Cannot move a folder into its descendant", field="parent_id")
            depth += 1
        return depth

    async def folder_depth(self, device_id: str, folder_id: str) -> int:
        """Number of folders on the chain from the root down to `folder_id`"""
        folder = await self.folders.get(device_id, folder_id)
        if not folder:
            raise NotFoundError("Folder not found", field="folder_id")

        depth = 0
        async for _ in self._ancestry(device_id, folder):
            depth += 1
        return depth

    async def subtree_height(self, device_id: str, folder_id: str) -> int:
        """Levels in the subtree rooted at `folder_id`, 1 for a leaf"""
        children = await self.folders.get_children(device_id, folder_id)
        height = 0
        for child in children:
            height = max(height, await self.subtree_height(device_id, child.folder_id))
        return height + 1

    async def collect_subtree_ids(self, device_id: str, folder_id: str) -> List[str]:
        """`folder_id` and every descendant id, parents before children"""
        folder_ids = [folder_id]
        children = await self.folders.get_children(device_id, folder_id)
        for child in children:
            folder_ids.extend(await self.collect_subtree_ids(device_id, child.folder_id))
        return folder_ids


path_service = PathService()
