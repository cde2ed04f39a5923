"""
Tests for foldersync/services/folder_service.py

Covers the hierarchy operations end to end against the in-memory store:
create, rename/move with propagation, cascading delete, move-files, the
nesting limit and store failure translation.
"""

from unittest.mock import AsyncMock

import pytest
from pymongo.errors import PyMongoError

from foldersync.core.exceptions import (
    InvalidInputError, InvalidMoveError, NotFoundError, StoreFailureError
)
from foldersync.crud import FolderCRUD
from foldersync.models import File, Folder
from foldersync.schemas import FolderUpdate
from foldersync.services import FolderService

from conftest import DEVICE_ID, OTHER_DEVICE_ID, assert_paths_consistent, get_file, get_folder


async def _all_folders(device_id: str = DEVICE_ID):
    return await Folder.find({"device_id": device_id}).to_list()


class TestCreateFolder:

    async def test_create_root_and_child(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)

        assert docs.path == "/Docs"
        assert docs.parent_id is None
        assert year.path == "/Docs/2024"
        assert year.parent_id == docs.folder_id
        assert docs.folder_id != year.folder_id

    async def test_new_folder_has_last_modified(self, make_folder):
        docs = await make_folder("Docs")
        stored = await get_folder(docs.folder_id)
        assert stored.updated_at is not None
        assert stored.updated_at >= stored.created_at

    async def test_returns_full_listing(self, folder_service, make_folder):
        await make_folder("Docs")
        await make_folder("Music")
        folders = await folder_service.create_folder(DEVICE_ID, "Photos")
        assert sorted(f.name for f in folders) == ["Docs", "Music", "Photos"]

    async def test_strips_surrounding_whitespace(self, make_folder):
        folder = await make_folder("  Docs  ")
        assert folder.name == "Docs"
        assert folder.path == "/Docs"

    @pytest.mark.parametrize("name", ["", "   ", None])
    async def test_rejects_empty_name(self, folder_service, name):
        with pytest.raises(InvalidInputError):
            await folder_service.create_folder(DEVICE_ID, name)
        assert await _all_folders() == []

    async def test_missing_parent_creates_nothing(self, folder_service):
        with pytest.raises(NotFoundError):
            await folder_service.create_folder(DEVICE_ID, "Reports", "missing")
        assert await _all_folders() == []

    async def test_sibling_names_may_repeat(self, make_folder):
        first = await make_folder("Docs")
        second = await make_folder("Docs")
        assert first.folder_id != second.folder_id
        assert first.path == second.path == "/Docs"

    async def test_devices_are_isolated(self, folder_service, make_folder):
        await make_folder("Docs")
        await make_folder("Music", device_id=OTHER_DEVICE_ID)

        assert [f.name for f in await folder_service.list_folders(DEVICE_ID)] == ["Docs"]
        assert [f.name for f in await folder_service.list_folders(OTHER_DEVICE_ID)] == ["Music"]


class TestRenameOrMove:

    async def test_rename_root_rewrites_subtree(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        await make_file("report", year)

        folders = await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(name="Papers"))

        paths = {f.folder_id: f.path for f in folders}
        assert paths[docs.folder_id] == "/Papers"
        assert paths[year.folder_id] == "/Papers/2024"
        assert (await get_file("report")).folder_path == "/Papers/2024"
        assert (await get_folder(docs.folder_id)).name == "Papers"
        await assert_paths_consistent()

    async def test_move_under_new_parent(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        archive = await make_folder("Archive")
        await make_file("report", year)

        await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id=archive.folder_id))

        moved = await get_folder(docs.folder_id)
        assert moved.parent_id == archive.folder_id
        assert moved.path == "/Archive/Docs"
        assert (await get_folder(year.folder_id)).path == "/Archive/Docs/2024"
        assert (await get_file("report")).folder_path == "/Archive/Docs/2024"
        await assert_paths_consistent()

    async def test_rename_and_move_together(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        archive = await make_folder("Archive")

        await folder_service.rename_or_move(
            DEVICE_ID, docs.folder_id, FolderUpdate(name="Old Docs", parent_id=archive.folder_id)
        )

        assert (await get_folder(docs.folder_id)).path == "/Archive/Old Docs"

    async def test_explicit_null_parent_moves_to_root(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)

        await folder_service.rename_or_move(DEVICE_ID, year.folder_id, FolderUpdate(parent_id=None))

        moved = await get_folder(year.folder_id)
        assert moved.parent_id is None
        assert moved.path == "/2024"

    async def test_absent_parent_keeps_position(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)

        await folder_service.rename_or_move(DEVICE_ID, year.folder_id, FolderUpdate(name="2025"))

        renamed = await get_folder(year.folder_id)
        assert renamed.parent_id == docs.folder_id
        assert renamed.path == "/Docs/2025"

    async def test_move_into_descendant_writes_nothing(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)

        with pytest.raises(InvalidMoveError):
            await folder_service.rename_or_move(
                DEVICE_ID, docs.folder_id, FolderUpdate(name="Papers", parent_id=year.folder_id)
            )

        unchanged = await get_folder(docs.folder_id)
        assert unchanged.name == "Docs"
        assert unchanged.parent_id is None
        assert unchanged.path == "/Docs"

    async def test_move_into_itself(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        with pytest.raises(InvalidMoveError):
            await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id=docs.folder_id))

    async def test_move_to_missing_parent(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        with pytest.raises(NotFoundError):
            await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id="missing"))

    async def test_missing_folder(self, folder_service):
        with pytest.raises(NotFoundError):
            await folder_service.rename_or_move(DEVICE_ID, "missing", FolderUpdate(name="Papers"))

    async def test_blank_name_rejected(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        with pytest.raises(InvalidInputError):
            await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(name="  "))

    async def test_no_change_only_touches_timestamp(self, folder_service, make_folder, monkeypatch):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        propagate = AsyncMock()
        monkeypatch.setattr(folder_service.paths, "propagate_path_change", propagate)

        await folder_service.rename_or_move(
            DEVICE_ID, year.folder_id, FolderUpdate(name="2024", parent_id=docs.folder_id)
        )

        propagate.assert_not_awaited()
        touched = await get_folder(year.folder_id)
        assert touched.updated_at >= year.updated_at
        assert touched.path == "/Docs/2024"


class TestDeleteFolder:

    async def test_cascades_to_descendants_and_files(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        month = await make_folder("March", year)
        music = await make_folder("Music")
        await make_file("in-docs", docs)
        await make_file("in-month", month)
        await make_file("in-music", music)
        await make_file("unfiled")
        await make_folder("Docs", device_id=OTHER_DEVICE_ID)

        folders = await folder_service.delete_folder(DEVICE_ID, docs.folder_id)

        assert [f.folder_id for f in folders] == [music.folder_id]
        remaining_files = {f.file_id for f in await File.find({"device_id": DEVICE_ID}).to_list()}
        assert remaining_files == {"in-music", "unfiled"}
        assert len(await _all_folders(OTHER_DEVICE_ID)) == 1

    async def test_missing_folder(self, folder_service):
        with pytest.raises(NotFoundError):
            await folder_service.delete_folder(DEVICE_ID, "missing")


class TestMoveFiles:

    async def test_move_into_folder(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        await make_file("report")
        await make_file("invoice", docs)

        files = await folder_service.move_files(DEVICE_ID, ["report", "invoice"], year.folder_id)

        assert {f.file_id for f in files} == {"report", "invoice"}
        for file in files:
            assert file.folder_id == year.folder_id
            assert file.folder_path == "/Docs/2024"
            assert file.updated_at is not None

    async def test_null_target_moves_to_root(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        await make_file("report", docs)

        await folder_service.move_files(DEVICE_ID, ["report"], None)

        file = await get_file("report")
        assert file.folder_id is None
        assert file.folder_path == "/"

    async def test_unknown_ids_are_ignored(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        await make_file("report")

        files = await folder_service.move_files(DEVICE_ID, ["report", "ghost"], docs.folder_id)

        assert [f.file_id for f in files] == ["report"]

    async def test_other_device_files_untouched(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        await make_file("report", device_id=OTHER_DEVICE_ID)

        files = await folder_service.move_files(DEVICE_ID, ["report"], docs.folder_id)

        assert files == []
        assert (await get_file("report", OTHER_DEVICE_ID)).folder_id is None

    async def test_missing_target(self, folder_service, make_file):
        await make_file("report")
        with pytest.raises(NotFoundError):
            await folder_service.move_files(DEVICE_ID, ["report"], "missing")
        assert (await get_file("report")).folder_path == "/"

    async def test_empty_id_list(self, folder_service):
        with pytest.raises(InvalidInputError):
            await folder_service.move_files(DEVICE_ID, [], None)


class TestFolderTree:

    async def test_nests_children(self, folder_service, make_folder):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        await make_folder("March", year)
        await make_folder("Music")

        tree = await folder_service.get_folder_tree(DEVICE_ID)

        assert [node.name for node in tree] == ["Docs", "Music"]
        assert [node.name for node in tree[0].children] == ["2024"]
        assert [node.name for node in tree[0].children[0].children] == ["March"]

    async def test_cyclic_folders_are_listed_as_roots(self, folder_service):
        await Folder(device_id=DEVICE_ID, folder_id="a", name="A", parent_id="b", path="/B/A").insert()
        await Folder(device_id=DEVICE_ID, folder_id="b", name="B", parent_id="a", path="/A/B").insert()
        await Folder(device_id=DEVICE_ID, folder_id="c", name="C", parent_id="a", path="/B/A/C").insert()

        tree = await folder_service.get_folder_tree(DEVICE_ID)

        assert sorted(node.folder_id for node in tree) == ["a", "b"]
        by_id = {node.folder_id: node for node in tree}
        assert [child.folder_id for child in by_id["a"].children] == ["c"]
        assert by_id["b"].children == []


class TestDepthLimit:

    async def test_create_beyond_limit(self, make_folder):
        service = FolderService(max_depth=2)
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)

        with pytest.raises(InvalidInputError) as exc_info:
            await service.create_folder(DEVICE_ID, "March", year.folder_id)

        assert exc_info.value.code == "depth_exceeded"
        assert len(await _all_folders()) == 2

    async def test_move_subtree_beyond_limit(self, make_folder):
        service = FolderService(max_depth=3)
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        archive = await make_folder("Archive")
        old = await make_folder("Old", archive)

        with pytest.raises(InvalidInputError):
            await service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id=old.folder_id))
        assert (await get_folder(docs.folder_id)).parent_id is None

        await service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id=archive.folder_id))
        assert (await get_folder(year.folder_id)).path == "/Archive/Docs/2024"

    async def test_zero_disables_limit(self, make_folder):
        service = FolderService(max_depth=0)
        parent = None
        for level in range(5):
            folders = await service.create_folder(DEVICE_ID, f"L{level}", parent.folder_id if parent else None)
            parent = next(f for f in folders if f.name == f"L{level}")
        assert parent.path == "/L0/L1/L2/L3/L4"


class TestInvariants:

    async def test_paths_hold_after_mixed_operations(self, folder_service, make_folder, make_file):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        month = await make_folder("March", year)
        music = await make_folder("Music")
        await make_file("a", month)
        await make_file("b", year)
        await make_file("c", music)

        await folder_service.rename_or_move(DEVICE_ID, year.folder_id, FolderUpdate(parent_id=music.folder_id))
        await folder_service.rename_or_move(DEVICE_ID, music.folder_id, FolderUpdate(name="Media"))
        await folder_service.rename_or_move(DEVICE_ID, month.folder_id, FolderUpdate(parent_id=None))
        await folder_service.move_files(DEVICE_ID, ["c"], month.folder_id)
        await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(parent_id=month.folder_id))

        await assert_paths_consistent()
        assert (await get_folder(docs.folder_id)).path == "/March/Docs"
        assert (await get_file("b")).folder_path == "/Media/2024"


class TestStoreFailure:

    async def test_driver_errors_become_store_failures(self):
        crud = FolderCRUD()
        crud.list = AsyncMock(side_effect=PyMongoError("connection reset"))
        service = FolderService(folders=crud)

        with pytest.raises(StoreFailureError) as exc_info:
            await service.list_folders(DEVICE_ID)

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, PyMongoError)

    async def test_retrying_failed_rename_repairs_paths(self, folder_service, make_folder, make_file, monkeypatch):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        await make_file("report", year)

        with monkeypatch.context() as patch:
            patch.setattr(folder_service.file_crud, "set_folder_path", AsyncMock(side_effect=PyMongoError("write failed")))
            with pytest.raises(StoreFailureError):
                await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(name="Papers"))

        # Folder writes that completed before the failure are kept
        assert (await get_folder(year.folder_id)).path == "/Papers/2024"
        assert (await get_file("report")).folder_path == "/Docs/2024"
        assert (await get_folder(docs.folder_id)).name == "Docs"

        await folder_service.rename_or_move(DEVICE_ID, docs.folder_id, FolderUpdate(name="Papers"))

        assert (await get_folder(docs.folder_id)).name == "Papers"
        assert (await get_file("report")).folder_path == "/Papers/2024"
        await assert_paths_consistent()

    async def test_retrying_failed_move_repairs_paths(self, folder_service, make_folder, make_file, monkeypatch):
        docs = await make_folder("Docs")
        year = await make_folder("2024", docs)
        music = await make_folder("Music")
        await make_file("report", year)

        with monkeypatch.context() as patch:
            patch.setattr(folder_service.file_crud, "set_folder_path", AsyncMock(side_effect=PyMongoError("write failed")))
            with pytest.raises(StoreFailureError):
                await folder_service.rename_or_move(DEVICE_ID, year.folder_id, FolderUpdate(parent_id=music.folder_id))

        await folder_service.rename_or_move(DEVICE_ID, year.folder_id, FolderUpdate(parent_id=music.folder_id))

        assert (await get_folder(year.folder_id)).parent_id == music.folder_id
        assert (await get_file("report")).folder_path == "/Music/2024"
        await assert_paths_consistent()
