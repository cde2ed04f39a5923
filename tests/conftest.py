"""
Shared pytest fixtures for the folder hierarchy tests.

Provides:
- An in-memory MongoDB (mongomock-motor) with Beanie initialised per test
- Service instances wired to the real CRUD layer
- Factories for seeding folders and files
"""

from typing import Optional

import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from foldersync.models import DOCUMENT_MODELS, File, Folder
from foldersync.services import FolderService, PathService, FileService, DeviceService

DEVICE_ID = "device-a"
OTHER_DEVICE_ID = "device-b"


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
async def database():
    """Fresh in-memory database for every test"""
    client = AsyncMongoMockClient()
    db = client["foldersync_test"]
    await init_beanie(database=db, document_models=DOCUMENT_MODELS)
    return db


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def folder_service() -> FolderService:
    return FolderService(max_depth=64)


@pytest.fixture
def path_service() -> PathService:
    return PathService()


@pytest.fixture
def file_service() -> FileService:
    return FileService()


@pytest.fixture
def device_service() -> DeviceService:
    return DeviceService()


# ============================================================================
# Data Factories
# ============================================================================

@pytest.fixture
def make_folder(folder_service):
    """Create a folder through the service and return the stored document"""

    async def _make(name: str, parent: Optional[Folder] = None, device_id: str = DEVICE_ID) -> Folder:
        parent_id = parent.folder_id if parent else None
        before = {f.folder_id for f in await Folder.find({"device_id": device_id}).to_list()}
        folders = await folder_service.create_folder(device_id, name, parent_id)
        created = [f for f in folders if f.folder_id not in before]
        assert len(created) == 1
        return created[0]

    return _make


@pytest.fixture
def make_file():
    """Insert a file filed under `folder` (or unfiled)"""

    async def _make(file_id: str, folder: Optional[Folder] = None, device_id: str = DEVICE_ID) -> File:
        file = File(
            device_id=device_id,
            file_id=file_id,
            name=f"{file_id}.pdf",
            type="application/pdf",
            folder_id=folder.folder_id if folder else None,
            folder_path=folder.path if folder else "/",
        )
        await file.insert()
        return file

    return _make


async def get_folder(folder_id: str, device_id: str = DEVICE_ID) -> Optional[Folder]:
    return await Folder.find_one({"device_id": device_id, "folder_id": folder_id})


async def get_file(file_id: str, device_id: str = DEVICE_ID) -> Optional[File]:
    return await File.find_one({"device_id": device_id, "file_id": file_id})


async def assert_paths_consistent(device_id: str = DEVICE_ID) -> None:
    """Every folder path matches its parent chain and every filed file mirrors its folder"""
    folders = {f.folder_id: f for f in await Folder.find({"device_id": device_id}).to_list()}
    for folder in folders.values():
        parent_path = folders[folder.parent_id].path if folder.parent_id else ""
        assert folder.path == f"{parent_path}/{folder.name}"

    for file in await File.find({"device_id": device_id}).to_list():
        if file.folder_id is None:
            assert file.folder_path == "/"
        else:
            assert file.folder_path == folders[file.folder_id].path
