from foldersync.utils.logging import get_logger, setup_logging
from foldersync.utils.api_response import ok, created, no_content
from foldersync.utils.base import generate_id
from foldersync.utils.request import get_device_id
from foldersync.utils.store_guard import store_guard


__all__ = [
    "get_logger",
    "setup_logging",
    "ok",
    "created",
    "no_content",
    "generate_id",
    "get_device_id",
    "store_guard",
]
