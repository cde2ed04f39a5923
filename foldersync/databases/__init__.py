from foldersync.databases.mongodb import mongodb, MongoDB
__all__ = ["mongodb", "MongoDB"]
