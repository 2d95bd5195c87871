from app import config
from app.database import SessionLocal
from app.storage.base import DuplicateRecordError, StringStore
from app.storage.json_file import JsonFileStore
from app.storage.sql import SqlStringStore

BACKENDS = ("database", "json")


def get_store():
    """Dependency to provide the configured string store."""
    if config.STORAGE_BACKEND == "json":
        yield JsonFileStore(config.DATA_FILE)
        return

    if config.STORAGE_BACKEND != "database":
        raise ValueError(f"Unknown STORAGE_BACKEND {config.STORAGE_BACKEND!r}, expected one of {BACKENDS}")

    db = SessionLocal()
    try:
        yield SqlStringStore(db)
    finally:
        db.close()


__all__ = [
    "BACKENDS",
    "DuplicateRecordError",
    "JsonFileStore",
    "SqlStringStore",
    "StringStore",
    "get_store",
]
