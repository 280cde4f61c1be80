from src.config import Settings
from src.storage.base import StorageBackend
from src.storage.memory.store import MemoryStore
from src.storage.postgres.store import PostgresStore


def get_storage_backend(settings: Settings) -> StorageBackend:
    if settings.STORAGE_BACKEND == "postgres":
        return PostgresStore(
            database_url=settings.POSTGRES_URL,
        )
    elif settings.STORAGE_BACKEND == "memory":
        return MemoryStore()
    else:
        raise ValueError(f"Unsupported storage backend: {settings.STORAGE_BACKEND}")
