import pytest

from src.config import Settings
from src.storage.backend import get_storage_backend
from src.storage.memory.store import MemoryStore
from src.storage.postgres.store import PostgresStore


def test_memory_backend_selected() -> None:
    backend = get_storage_backend(Settings(STORAGE_BACKEND="memory"))
    assert isinstance(backend, MemoryStore)


def test_postgres_backend_selected(test_database_url: str) -> None:
    backend = get_storage_backend(
        Settings(STORAGE_BACKEND="postgres", POSTGRES_URL=test_database_url)
    )
    assert isinstance(backend, PostgresStore)
    backend.close()


def test_unknown_backend_rejected() -> None:
    settings = Settings.model_construct(STORAGE_BACKEND="redis")
    with pytest.raises(ValueError, match="Unsupported storage backend: redis"):
        get_storage_backend(settings)
