from pathlib import Path
from typing import Generator
import pytest

from src.storage.base import StorageBackend
from src.storage.memory.store import MemoryStore
from src.storage.postgres.store import PostgresStore


@pytest.fixture
def test_database_url(tmp_path: Path) -> str:
    db_path: Path = tmp_path / "test_daybook.db"
    return f"sqlite:///{db_path}"


@pytest.fixture(params=["memory", "postgres"])
def storage(
    request: pytest.FixtureRequest, test_database_url: str
) -> Generator[StorageBackend, None, None]:
    backend: StorageBackend
    if request.param == "memory":
        backend = MemoryStore()
    else:
        backend = PostgresStore(database_url=test_database_url)
    yield backend
    backend.close()
