from datetime import datetime, timezone
import pytest
from pytest_mock import MockerFixture

from src.storage.memory.store import MemoryStore
from src.storage.schemas import InsertCategory, InsertTask, TaskUpdate

TEST_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


def test_create_task_success(memory_store: MemoryStore, mocker: MockerFixture) -> None:
    mocker.patch("src.storage.memory.store.uuid4", return_value="test-id")
    mocker.patch(
        "src.storage.memory.store.get_current_datetime", return_value=TEST_TIMESTAMP
    )

    result = memory_store.create_task(InsertTask(text="Write report", date="2024-01-15"))

    assert result.id == "test-id"
    assert result.created_at == TEST_TIMESTAMP
    assert memory_store.tasks["test-id"] == result


def test_update_task_replaces_stored_record(memory_store: MemoryStore) -> None:
    task = memory_store.create_task(InsertTask(text="Write report", date="2024-01-15"))

    memory_store.update_task(task.id, TaskUpdate(text="Edit spec"))

    assert memory_store.tasks[task.id].text == "Edit spec"
    assert task.text == "Write report"


def test_fresh_stores_share_nothing() -> None:
    first = MemoryStore()
    first.create_task(InsertTask(text="Write report", date="2024-01-15"))
    first.create_category(InsertCategory(name="Work"))

    second = MemoryStore()

    assert second.get_all_tasks() == []
    assert second.get_all_categories() == []
