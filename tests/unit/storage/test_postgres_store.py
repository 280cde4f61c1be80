from datetime import datetime, timezone
import pytest
from pytest_mock import MockerFixture
from sqlalchemy import inspect, text

from src.storage.postgres.store import PostgresStore
from src.storage.schemas import (
    CategoryUpdate,
    InsertCategory,
    InsertTask,
    Priority,
    TaskUpdate,
)

TEST_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def postgres_store(test_database_url: str) -> PostgresStore:
    return PostgresStore(database_url=test_database_url)


@pytest.fixture
def mock_uuid(mocker: MockerFixture):
    return mocker.patch("src.storage.postgres.store.uuid4", return_value="test-id")


@pytest.fixture
def mock_current_datetime(mocker: MockerFixture):
    return mocker.patch(
        "src.storage.postgres.store.get_current_datetime",
        return_value=TEST_TIMESTAMP,
    )


def test_tables_created(postgres_store: PostgresStore) -> None:
    inspector = inspect(postgres_store.engine)
    assert set(inspector.get_table_names()) == {"tasks", "categories"}

    task_columns = {column["name"] for column in inspector.get_columns("tasks")}
    assert task_columns == {
        "id",
        "text",
        "completed",
        "date",
        "priority",
        "category_id",
        "order",
        "created_at",
    }
    assert inspector.get_foreign_keys("tasks") == []


def test_create_task_success(
    postgres_store: PostgresStore, mock_uuid, mock_current_datetime
) -> None:
    result = postgres_store.create_task(
        InsertTask(
            text="Write report",
            date="2024-01-15",
            priority=Priority.URGENT,
            category_id="C1",
            order=4,
        )
    )

    assert result.id == "test-id"
    assert result.text == "Write report"
    assert result.date == "2024-01-15"
    assert result.completed is False
    assert result.priority == Priority.URGENT
    assert result.category_id == "C1"
    assert result.order == 4
    assert result.created_at == TEST_TIMESTAMP


def test_get_task_success(
    postgres_store: PostgresStore, mock_uuid, mock_current_datetime
) -> None:
    postgres_store.create_task(InsertTask(text="Write report", date="2024-01-15"))

    result = postgres_store.get_task("test-id")

    assert result is not None
    assert result.id == "test-id"
    assert result.created_at == TEST_TIMESTAMP
    assert result.created_at.tzinfo is not None


def test_get_task_not_found(postgres_store: PostgresStore) -> None:
    assert postgres_store.get_task("nonexistent") is None


def test_update_task_persists(postgres_store: PostgresStore) -> None:
    task = postgres_store.create_task(InsertTask(text="Write report", date="2024-01-15"))

    postgres_store.update_task(
        task.id, TaskUpdate(priority=Priority.LOW, date="2024-01-16", order=7)
    )

    with postgres_store.engine.connect() as connection:
        row = connection.execute(
            text('SELECT priority, date, "order" FROM tasks WHERE id = :id'),
            {"id": task.id},
        ).one()
    assert tuple(row) == ("low", "2024-01-16", 7)


def test_state_survives_new_store(test_database_url: str) -> None:
    first = PostgresStore(database_url=test_database_url)
    task = first.create_task(InsertTask(text="Write report", date="2024-01-15"))
    category = first.create_category(InsertCategory(name="Work"))
    first.close()

    second = PostgresStore(database_url=test_database_url)
    assert second.get_task(task.id) == task
    assert second.get_category(category.id) == category
    second.close()


def test_create_category_success(
    postgres_store: PostgresStore, mock_uuid, mock_current_datetime
) -> None:
    result = postgres_store.create_category(
        InsertCategory(name="Work", color="#ff0000")
    )

    assert result.id == "test-id"
    assert result.name == "Work"
    assert result.color == "#ff0000"
    assert result.created_at == TEST_TIMESTAMP


def test_update_category_success(postgres_store: PostgresStore) -> None:
    category = postgres_store.create_category(InsertCategory(name="Work"))

    result = postgres_store.update_category(
        category.id, CategoryUpdate(color="#00ff00")
    )

    assert result is not None
    assert result.name == "Work"
    assert result.color == "#00ff00"


def test_delete_category_not_found(postgres_store: PostgresStore) -> None:
    assert postgres_store.delete_category("nonexistent") is False


def test_get_all_categories_ignores_row_order(postgres_store: PostgresStore) -> None:
    # Rows come back in insertion order, as a case-insensitive collation would sort them
    postgres_store.create_category(InsertCategory(name="apple"))
    postgres_store.create_category(InsertCategory(name="Banana"))

    assert [c.name for c in postgres_store.get_all_categories()] == [
        "Banana",
        "apple",
    ]
