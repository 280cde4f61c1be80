from abc import ABC, abstractmethod

from src.storage.schemas import (
    Category,
    CategoryUpdate,
    InsertCategory,
    InsertTask,
    Task,
    TaskUpdate,
)


def category_sort_key(category: Category):
    # Code point order, independent of the database collation
    return (category.name, category.created_at)


class StorageBackend(ABC):
    """Task and category persistence.

    Lookups and updates return ``None`` and deletes return ``False`` when the
    id is unknown. Failures of the underlying store propagate to the caller.
    """

    @abstractmethod
    def get_tasks_by_date(self, date: str) -> list[Task]:
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task | None:
        pass

    @abstractmethod
    def create_task(self, task_input: InsertTask) -> Task:
        pass

    @abstractmethod
    def update_task(self, task_id: str, updates: TaskUpdate) -> Task | None:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> bool:
        pass

    @abstractmethod
    def get_all_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def get_all_categories(self) -> list[Category]:
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> Category | None:
        pass

    @abstractmethod
    def create_category(self, category_input: InsertCategory) -> Category:
        pass

    @abstractmethod
    def update_category(
        self, category_id: str, updates: CategoryUpdate
    ) -> Category | None:
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Delete a category and clear it from every task that references it."""
        pass

    def close(self) -> None:
        pass
