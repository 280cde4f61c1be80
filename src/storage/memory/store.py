from uuid import uuid4

from src.common.current_datetime import get_current_datetime
from src.storage.base import StorageBackend, category_sort_key
from src.storage.schemas import (
    Category,
    CategoryUpdate,
    InsertCategory,
    InsertTask,
    Task,
    TaskUpdate,
)


def task_sort_key(task: Task):
    return (task.date, task.order, task.created_at)


class MemoryStore(StorageBackend):
    """Volatile store, lost on restart. Sorts like the durable store."""

    def __init__(self) -> None:
        self.tasks: dict[str, Task] = {}
        self.categories: dict[str, Category] = {}

    def get_tasks_by_date(self, date: str) -> list[Task]:
        return [
            task.model_copy()
            for task in sorted(self.tasks.values(), key=task_sort_key)
            if task.date == date
        ]

    def get_task(self, task_id: str) -> Task | None:
        task = self.tasks.get(task_id)
        return task.model_copy() if task else None

    def create_task(self, task_input: InsertTask) -> Task:
        task = Task(
            id=str(uuid4()),
            text=task_input.text,
            completed=task_input.completed,
            date=task_input.date,
            priority=task_input.priority,
            category_id=task_input.category_id,
            order=task_input.order,
            created_at=get_current_datetime(),
        )
        self.tasks[task.id] = task
        return task.model_copy()

    def update_task(self, task_id: str, updates: TaskUpdate) -> Task | None:
        task = self.tasks.get(task_id)
        if not task:
            return None

        updated_task = Task.model_validate(
            {**task.model_dump(), **updates.changes()}
        )
        self.tasks[task_id] = updated_task
        return updated_task.model_copy()

    def delete_task(self, task_id: str) -> bool:
        return self.tasks.pop(task_id, None) is not None

    def get_all_tasks(self) -> list[Task]:
        return [
            task.model_copy()
            for task in sorted(self.tasks.values(), key=task_sort_key)
        ]

    def get_all_categories(self) -> list[Category]:
        return [
            category.model_copy()
            for category in sorted(self.categories.values(), key=category_sort_key)
        ]

    def get_category(self, category_id: str) -> Category | None:
        category = self.categories.get(category_id)
        return category.model_copy() if category else None

    def create_category(self, category_input: InsertCategory) -> Category:
        category = Category(
            id=str(uuid4()),
            name=category_input.name,
            color=category_input.color,
            created_at=get_current_datetime(),
        )
        self.categories[category.id] = category
        return category.model_copy()

    def update_category(
        self, category_id: str, updates: CategoryUpdate
    ) -> Category | None:
        category = self.categories.get(category_id)
        if not category:
            return None

        updated_category = Category.model_validate(
            {**category.model_dump(), **updates.changes()}
        )
        self.categories[category_id] = updated_category
        return updated_category.model_copy()

    def delete_category(self, category_id: str) -> bool:
        if self.categories.pop(category_id, None) is None:
            return False

        for task_id, task in self.tasks.items():
            if task.category_id == category_id:
                self.tasks[task_id] = task.model_copy(update={"category_id": None})
        return True
