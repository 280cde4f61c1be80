import logging

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.storage.base import StorageBackend
from src.storage.schemas import InsertTask, Task, TaskUpdate
from src.tasks.schemas import TaskStats

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, storage: StorageBackend):
        self.storage = storage

    def list_tasks(self, date: str | None = None) -> list[Task]:
        if date is None:
            return self.storage.get_all_tasks()

        return self.storage.get_tasks_by_date(date)

    def get_task(self, task_id: str) -> Task:
        task = self.storage.get_task(task_id)

        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return task

    def create_task(self, task_input: InsertTask) -> Task:
        task = self.storage.create_task(task_input)
        logger.info(f"Created task {task.id} for {task.date}")
        return task

    def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        task = self.storage.update_task(task_id, updates)

        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return task

    def delete_task(self, task_id: str) -> None:
        if not self.storage.delete_task(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        logger.info(f"Deleted task {task_id}")

    def get_task_stats(self, date: str) -> TaskStats:
        tasks = self.storage.get_tasks_by_date(date)
        completed = sum(1 for task in tasks if task.completed)

        return TaskStats(
            date=date,
            total=len(tasks),
            completed=completed,
            pending=len(tasks) - completed,
        )

    def list_task_dates(self, month: str | None = None) -> list[str]:
        """Distinct dates holding at least one task, optionally within a YYYY-MM month."""
        dates = {task.date for task in self.storage.get_all_tasks()}

        if month is not None:
            dates = {date for date in dates if date.startswith(f"{month}-")}

        return sorted(dates)
