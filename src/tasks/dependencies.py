from fastapi import Depends

from src.storage.base import StorageBackend
from src.storage.dependencies import get_storage
from src.tasks.service import TaskService


def get_task_service(
    storage: StorageBackend = Depends(get_storage),
) -> TaskService:
    return TaskService(storage=storage)
