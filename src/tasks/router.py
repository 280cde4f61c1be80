from fastapi import APIRouter, Depends, Query, status

from src.common.exceptions import ResourceType, resource_not_found_response
from src.storage.schemas import DATE_PATTERN, InsertTask, Task, TaskUpdate
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import TaskStats
from src.tasks.service import TaskService

MONTH_PATTERN = r"^[0-9]{4}-[0-9]{2}$"


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(
    date: str | None = Query(default=None, pattern=DATE_PATTERN),
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks(date)


@router.get("/stats")
def get_task_stats(
    date: str = Query(..., pattern=DATE_PATTERN),
    task_service: TaskService = Depends(get_task_service),
) -> TaskStats:
    return task_service.get_task_stats(date)


@router.get("/dates")
def list_task_dates(
    month: str | None = Query(default=None, pattern=MONTH_PATTERN),
    task_service: TaskService = Depends(get_task_service),
) -> list[str]:
    return task_service.list_task_dates(month)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: InsertTask,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.patch(
    "/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)}
)
def update_task(
    task_id: str,
    updates: TaskUpdate,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, updates)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: str, task_service: TaskService = Depends(get_task_service)):
    task_service.delete_task(task_id)
