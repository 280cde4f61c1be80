import logging
from types import TracebackType
from typing import Any, Type
from aiohttp import ClientError, ClientSession, ContentTypeError

from src.client.exceptions import DaybookClientException
from src.storage.schemas import (
    Category,
    CategoryUpdate,
    InsertCategory,
    InsertTask,
    Task,
    TaskUpdate,
)
from src.tasks.schemas import TaskStats


logger = logging.getLogger(__name__)


class DaybookClient:
    """Async client for the Daybook REST API.

    Errors are raised immediately as ``DaybookClientException``, there is no
    retry layer.
    """

    def __init__(self, *, base_url: str, api_key: str | None = None):
        headers = {"Accept": "application/json"}
        if api_key:
            headers["x-api-key"] = api_key

        self.base_url = base_url.rstrip("/")
        self.session: ClientSession = ClientSession(headers=headers)

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        await self.close()

    async def close(self) -> None:
        if self.session:
            await self.session.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any | None:
        url = f"{self.base_url}{path}"
        try:
            async with self.session.request(
                method, url, params=params, json=json
            ) as response:
                if response.status >= 400:
                    detail = await self._error_detail(response)
                    raise DaybookClientException(
                        f"{method} {path} failed with status {response.status}: {detail}",
                        status=response.status,
                    )
                if response.status == 204:
                    return None
                try:
                    return await response.json()
                except ContentTypeError as e:
                    raise DaybookClientException(
                        f"{method} {path} returned a non-JSON body",
                        status=response.status,
                    ) from e
        except ClientError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise DaybookClientException(f"Unable to reach {url}") from e

    async def _error_detail(self, response: Any) -> str:
        try:
            body = await response.json(content_type=None)
        except (ClientError, ValueError):
            return response.reason or "Unknown error"
        if isinstance(body, dict) and "detail" in body:
            return str(body["detail"])
        return str(body)

    async def list_tasks(self, date: str | None = None) -> list[Task]:
        params = {"date": date} if date else None
        data = await self.request("GET", "/api/tasks", params=params)
        return [Task.model_validate(task) for task in data or []]

    async def get_task(self, task_id: str) -> Task:
        data = await self.request("GET", f"/api/tasks/{task_id}")
        return Task.model_validate(data)

    async def get_task_stats(self, date: str) -> TaskStats:
        data = await self.request("GET", "/api/tasks/stats", params={"date": date})
        return TaskStats.model_validate(data)

    async def list_task_dates(self, month: str | None = None) -> list[str]:
        params = {"month": month} if month else None
        data = await self.request("GET", "/api/tasks/dates", params=params)
        return list(data or [])

    async def create_task(self, task_input: InsertTask) -> Task:
        data = await self.request(
            "POST", "/api/tasks", json=task_input.model_dump(mode="json", by_alias=True)
        )
        return Task.model_validate(data)

    async def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        data = await self.request(
            "PATCH",
            f"/api/tasks/{task_id}",
            json=updates.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return Task.model_validate(data)

    async def delete_task(self, task_id: str) -> None:
        await self.request("DELETE", f"/api/tasks/{task_id}")

    async def list_categories(self) -> list[Category]:
        data = await self.request("GET", "/api/categories")
        return [Category.model_validate(category) for category in data or []]

    async def create_category(self, category_input: InsertCategory) -> Category:
        data = await self.request(
            "POST",
            "/api/categories",
            json=category_input.model_dump(mode="json", by_alias=True),
        )
        return Category.model_validate(data)

    async def update_category(
        self, category_id: str, updates: CategoryUpdate
    ) -> Category:
        data = await self.request(
            "PATCH",
            f"/api/categories/{category_id}",
            json=updates.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return Category.model_validate(data)

    async def delete_category(self, category_id: str) -> None:
        await self.request("DELETE", f"/api/categories/{category_id}")
