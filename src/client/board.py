from src.client.cache import Mutation, QueryCache, QueryKey, QueryState
from src.client.daybook_client import DaybookClient

TASKS_KEY: QueryKey = ("/api/tasks",)
CATEGORIES_KEY: QueryKey = ("/api/categories",)


def tasks_key(date: str | None = None) -> QueryKey:
    return TASKS_KEY if date is None else (*TASKS_KEY, date)


def task_stats_key(date: str) -> QueryKey:
    return (*TASKS_KEY, "stats", date)


def task_dates_key() -> QueryKey:
    return (*TASKS_KEY, "dates")


class TaskBoard:
    """Cached reads and invalidating writes over a ``DaybookClient``.

    Every task query key sits under ``TASKS_KEY``, so any task write refreshes
    the per-day lists, the daily stats and the calendar dates together.
    """

    def __init__(self, client: DaybookClient, cache: QueryCache | None = None):
        self.client = client
        self.cache = cache or QueryCache()

        self.create_task = Mutation(
            name="create_task",
            cache=self.cache,
            mutation_fn=client.create_task,
            invalidates=[TASKS_KEY],
        )
        self.update_task = Mutation(
            name="update_task",
            cache=self.cache,
            mutation_fn=client.update_task,
            invalidates=[TASKS_KEY],
        )
        self.delete_task = Mutation(
            name="delete_task",
            cache=self.cache,
            mutation_fn=client.delete_task,
            invalidates=[TASKS_KEY],
        )
        self.create_category = Mutation(
            name="create_category",
            cache=self.cache,
            mutation_fn=client.create_category,
            invalidates=[CATEGORIES_KEY],
        )
        self.update_category = Mutation(
            name="update_category",
            cache=self.cache,
            mutation_fn=client.update_category,
            invalidates=[CATEGORIES_KEY],
        )
        # Deleting a category clears it from tasks as well
        self.delete_category = Mutation(
            name="delete_category",
            cache=self.cache,
            mutation_fn=client.delete_category,
            invalidates=[CATEGORIES_KEY, TASKS_KEY],
        )

    async def tasks(self, date: str | None = None) -> QueryState:
        return await self.cache.fetch(
            tasks_key(date), lambda: self.client.list_tasks(date)
        )

    async def task_stats(self, date: str) -> QueryState:
        return await self.cache.fetch(
            task_stats_key(date), lambda: self.client.get_task_stats(date)
        )

    async def task_dates(self) -> QueryState:
        return await self.cache.fetch(task_dates_key(), self.client.list_task_dates)

    async def categories(self) -> QueryState:
        return await self.cache.fetch(CATEGORIES_KEY, self.client.list_categories)
