import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable

from src.client.exceptions import MutationPendingException

logger = logging.getLogger(__name__)

QueryKey = tuple[str, ...]


class QueryStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


class MutationStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class QueryState:
    status: QueryStatus
    data: Any = None
    error: Exception | None = None


class QueryCache:
    """Last fetched result per query key.

    Writes never patch cached data. Mutations invalidate keys instead so the
    next read goes back to the server.
    """

    def __init__(self) -> None:
        self.states: dict[QueryKey, QueryState] = {}
        self.in_flight: dict[QueryKey, asyncio.Task[QueryState]] = {}

    def get_state(self, key: QueryKey) -> QueryState | None:
        return self.states.get(key)

    async def fetch(
        self, key: QueryKey, fetcher: Callable[[], Awaitable[Any]]
    ) -> QueryState:
        state = self.states.get(key)
        if state and state.status == QueryStatus.SUCCESS:
            return state

        task = self.in_flight.get(key)
        if task is None:
            self.states[key] = QueryState(status=QueryStatus.LOADING)
            task = asyncio.create_task(self._run_fetch(key, fetcher))
            self.in_flight[key] = task

        return await asyncio.shield(task)

    async def _run_fetch(
        self, key: QueryKey, fetcher: Callable[[], Awaitable[Any]]
    ) -> QueryState:
        try:
            state = QueryState(status=QueryStatus.SUCCESS, data=await fetcher())
        except Exception as e:
            logger.error(f"Query {key} failed: {e}")
            state = QueryState(status=QueryStatus.ERROR, error=e)

        # An invalidation while in flight makes this result stale
        if self.in_flight.get(key) is asyncio.current_task():
            del self.in_flight[key]
            self.states[key] = state

        return state

    def invalidate(self, prefix: QueryKey) -> list[QueryKey]:
        """Drop every key starting with ``prefix``. Returns the dropped keys."""
        keys = {
            key
            for key in [*self.states, *self.in_flight]
            if key[: len(prefix)] == prefix
        }
        for key in keys:
            self.states.pop(key, None)
            self.in_flight.pop(key, None)
        return sorted(keys)


class Mutation:
    def __init__(
        self,
        *,
        name: str,
        cache: QueryCache,
        mutation_fn: Callable[..., Awaitable[Any]],
        invalidates: list[QueryKey],
    ):
        self.name = name
        self.cache = cache
        self.mutation_fn = mutation_fn
        self.invalidates = invalidates
        self.status = MutationStatus.IDLE
        self.data: Any = None
        self.error: Exception | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == MutationStatus.PENDING

    async def mutate(self, *args: Any, **kwargs: Any) -> Any:
        if self.is_pending:
            raise MutationPendingException(self.name)

        self.status = MutationStatus.PENDING
        self.error = None

        try:
            result = await self.mutation_fn(*args, **kwargs)
        except asyncio.CancelledError:
            self.status = MutationStatus.IDLE
            raise
        except Exception as e:
            logger.error(f"Mutation '{self.name}' failed: {e}")
            self.status = MutationStatus.ERROR
            self.error = e
            raise

        self.status = MutationStatus.SUCCESS
        self.data = result
        for key in self.invalidates:
            self.cache.invalidate(key)
        return result
