"""Remote data service built from three injected coroutine functions."""

from collections.abc import Awaitable, Callable
from typing import Any

from campus_portal.application.interfaces import RemoteDataService

CreateHandler = Callable[[dict[str, Any]], Awaitable[dict[str, Any] | None]]
UpdateHandler = Callable[[str, dict[str, Any]], Awaitable[None]]
DeleteHandler = Callable[[str], Awaitable[None]]


class CallbackRemoteDataService(RemoteDataService):
    """Adapter — forwards each write to a caller-supplied coroutine function.

    Handy when a screen already has its own persistence calls and only needs
    the store's optimistic bookkeeping around them.
    """

    def __init__(
        self,
        *,
        create: CreateHandler,
        update: UpdateHandler,
        delete: DeleteHandler,
    ):
        self._create = create
        self._update = update
        self._delete = delete

    async def create(self, record: dict[str, Any]) -> dict[str, Any] | None:
        return await self._create(record)

    async def update(self, record_id: str, updates: dict[str, Any]) -> None:
        await self._update(record_id, updates)

    async def delete(self, record_id: str) -> None:
        await self._delete(record_id)
