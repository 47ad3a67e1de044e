"""Abstract remote data service — port for the persistence boundary of a list store.

The optimistic list store applies changes locally first and then delegates
the real write to an implementation of this interface (HTTP API, injected
callbacks, ...).
"""

from abc import ABC, abstractmethod
from typing import Any


class RemoteDataService(ABC):
    """Port — the three writes an OptimisticListStore needs from its backend.

    Implementations signal failure by raising; the store catches any
    ``Exception`` and rolls back. Adapters should prefer
    ``RemoteOperationError`` so a readable message reaches the UI.
    """

    @abstractmethod
    async def create(self, record: dict[str, Any]) -> dict[str, Any] | None:
        """Persist a new record.

        Args:
            record: The caller's field values, without ``id`` or ``created_at``.

        Returns:
            The authoritative stored record (with the server-assigned ``id``)
            when the backend reports it, otherwise ``None``.
        """
        ...

    @abstractmethod
    async def update(self, record_id: str, updates: dict[str, Any]) -> None:
        """Apply a partial update to an existing record."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Remove a record."""
        ...
