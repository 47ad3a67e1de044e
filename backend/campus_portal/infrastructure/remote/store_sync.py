"""Full-collection refresh for optimistic list stores."""

import logging
from typing import Any, Protocol

from campus_portal.application.services.optimistic_list_store import (
    OptimisticListStore,
    error_message,
)
from campus_portal.domain.entities import NotificationKind

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch items"


class CollectionSource(Protocol):
    async def fetch_all(self) -> list[dict[str, Any]]: ...


async def refresh_store(store: OptimisticListStore, source: CollectionSource) -> bool:
    """Replace the store's records with the remote collection.

    Raises the store's ``loading`` flag for the duration of the fetch. A
    failed fetch leaves the current records in place and emits an error
    notification through the store's notifier.

    Returns:
        True when the store was refreshed.
    """
    store.set_loading(True)
    try:
        records = await source.fetch_all()
    except Exception as exc:
        logger.warning("Collection refresh failed: %s", error_message(exc))
        if store.notifier is not None:
            store.notifier.notify(NotificationKind.ERROR, "Error", FETCH_FAILED_MESSAGE)
        return False
    else:
        store.set_data(records)
        logger.debug("Store refreshed with %d records", len(records))
        return True
    finally:
        store.set_loading(False)
