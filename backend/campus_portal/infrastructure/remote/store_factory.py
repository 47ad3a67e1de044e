"""Builds optimistic list stores bound to a portal REST collection."""

import httpx

from campus_portal.application.interfaces import Notifier
from campus_portal.application.services.optimistic_list_store import OptimisticListStore
from campus_portal.config import get_settings
from campus_portal.infrastructure.notifications import LoggingNotifier
from campus_portal.infrastructure.remote.http_remote_service import HttpRemoteDataService


def build_collection_store(
    collection: str,
    *,
    http_client: httpx.AsyncClient | None = None,
    notifier: Notifier | None = None,
    base_url: str | None = None,
) -> tuple[OptimisticListStore, HttpRemoteDataService]:
    """Wire a store to ``{api_base_url}/{collection}`` using application settings.

    Returns the store together with its remote service so callers can pass
    the latter to ``refresh_store``.
    """
    settings = get_settings()
    remote = HttpRemoteDataService(
        base_url=base_url or settings.api_base_url,
        collection=collection,
        http_client=http_client,
        timeout=settings.remote_timeout_seconds,
    )
    store = OptimisticListStore(
        remote,
        notifier=notifier or LoggingNotifier(),
        temp_id_prefix=settings.store_temp_id_prefix,
        single_flight=settings.store_single_flight,
    )
    return store, remote
