"""HTTP remote data service — talks to a portal REST collection via httpx.

Maps the store's writes onto the collection endpoints:

    create → POST   {base_url}/{collection}
    update → PATCH  {base_url}/{collection}/{id}
    delete → DELETE {base_url}/{collection}/{id}

and offers ``fetch_page``/``fetch_all`` (GET {base_url}/{collection}?skip=&limit=)
for full refreshes; ``fetch_all`` walks every page.
"""

import logging
from typing import Any

import httpx

from campus_portal.application.interfaces import RemoteDataService
from campus_portal.domain.exceptions import RemoteOperationError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
# Matches the server-side maximum of ?limit= on collection endpoints.
DEFAULT_PAGE_SIZE = 500


class HttpRemoteDataService(RemoteDataService):
    """Infrastructure adapter — one instance per REST collection.

    An injected ``httpx.AsyncClient`` is reused (and never closed here);
    otherwise a short-lived client is created per call.
    """

    def __init__(
        self,
        base_url: str,
        collection: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self._base_url = base_url.rstrip("/")
        self._collection = collection.strip("/")
        self._http_client = http_client
        self._timeout = timeout
        self._headers = {"Accept": "application/json", **(headers or {})}
        self._page_size = page_size

    @property
    def collection_url(self) -> str:
        return f"{self._base_url}/{self._collection}"

    def _record_url(self, record_id: str) -> str:
        return f"{self.collection_url}/{record_id}"

    async def _request(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and translate failures into RemoteOperationError."""
        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None

        try:
            response = await client.request(
                method, url, headers=self._headers, json=json, params=params
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise RemoteOperationError(
                operation, str(exc) or type(exc).__name__, status_code=0
            ) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.is_error:
            self._raise_remote_error(operation, response)
        return response

    @staticmethod
    def _raise_remote_error(operation: str, response: httpx.Response) -> None:
        """Raise RemoteOperationError with the API's ``detail`` when present."""
        try:
            detail = response.json().get("detail", response.text)
        except (ValueError, AttributeError):
            detail = response.text

        if isinstance(detail, list):
            # FastAPI validation errors: [{"loc": [...], "msg": "..."}]
            detail = "; ".join(
                str(item.get("msg", item)) if isinstance(item, dict) else str(item)
                for item in detail
                if item
            )

        raise RemoteOperationError(
            operation,
            str(detail) or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    async def create(self, record: dict[str, Any]) -> dict[str, Any] | None:
        response = await self._request("create", "POST", self.collection_url, json=record)
        if not response.content:
            return None
        body = response.json()
        return body if isinstance(body, dict) else None

    async def update(self, record_id: str, updates: dict[str, Any]) -> None:
        await self._request("update", "PATCH", self._record_url(record_id), json=updates)

    async def delete(self, record_id: str) -> None:
        await self._request("delete", "DELETE", self._record_url(record_id))

    async def fetch_page(self, *, skip: int = 0, limit: int | None = None) -> list[dict[str, Any]]:
        """Return one page of the collection in the order the API lists it."""
        params = {"skip": skip, "limit": limit or self._page_size}
        response = await self._request("fetch", "GET", self.collection_url, params=params)
        body = response.json()
        if not isinstance(body, list):
            raise RemoteOperationError(
                "fetch", "Expected a JSON array", status_code=response.status_code
            )
        return body

    async def fetch_all(self) -> list[dict[str, Any]]:
        """Return the whole collection, paging until the API sends a short page."""
        records: list[dict[str, Any]] = []
        while True:
            page = await self.fetch_page(skip=len(records), limit=self._page_size)
            records.extend(page)
            if len(page) < self._page_size:
                return records
