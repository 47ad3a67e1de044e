"""Optimistic list store — a local mirror of a remote collection with rollback.

List-management screens (gallery, alumni, ...) hold their records in an
``OptimisticListStore``. Each mutation is applied to the local list first so
the UI reflects it immediately, then delegated to a ``RemoteDataService``.
When the remote call fails the local change is undone.

Lifecycle of a single operation:

    idle → optimistic-applied → remote-pending → confirmed | rolled-back → idle

Remote failures never propagate to the caller. The coroutine always returns
once the remote call has settled; the outcome is visible through ``error``,
the list itself, the emitted notification and the returned ``Settlement``.
"""

import copy
import itertools
import logging
import time
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from campus_portal.application.interfaces import Notifier, RemoteDataService
from campus_portal.domain.entities import NotificationKind
from campus_portal.infrastructure.logging.colored_logger import OperationLogger, OperationStage

logger = logging.getLogger(__name__)
olog = OperationLogger("OptimisticListStore")

Record = dict[str, Any]

DEFAULT_TEMP_ID_PREFIX = "temp-"
DEFAULT_ERROR_MESSAGE = "An error occurred"

# operation → (success description, failure description)
_MESSAGES: dict[str, tuple[str, str]] = {
    "create": ("Item created successfully", "Failed to create item"),
    "update": ("Item updated successfully", "Failed to update item"),
    "delete": ("Item deleted successfully", "Failed to delete item"),
}

_STAGES = {
    "create": OperationStage.CREATE,
    "update": OperationStage.UPDATE,
    "delete": OperationStage.DELETE,
}


class Settlement(str, Enum):
    """How a store mutation ended."""

    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"
    SKIPPED = "skipped"


def error_message(exc: BaseException) -> str:
    """Extract a human-readable message from a remote failure."""
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or DEFAULT_ERROR_MESSAGE


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse ``created_at`` into an aware datetime, or None if unusable."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(record: Mapping[str, Any]) -> tuple[int, float]:
    # Undated records sort after all dated ones once reversed.
    parsed = _parse_timestamp(record.get("created_at"))
    if parsed is None:
        return (0, 0.0)
    return (1, parsed.timestamp())


def sort_newest_first(records: list[Record]) -> None:
    """Sort records in place by ``created_at`` descending (stable)."""
    records.sort(key=_sort_key, reverse=True)


class OptimisticListStore:
    """Client-side state container for one collection of records.

    Records are plain dicts with a string ``id`` and an ISO-8601
    ``created_at``; every other field is opaque to the store. The store copies
    records on the way in and out, so the list can only change through
    ``create``, ``update``, ``delete``, ``set_data`` and ``set_loading``.

    Args:
        remote: Persistence boundary the writes are delegated to.
        initial: Records the store starts with.
        notifier: Receives exactly one notification per settled mutation.
        temp_id_prefix: Marker prepended to ids of optimistic inserts.
        single_flight: Reject a second update/delete targeting an id whose
            previous operation has not settled yet.
    """

    def __init__(
        self,
        remote: RemoteDataService,
        initial: Iterable[Mapping[str, Any]] | None = None,
        *,
        notifier: Notifier | None = None,
        temp_id_prefix: str = DEFAULT_TEMP_ID_PREFIX,
        single_flight: bool = True,
    ):
        if not temp_id_prefix:
            raise ValueError("temp_id_prefix must be a non-empty string")
        self._remote = remote
        self._notifier = notifier
        self._temp_id_prefix = temp_id_prefix
        self._single_flight = single_flight
        self._sequence = itertools.count(1)
        self._in_flight: set[str] = set()
        self._items: list[Record] = [copy.deepcopy(dict(r)) for r in initial or ()]
        self._loading = False
        self._error: str | None = None

    # ── State ────────────────────────────────────────────────────────

    @property
    def items(self) -> list[Record]:
        """Copies of the current records, in display order."""
        return copy.deepcopy(self._items)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def notifier(self) -> Notifier | None:
        return self._notifier

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, record_id: object) -> bool:
        return self._index_of(record_id) is not None

    def get(self, record_id: str) -> Record | None:
        """Return a copy of the record with ``record_id``, if present."""
        index = self._index_of(record_id)
        return copy.deepcopy(self._items[index]) if index is not None else None

    def is_pending(self, record_id: str) -> bool:
        """True while an operation on ``record_id`` awaits its remote call."""
        return record_id in self._in_flight

    def is_temporary_id(self, record_id: str) -> bool:
        return record_id.startswith(self._temp_id_prefix)

    # ── Direct setters ───────────────────────────────────────────────

    def set_data(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Replace the whole collection (full refresh from the remote source)."""
        self._items = [copy.deepcopy(dict(r)) for r in records]

    def set_loading(self, flag: bool) -> None:
        self._loading = bool(flag)

    # ── Optimistic mutations ─────────────────────────────────────────

    async def create(self, new_record: Mapping[str, Any]) -> Settlement:
        """Insert a record locally under a temporary id, then persist it.

        If the remote returns the stored record, the temporary entry is
        replaced by it (authoritative id and timestamp). If it returns
        ``None`` the entry keeps its temporary id.
        """
        data = dict(new_record)
        temp_id = self._next_temp_id()
        optimistic = {
            **copy.deepcopy(data),
            "id": temp_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

        self._items.insert(0, optimistic)
        self._loading = True
        self._in_flight.add(temp_id)
        olog.step_start(OperationStage.CREATE, "Optimistic insert", id=temp_id)

        try:
            created = await self._remote.create(data)
        except Exception as exc:
            self._remove(temp_id)
            return self._fail("create", temp_id, exc)
        finally:
            self._in_flight.discard(temp_id)

        record_id = self._reconcile(temp_id, created)
        sort_newest_first(self._items)
        return self._confirm("create", record_id)

    async def update(self, record_id: str, updates: Mapping[str, Any]) -> Settlement:
        """Merge ``updates`` into a record locally, then persist them.

        A missing ``record_id`` is a silent no-op: no remote call, no state
        change, no notification.
        """
        index = self._index_of(record_id)
        if index is None:
            logger.debug("update skipped — '%s' is not in the store", record_id)
            return Settlement.SKIPPED
        if self._reject_in_flight("update", record_id):
            return Settlement.SKIPPED

        changes = copy.deepcopy(dict(updates))
        # ids are immutable inside the store
        changes.pop("id", None)
        snapshot = copy.deepcopy(self._items[index])

        self._items[index] = {**self._items[index], **changes}
        self._loading = True
        self._in_flight.add(record_id)
        olog.step_start(OperationStage.UPDATE, "Optimistic update", id=record_id)

        try:
            await self._remote.update(record_id, copy.deepcopy(changes))
        except Exception as exc:
            self._replace(record_id, snapshot)
            return self._fail("update", record_id, exc)
        finally:
            self._in_flight.discard(record_id)

        current = self._index_of(record_id)
        if current is not None:
            self._items[current] = {**self._items[current], **changes}
        sort_newest_first(self._items)
        return self._confirm("update", record_id)

    async def delete(self, record_id: str) -> Settlement:
        """Remove a record locally, then delete it remotely.

        On failure the captured record is re-inserted at its sorted position.
        """
        index = self._index_of(record_id)
        if index is None:
            logger.debug("delete skipped — '%s' is not in the store", record_id)
            return Settlement.SKIPPED
        if self._reject_in_flight("delete", record_id):
            return Settlement.SKIPPED

        removed = self._items.pop(index)
        self._loading = True
        self._in_flight.add(record_id)
        olog.step_start(OperationStage.DELETE, "Optimistic removal", id=record_id)

        try:
            await self._remote.delete(record_id)
        except Exception as exc:
            if self._index_of(record_id) is None:
                self._items.append(removed)
            sort_newest_first(self._items)
            return self._fail("delete", record_id, exc)
        finally:
            self._in_flight.discard(record_id)

        self._remove(record_id)
        sort_newest_first(self._items)
        return self._confirm("delete", record_id)

    # ── Internals ────────────────────────────────────────────────────

    def _next_temp_id(self) -> str:
        return f"{self._temp_id_prefix}{time.monotonic_ns()}-{next(self._sequence)}"

    def _index_of(self, record_id: object) -> int | None:
        for index, item in enumerate(self._items):
            if item.get("id") == record_id:
                return index
        return None

    def _remove(self, record_id: str) -> None:
        self._items = [item for item in self._items if item.get("id") != record_id]

    def _replace(self, record_id: str, record: Record) -> None:
        index = self._index_of(record_id)
        if index is not None:
            self._items[index] = record

    def _reconcile(self, temp_id: str, created: Any) -> str:
        """Swap the temporary entry for the authoritative record, if one came back."""
        if not isinstance(created, Mapping) or not created.get("id"):
            return temp_id

        authoritative_id = str(created["id"])
        index = self._index_of(temp_id)
        if index is None:
            # A full refresh replaced the list while the call was pending.
            return authoritative_id

        merged = {**self._items.pop(index), **copy.deepcopy(dict(created))}
        merged["id"] = authoritative_id
        existing = self._index_of(authoritative_id)
        if existing is not None:
            self._items[existing] = {**self._items[existing], **merged}
        else:
            self._items.insert(index, merged)
        logger.debug("Reconciled temporary id '%s' → '%s'", temp_id, authoritative_id)
        return authoritative_id

    def _reject_in_flight(self, operation: str, record_id: str) -> bool:
        if not self._single_flight or record_id not in self._in_flight:
            return False
        olog.step_warning(
            OperationStage.SKIPPED,
            f"Rejected {operation} — another operation on this id is pending",
            id=record_id,
        )
        return True

    def _confirm(self, operation: str, record_id: str) -> Settlement:
        self._loading = False
        self._error = None
        olog.step_complete(_STAGES[operation], f"Remote {operation} confirmed", id=record_id)
        self._notify(NotificationKind.SUCCESS, "Success", _MESSAGES[operation][0])
        return Settlement.CONFIRMED

    def _fail(self, operation: str, record_id: str, exc: Exception) -> Settlement:
        self._loading = False
        self._error = error_message(exc)
        olog.step_warning(
            OperationStage.ROLLBACK,
            f"Remote {operation} failed — local change reverted",
            id=record_id,
            error=self._error,
        )
        self._notify(NotificationKind.ERROR, "Error", _MESSAGES[operation][1])
        return Settlement.ROLLED_BACK

    def _notify(self, kind: NotificationKind, title: str, description: str) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(kind, title, description)
        except Exception as exc:
            olog.step_error(OperationStage.ERROR, f"Notifier failed while reporting '{title}'", error=exc)
