"""Unit tests for the OptimisticListStore."""

import asyncio
import copy
import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from campus_portal.application.interfaces import Notifier, RemoteDataService
from campus_portal.application.services import OptimisticListStore, Settlement
from campus_portal.application.services.optimistic_list_store import sort_newest_first
from campus_portal.domain.entities import NotificationKind
from campus_portal.domain.exceptions import RemoteOperationError


# ── Fakes ──


class FakeRemoteDataService(RemoteDataService):
    """Scriptable in-memory remote.

    ``gate`` (when set) holds every call until the test releases it, so the
    optimistic half of an operation can be inspected before settlement.
    """

    def __init__(
        self,
        *,
        error: BaseException | None = None,
        created: dict[str, Any] | None = None,
    ):
        self.error = error
        self.created = created
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple] = []

    async def _settle(self) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error

    async def create(self, record: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append(("create", record))
        await self._settle()
        return self.created

    async def update(self, record_id: str, updates: dict[str, Any]) -> None:
        self.calls.append(("update", record_id, updates))
        await self._settle()

    async def delete(self, record_id: str) -> None:
        self.calls.append(("delete", record_id))
        await self._settle()


class RecordingNotifier(Notifier):
    def __init__(self):
        self.events: list[tuple[NotificationKind, str, str | None]] = []

    def notify(self, kind, title, description=None) -> None:
        self.events.append((kind, title, description))


class ExplodingNotifier(Notifier):
    def notify(self, kind, title, description=None) -> None:
        raise RuntimeError("toast service down")


# ── Helpers ──


def _record(record_id: str, title: str, created_at: str) -> dict[str, Any]:
    return {"id": record_id, "title": title, "created_at": created_at}


def _seed() -> list[dict[str, Any]]:
    return [
        _record("c3", "Convocation", "2024-03-01T00:00:00Z"),
        _record("b2", "Sports Meet", "2024-02-01T00:00:00Z"),
        _record("a1", "Old", "2024-01-01T00:00:00Z"),
    ]


def _timestamps(items: list[dict[str, Any]]) -> list[datetime]:
    return [
        datetime.fromisoformat(str(item["created_at"]).replace("Z", "+00:00"))
        for item in items
    ]


def _assert_newest_first(items: list[dict[str, Any]]) -> None:
    stamps = _timestamps(items)
    assert stamps == sorted(stamps, reverse=True)


def _assert_unique_ids(items: list[dict[str, Any]]) -> None:
    ids = [item["id"] for item in items]
    assert len(ids) == len(set(ids))


async def _start(coro) -> asyncio.Task:
    """Schedule a store operation and let it run up to its remote call."""
    task = asyncio.create_task(coro)
    await asyncio.sleep(0)
    return task


# ── Create ──


@pytest.mark.asyncio
async def test_create_is_visible_before_remote_settles():
    """Founders Day appears immediately under a temporary id, then settles cleanly."""
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote, [])

    task = await _start(store.create({"title": "Founders Day"}))

    assert len(store.items) == 1
    pending = store.items[0]
    assert pending["title"] == "Founders Day"
    assert pending["id"].startswith("temp-")
    assert store.is_temporary_id(pending["id"])
    assert store.is_pending(pending["id"])
    assert store.loading is True

    remote.gate.set()
    result = await task

    assert result is Settlement.CONFIRMED
    assert len(store.items) == 1
    assert store.loading is False
    assert store.error is None
    assert not store.is_pending(pending["id"])


@pytest.mark.asyncio
async def test_create_sends_original_data_without_temporary_fields():
    remote = FakeRemoteDataService()
    store = OptimisticListStore(remote)

    await store.create({"title": "Annual Fest", "image_url": "https://x.test/a.jpg"})

    assert remote.calls == [
        ("create", {"title": "Annual Fest", "image_url": "https://x.test/a.jpg"})
    ]


@pytest.mark.asyncio
async def test_create_keeps_temporary_id_when_remote_returns_nothing():
    store = OptimisticListStore(FakeRemoteDataService(created=None))

    await store.create({"title": "Founders Day"})

    assert store.items[0]["id"].startswith("temp-")
    assert store.items[0]["created_at"]


@pytest.mark.asyncio
async def test_create_reconciles_with_authoritative_record():
    created = {
        "id": "5f0c6a2e-0000-4000-8000-000000000001",
        "title": "Founders Day",
        "created_at": "2030-01-01T00:00:00+00:00",
    }
    store = OptimisticListStore(FakeRemoteDataService(created=created), _seed())

    await store.create({"title": "Founders Day"})

    assert store.items[0]["id"] == created["id"]
    assert store.items[0]["created_at"] == created["created_at"]
    assert not any(store.is_temporary_id(item["id"]) for item in store.items)
    assert len(store) == 4


@pytest.mark.asyncio
async def test_create_reconcile_after_refresh_does_not_duplicate():
    """A full refresh that lands mid-flight already holds the server record."""
    created = {"id": "srv-1", "title": "Founders Day", "created_at": "2030-01-01T00:00:00Z"}
    remote = FakeRemoteDataService(created=created)
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote, [])

    task = await _start(store.create({"title": "Founders Day"}))
    store.set_data([created])
    remote.gate.set()
    await task

    assert [item["id"] for item in store.items] == ["srv-1"]


@pytest.mark.asyncio
async def test_create_failure_rolls_back():
    remote = FakeRemoteDataService(error=RemoteOperationError("create", "insert rejected"))
    store = OptimisticListStore(remote, _seed())
    before = store.items

    result = await store.create({"title": "Broken"})

    assert result is Settlement.ROLLED_BACK
    assert store.items == before
    assert store.error == "insert rejected"
    assert store.loading is False


@pytest.mark.asyncio
async def test_create_failure_with_blank_error_uses_generic_message():
    store = OptimisticListStore(FakeRemoteDataService(error=RuntimeError()))

    await store.create({"title": "Broken"})

    assert len(store) == 0
    assert store.error == "An error occurred"


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_temporary_ids():
    store = OptimisticListStore(FakeRemoteDataService())

    await asyncio.gather(*(store.create({"n": i}) for i in range(50)))

    ids = [item["id"] for item in store.items]
    assert len(ids) == 50
    assert len(set(ids)) == 50
    assert all(store.is_temporary_id(record_id) for record_id in ids)


@pytest.mark.asyncio
async def test_custom_temporary_id_prefix():
    store = OptimisticListStore(FakeRemoteDataService(), temp_id_prefix="local:")

    await store.create({"title": "x"})

    assert store.items[0]["id"].startswith("local:")


def test_empty_temporary_id_prefix_is_rejected():
    with pytest.raises(ValueError):
        OptimisticListStore(FakeRemoteDataService(), temp_id_prefix="")


# ── Update ──


@pytest.mark.asyncio
async def test_update_failure_restores_snapshot():
    """Network failure reverts 'New' back to 'Old' and surfaces the message."""
    remote = FakeRemoteDataService(error=RuntimeError("network down"))
    store = OptimisticListStore(
        remote, [_record("a1", "Old", "2024-01-01T00:00:00Z")]
    )

    await store.update("a1", {"title": "New"})

    assert store.get("a1")["title"] == "Old"
    assert store.error == "network down"


@pytest.mark.asyncio
async def test_update_applies_immediately_and_confirms():
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote, _seed())

    task = await _start(store.update("b2", {"title": "Athletics Meet"}))
    assert store.get("b2")["title"] == "Athletics Meet"
    assert store.loading is True

    remote.gate.set()
    assert await task is Settlement.CONFIRMED
    assert store.get("b2")["title"] == "Athletics Meet"
    assert store.loading is False
    assert remote.calls == [("update", "b2", {"title": "Athletics Meet"})]


@pytest.mark.asyncio
async def test_update_failure_only_touches_target():
    remote = FakeRemoteDataService(error=RuntimeError("boom"))
    store = OptimisticListStore(remote, _seed())
    before = {item["id"]: item for item in store.items}

    await store.update("b2", {"title": "Changed", "tags": ["x"]})

    after = {item["id"]: item for item in store.items}
    assert after == before


@pytest.mark.asyncio
async def test_update_rollback_restores_nested_values():
    initial = [{"id": "a1", "created_at": "2024-01-01T00:00:00Z", "meta": {"tags": ["a"]}}]
    store = OptimisticListStore(FakeRemoteDataService(error=RuntimeError("x")), initial)

    await store.update("a1", {"meta": {"tags": ["b"]}})

    assert store.get("a1") == initial[0]


@pytest.mark.asyncio
async def test_update_resorts_when_created_at_changes():
    store = OptimisticListStore(FakeRemoteDataService(), _seed())

    await store.update("a1", {"created_at": "2025-01-01T00:00:00Z"})

    assert [item["id"] for item in store.items] == ["a1", "c3", "b2"]


@pytest.mark.asyncio
async def test_update_cannot_change_id():
    store = OptimisticListStore(FakeRemoteDataService(), _seed())

    await store.update("a1", {"id": "zz", "title": "Renamed"})

    assert store.get("a1")["title"] == "Renamed"
    assert store.get("zz") is None


# ── Delete ──


@pytest.mark.asyncio
async def test_delete_removes_immediately_and_confirms():
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote, _seed())

    task = await _start(store.delete("b2"))
    assert "b2" not in store
    assert store.loading is True

    remote.gate.set()
    assert await task is Settlement.CONFIRMED
    assert "b2" not in store
    assert store.error is None
    assert remote.calls == [("delete", "b2")]


@pytest.mark.asyncio
async def test_delete_failure_reinserts_in_sorted_position():
    original = _seed()
    store = OptimisticListStore(FakeRemoteDataService(error=RuntimeError("locked")), original)

    await store.delete("b2")

    assert store.get("b2") == original[1]
    assert [item["id"] for item in store.items] == ["c3", "b2", "a1"]
    assert store.error == "locked"


# ── Not found locally ──


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["update", "delete"])
async def test_missing_id_is_a_silent_noop(operation: str):
    remote = FakeRemoteDataService()
    notifier = RecordingNotifier()
    store = OptimisticListStore(remote, _seed(), notifier=notifier)
    store.set_loading(True)
    before = store.items

    if operation == "update":
        result = await store.update("missing", {"title": "x"})
    else:
        result = await store.delete("missing")

    assert result is Settlement.SKIPPED
    assert remote.calls == []
    assert store.items == before
    assert store.loading is True
    assert store.error is None
    assert notifier.events == []


# ── Single flight ──


@pytest.mark.asyncio
async def test_second_operation_on_pending_id_is_rejected():
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    notifier = RecordingNotifier()
    store = OptimisticListStore(remote, _seed(), notifier=notifier)

    first = await _start(store.update("a1", {"title": "First"}))
    second = await store.delete("a1")

    assert second is Settlement.SKIPPED
    assert len(remote.calls) == 1

    remote.gate.set()
    assert await first is Settlement.CONFIRMED
    assert store.get("a1")["title"] == "First"
    assert len(notifier.events) == 1


@pytest.mark.asyncio
async def test_pending_create_cannot_be_updated():
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote)

    task = await _start(store.create({"title": "Draft"}))
    temp_id = store.items[0]["id"]

    assert await store.update(temp_id, {"title": "Edited"}) is Settlement.SKIPPED

    remote.gate.set()
    await task


@pytest.mark.asyncio
async def test_single_flight_disabled_allows_racing_operations():
    remote = FakeRemoteDataService()
    remote.gate = asyncio.Event()
    store = OptimisticListStore(remote, _seed(), single_flight=False)

    first = await _start(store.update("a1", {"title": "First"}))
    second = await _start(store.update("a1", {"title": "Second"}))
    remote.gate.set()
    await asyncio.gather(first, second)

    assert len(remote.calls) == 2
    assert store.get("a1")["title"] == "Second"


# ── Notifications ──


@pytest.mark.asyncio
async def test_each_settled_operation_notifies_once():
    notifier = RecordingNotifier()
    store = OptimisticListStore(FakeRemoteDataService(), _seed(), notifier=notifier)

    await store.create({"title": "New"})
    await store.update("a1", {"title": "Renamed"})
    await store.delete("b2")
    store.set_data(_seed())
    store.set_loading(True)

    assert notifier.events == [
        (NotificationKind.SUCCESS, "Success", "Item created successfully"),
        (NotificationKind.SUCCESS, "Success", "Item updated successfully"),
        (NotificationKind.SUCCESS, "Success", "Item deleted successfully"),
    ]


@pytest.mark.asyncio
async def test_failures_notify_with_error_styling():
    notifier = RecordingNotifier()
    remote = FakeRemoteDataService(error=RuntimeError("nope"))
    store = OptimisticListStore(remote, _seed(), notifier=notifier)

    await store.create({"title": "New"})
    await store.update("a1", {"title": "Renamed"})
    await store.delete("b2")

    assert notifier.events == [
        (NotificationKind.ERROR, "Error", "Failed to create item"),
        (NotificationKind.ERROR, "Error", "Failed to update item"),
        (NotificationKind.ERROR, "Error", "Failed to delete item"),
    ]


@pytest.mark.asyncio
async def test_notifier_failure_does_not_affect_state(caplog):
    store = OptimisticListStore(FakeRemoteDataService(), _seed(), notifier=ExplodingNotifier())

    with caplog.at_level(logging.ERROR, logger="OptimisticListStore"):
        result = await store.delete("a1")

    assert result is Settlement.CONFIRMED
    assert "a1" not in store
    assert store.loading is False
    assert any("Notifier failed" in r.getMessage() for r in caplog.records)


# ── Error lifecycle ──


@pytest.mark.asyncio
async def test_error_persists_until_a_later_success():
    remote = FakeRemoteDataService(error=RuntimeError("first failure"))
    store = OptimisticListStore(remote, _seed())

    await store.delete("a1")
    assert store.error == "first failure"

    remote.error = None
    assert await store.update("missing", {"x": 1}) is Settlement.SKIPPED
    assert store.error == "first failure"

    await store.update("b2", {"title": "ok"})
    assert store.error is None


# ── set_data / set_loading / isolation ──


def test_set_data_is_idempotent():
    store = OptimisticListStore(FakeRemoteDataService())
    records = _seed()

    store.set_data(records)
    once = store.items
    store.set_data(records)

    assert store.items == once


def test_store_copies_records_in_and_out():
    records = _seed()
    store = OptimisticListStore(FakeRemoteDataService(), records)

    records[0]["title"] = "mutated outside"
    store.items[0]["title"] = "mutated copy"

    assert store.get("c3")["title"] == "Convocation"


def test_set_loading_overrides_flag():
    store = OptimisticListStore(FakeRemoteDataService())
    store.set_loading(True)
    assert store.loading is True
    store.set_loading(False)
    assert store.loading is False


@pytest.mark.asyncio
async def test_records_without_created_at_sort_last():
    initial = [{"id": "undated", "title": "?"}, _record("a1", "Old", "2024-01-01T00:00:00Z")]
    store = OptimisticListStore(FakeRemoteDataService(), initial)

    await store.create({"title": "Newest"})

    ids = [item["id"] for item in store.items]
    assert ids[1:] == ["a1", "undated"]


# ── Properties over random operation sequences ──


def _random_initial(rng: random.Random, size: int) -> list[dict[str, Any]]:
    base = datetime(2020, 1, 1, tzinfo=timezone.utc)
    records = [
        _record(
            f"srv-{i}",
            f"Item {i}",
            (base + timedelta(hours=rng.randint(0, 40_000))).isoformat(),
        )
        for i in range(size)
    ]
    rng.shuffle(records)
    return records


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", range(20))
async def test_successful_sequences_keep_invariants(seed: int):
    rng = random.Random(seed)
    initial = _random_initial(rng, rng.randint(0, 8))
    store = OptimisticListStore(FakeRemoteDataService(), initial)
    creates = deletes = 0

    for step in range(rng.randint(1, 25)):
        choice = rng.random()
        ids = [item["id"] for item in store.items]
        if choice < 0.4 or not ids:
            await store.create({"title": f"step {step}"})
            creates += 1
        elif choice < 0.7:
            await store.update(rng.choice(ids), {"title": f"edited {step}"})
        else:
            await store.delete(rng.choice(ids))
            deletes += 1

        _assert_newest_first(store.items)
        _assert_unique_ids(store.items)

    assert len(store) == len(initial) + creates - deletes
    assert store.loading is False
    assert store.error is None


@pytest.mark.asyncio
@pytest.mark.parametrize("seed", range(10))
async def test_failed_operations_leave_records_unchanged(seed: int):
    rng = random.Random(seed)
    initial = _random_initial(rng, rng.randint(1, 8))
    store = OptimisticListStore(FakeRemoteDataService(error=RuntimeError("offline")), initial)

    for _ in range(10):
        before = {item["id"]: copy.deepcopy(item) for item in store.items}
        target = rng.choice(list(before))
        operation = rng.choice(["create", "update", "delete"])

        if operation == "create":
            await store.create({"title": "doomed"})
        elif operation == "update":
            await store.update(target, {"title": "doomed"})
        else:
            await store.delete(target)

        after = {item["id"]: item for item in store.items}
        assert after == before
        assert store.error == "offline"


def test_sort_parses_uneven_fractional_seconds():
    records = [
        {"id": "undated"},
        {"id": "older", "created_at": "2024-01-01T00:00:00.1Z"},
        {"id": "newer", "created_at": "2024-01-01T00:00:00.12345Z"},
    ]

    sort_newest_first(records)

    assert [r["id"] for r in records] == ["newer", "older", "undated"]
