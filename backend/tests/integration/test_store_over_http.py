"""End-to-end: an optimistic store persisting through the portal's own API."""

import pytest

from campus_portal.application.services import OptimisticListStore, Settlement
from campus_portal.domain.entities import NotificationKind
from campus_portal.infrastructure.remote import HttpRemoteDataService, refresh_store


class RecordingNotifier:
    def __init__(self):
        self.events: list[tuple[NotificationKind, str, str | None]] = []

    def notify(self, kind, title, description=None):
        self.events.append((kind, title, description))


@pytest.fixture
def remote(client) -> HttpRemoteDataService:
    return HttpRemoteDataService("http://test/api/v1", "gallery", http_client=client)


@pytest.mark.asyncio
async def test_create_adopts_server_id(remote):
    notifier = RecordingNotifier()
    store = OptimisticListStore(remote, notifier=notifier)

    outcome = await store.create(
        {"title": "Convocation", "image_url": "https://cdn.example.edu/convocation.jpg"}
    )

    assert outcome is Settlement.CONFIRMED
    [record] = store.items
    assert not store.is_temporary_id(record["id"])
    assert record["title"] == "Convocation"
    assert notifier.events == [(NotificationKind.SUCCESS, "Success", "Item created successfully")]


@pytest.mark.asyncio
async def test_validation_failure_rolls_back_create(remote):
    store = OptimisticListStore(remote)

    outcome = await store.create({"title": "X", "image_url": "https://cdn.example.edu/x.jpg"})

    assert outcome is Settlement.ROLLED_BACK
    assert store.items == []
    assert "at least 2 characters" in store.error


@pytest.mark.asyncio
async def test_update_and_delete_round_trip(client, remote):
    store = OptimisticListStore(remote)
    await store.create({"title": "Sports Meet", "image_url": "https://cdn.example.edu/sports.jpg"})
    record_id = store.items[0]["id"]

    assert await store.update(record_id, {"title": "Annual Sports Meet"}) is Settlement.CONFIRMED
    persisted = (await client.get(f"/api/v1/gallery/{record_id}")).json()
    assert persisted["title"] == "Annual Sports Meet"

    assert await store.delete(record_id) is Settlement.CONFIRMED
    assert (await client.get(f"/api/v1/gallery/{record_id}")).status_code == 404


@pytest.mark.asyncio
async def test_delete_of_vanished_record_is_restored(remote):
    store = OptimisticListStore(
        remote,
        initial=[{"id": "ghost", "title": "Gone", "created_at": "2030-01-01T00:00:00Z"}],
    )

    outcome = await store.delete("ghost")

    assert outcome is Settlement.ROLLED_BACK
    assert [r["id"] for r in store.items] == ["ghost"]
    assert "not found" in store.error


@pytest.mark.asyncio
async def test_refresh_pulls_server_state(client, remote):
    await client.post(
        "/api/v1/gallery",
        json={"title": "Library Opening", "image_url": "https://cdn.example.edu/library.jpg"},
    )
    store = OptimisticListStore(remote)

    assert await refresh_store(store, remote) is True
    assert [r["title"] for r in store.items] == ["Library Opening"]
    assert store.loading is False


@pytest.mark.asyncio
async def test_refresh_loads_every_page(client):
    for i in range(120):
        response = await client.post(
            "/api/v1/gallery",
            json={"title": f"Event {i:03d}", "image_url": f"https://cdn.example.edu/{i}.jpg"},
        )
        assert response.status_code == 201
    remote = HttpRemoteDataService("http://test/api/v1", "gallery", http_client=client, page_size=50)
    store = OptimisticListStore(remote)

    assert await refresh_store(store, remote) is True

    assert len(store) == 120
    assert len({r["id"] for r in store.items}) == 120
