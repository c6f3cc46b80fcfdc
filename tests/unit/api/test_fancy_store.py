"""Tests for the in-memory fancy resource store."""

from __future__ import annotations

import threading

import pytest

from api.services import FancyResourceStore


@pytest.fixture
def store() -> FancyResourceStore:
    store = FancyResourceStore()
    store.create({"user_id": 1, "fancy_name": "Teapot", "colour": "teal"})
    store.create({"user_id": 2, "fancy_name": "Lamp", "colour": "teal"})
    store.create({"user_id": 1, "fancy_name": "Rug", "colour": "violet"})
    return store


class TestQuery:
    def test_filters_by_user_and_colour(self, store: FancyResourceStore):
        items, total = store.query(user_id=1, colour="teal")

        assert total == 1
        assert [r.fancy_name for r in items] == ["Teapot"]

    def test_paging_keeps_total(self, store: FancyResourceStore):
        items, total = store.query(limit=1, offset=1)

        assert total == 3
        assert [r.id for r in items] == [2]

    def test_update_ignores_non_updatable_fields(self, store: FancyResourceStore):
        resource = store.update(1, {"user_id": 9, "colour": "crimson"})

        assert resource is not None
        assert resource.user_id == 1
        assert resource.colour == "crimson"


class TestLocking:
    """Reads wait for writers holding the store lock."""

    @pytest.mark.parametrize(
        "read",
        [lambda s: s.get(1), lambda s: s.query()],
        ids=["get", "query"],
    )
    def test_reads_wait_for_lock(self, store: FancyResourceStore, read):
        done = threading.Event()

        def reader() -> None:
            read(store)
            done.set()

        with store._lock:
            thread = threading.Thread(target=reader)
            thread.start()
            assert not done.wait(timeout=0.2)

        thread.join(timeout=5)
        assert done.is_set()

    def test_concurrent_creates_get_unique_ids(self):
        store = FancyResourceStore()
        threads = [
            threading.Thread(target=store.create, args=({"user_id": i, "fancy_name": f"n{i}"},)) for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        items, total = store.query(limit=100)
        assert total == 20
        assert sorted(r.id for r in items) == list(range(1, 21))
