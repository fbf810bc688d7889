"""Unit tests for CatalogStore and ViewLifetime.

Async loads are driven with asyncio.run; the fake store's delays force a
completion order between the two independent loads.
"""

import asyncio
import logging

import pytest

from campus_navigator.core.catalog_store import CatalogStore
from campus_navigator.core.view_lifetime import ViewLifetime


class TestCatalogStoreLoads:
    def test_starts_empty(self, fake_store) -> None:
        store = CatalogStore(store=fake_store)
        assert store.catalog == ()
        assert store.custom_markers == ()
        assert not store.catalog_loaded

    def test_load_catalog_replaces_snapshot(self, fake_store) -> None:
        store = CatalogStore(store=fake_store)
        asyncio.run(store.load_catalog())
        assert store.catalog_loaded
        assert [poi.name for poi in store.catalog] == [
            "Boys Hostel",
            "Central Library",
            "Java Canteen",
            "SRM Hospital",
            "Tech Park",
        ]

    def test_reload_replaces_not_appends(self, fake_store) -> None:
        store = CatalogStore(store=fake_store)
        asyncio.run(store.load_catalog())
        asyncio.run(store.load_catalog())
        assert len(store.catalog) == 5

        fake_store.catalog = fake_store.catalog[:2]
        asyncio.run(store.load_catalog())
        assert len(store.catalog) == 2

    def test_markers_only_for_owner(self, store_factory, marker_factory) -> None:
        fake = store_factory(markers=[marker_factory("m1", owner_id="user-1"), marker_factory("m2", owner_id="user-2")])
        store = CatalogStore(store=fake)
        asyncio.run(store.load_custom_markers("user-1"))
        assert [m.id for m in store.custom_markers] == ["m1"]

    def test_no_owner_clears_without_calling_store(self, fake_store) -> None:
        store = CatalogStore(store=fake_store)
        asyncio.run(store.load_custom_markers("user-1"))
        assert len(store.custom_markers) == 1

        asyncio.run(store.load_custom_markers(None))
        assert store.custom_markers == ()
        assert fake_store.marker_reads == ["user-1"]

    def test_reverse_completion_order_keeps_both_collections(self, store_factory, campus_catalog, marker_factory) -> None:
        """Scenario: custom markers finish before the catalog."""
        fake = store_factory(
            catalog=campus_catalog,
            markers=[marker_factory("m1")],
            catalog_delay_s=0.05,
            markers_delay_s=0.0,
        )
        store = CatalogStore(store=fake)
        asyncio.run(store.load_all(owner_id="user-1"))
        assert fake.completed == ["markers", "catalog"]
        assert len(store.catalog) == 5
        assert [m.id for m in store.custom_markers] == ["m1"]

    def test_forward_completion_order_keeps_both_collections(self, store_factory, campus_catalog, marker_factory) -> None:
        fake = store_factory(
            catalog=campus_catalog,
            markers=[marker_factory("m1")],
            catalog_delay_s=0.0,
            markers_delay_s=0.05,
        )
        store = CatalogStore(store=fake)
        asyncio.run(store.load_all(owner_id="user-1"))
        assert fake.completed == ["catalog", "markers"]
        assert len(store.catalog) == 5
        assert len(store.custom_markers) == 1

    def test_read_failure_degrades_to_empty(self, fake_store, caplog: pytest.LogCaptureFixture) -> None:
        store = CatalogStore(store=fake_store)
        asyncio.run(store.load_all(owner_id="user-1"))
        assert len(store.catalog) == 5

        fake_store.fail_reads = True
        asyncio.run(store.load_all(owner_id="user-1"))
        assert store.catalog == ()
        assert store.custom_markers == ()
        assert store.catalog_loaded
        assert "[LOAD] Error fetching locations" in caplog.text

    def test_find_item(self, fake_store) -> None:
        store = CatalogStore(store=fake_store)
        asyncio.run(store.load_all(owner_id="user-1"))
        assert store.find_item("lib").name == "Central Library"
        assert store.find_item("m0").name == "Marker m0"
        assert store.find_item("missing") is None


class TestLateResults:
    def test_results_after_teardown_are_discarded(self, store_factory, campus_catalog, marker_factory) -> None:
        fake = store_factory(
            catalog=campus_catalog,
            markers=[marker_factory("m1")],
            catalog_delay_s=0.05,
            markers_delay_s=0.05,
        )
        lifetime = ViewLifetime(name="test_view")
        store = CatalogStore(store=fake, lifetime=lifetime)

        async def load_then_teardown() -> None:
            task = asyncio.create_task(store.load_all(owner_id="user-1"))
            await asyncio.sleep(0.01)
            assert lifetime.outstanding == 2
            lifetime.teardown()
            await task

        asyncio.run(load_then_teardown())
        # The requests still completed, but nothing was applied
        assert sorted(fake.completed) == ["catalog", "markers"]
        assert store.catalog == ()
        assert store.custom_markers == ()
        assert not store.catalog_loaded
        assert lifetime.outstanding == 0


class TestViewLifetime:
    def test_track_counts_outstanding(self) -> None:
        lifetime = ViewLifetime(name="v")

        async def run() -> None:
            async with lifetime.track("a"):
                async with lifetime.track("a"):
                    assert lifetime.outstanding == 2
                    assert lifetime.outstanding_operations() == ["a"]
                assert lifetime.outstanding == 1
            assert lifetime.outstanding == 0
            assert lifetime.outstanding_operations() == []

        asyncio.run(run())

    def test_track_releases_on_error(self) -> None:
        lifetime = ViewLifetime(name="v")

        async def run() -> None:
            async with lifetime.track("a"):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            asyncio.run(run())
        assert lifetime.outstanding == 0

    def test_teardown(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO)
        lifetime = ViewLifetime(name="v")
        assert lifetime.accepts_results("load")
        lifetime.teardown()
        assert not lifetime.is_alive
        assert not lifetime.accepts_results("load")
        assert "discarding late result of load" in caplog.text
