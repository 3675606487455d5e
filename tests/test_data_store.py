from __future__ import annotations

import threading
import time
from types import SimpleNamespace

from app.scenarios import resolve_stalker_scenario
from app.services.data_store import PortalDataStore
from app.services.stalker_generator import generate_portal_data


class CountingFactory:
    def __init__(self, delay: float = 0.0) -> None:
        self.calls: list[str] = []
        self.delay = delay
        self._lock = threading.Lock()

    def __call__(self, key: str) -> SimpleNamespace:
        with self._lock:
            self.calls.append(key)
        if self.delay:
            time.sleep(self.delay)
        return SimpleNamespace(key=key, scenario=SimpleNamespace(name="test", seed=1))


def test_portal_data_is_memoised_per_normalised_key():
    factory = CountingFactory()
    store = PortalDataStore(factory)

    first = store.get_portal_data("AA:BB:CC:DD:EE:FF")
    second = store.get_portal_data("aa:bb:cc:dd:ee:ff")

    assert first is second
    assert factory.calls == ["aa:bb:cc:dd:ee:ff"]
    assert "AA:BB:CC:DD:EE:FF" in store
    assert len(store) == 1


def test_normalize_key_is_idempotent():
    once = PortalDataStore.normalize_key(" User1:Pass1 ")
    assert once == "user1:pass1"
    assert PortalDataStore.normalize_key(once) == once


def test_concurrent_first_access_generates_once():
    factory = CountingFactory(delay=0.05)
    store = PortalDataStore(factory)
    barrier = threading.Barrier(8)
    results: list[object] = []
    results_lock = threading.Lock()

    def worker() -> None:
        barrier.wait()
        data = store.get_portal_data("00:1a:79:00:00:01")
        with results_lock:
            results.append(data)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(factory.calls) == 1
    assert len(results) == 8
    assert all(result is results[0] for result in results)


def test_favorites_are_idempotent_and_ordered():
    store = PortalDataStore(CountingFactory())

    assert list(store.get_favorites("mac")) == []
    store.add_favorite("mac", "3")
    store.add_favorite("MAC", "1")
    store.add_favorite("mac", "3")

    assert list(store.get_favorites("mac")) == ["3", "1"]

    store.remove_favorite("mac", "3")
    store.remove_favorite("mac", "3")
    store.remove_favorite("unknown", "3")

    assert list(store.get_favorites("mac")) == ["1"]


def test_favorites_view_tracks_updates():
    store = PortalDataStore(CountingFactory())
    view = store.get_favorites("mac")

    store.add_favorite("mac", "10000")

    assert "10000" in view


def test_reset_favorites_only_clears_one_identity():
    store = PortalDataStore(CountingFactory())
    store.add_favorite("a", "1")
    store.add_favorite("b", "2")

    store.reset_favorites("a")

    assert list(store.get_favorites("a")) == []
    assert list(store.get_favorites("b")) == ["2"]


def test_reset_all_regenerates_structurally_equal_data():
    mac = "00:1a:79:00:00:03"
    store = PortalDataStore(lambda key: generate_portal_data(resolve_stalker_scenario(key)))
    before = store.get_portal_data(mac)
    store.add_favorite(mac, before.list_items("vod")[0].id)

    store.reset_all()
    after = store.get_portal_data(mac)

    assert after is not before
    assert after.vod == before.vod
    assert after.itv_categories == before.itv_categories
    assert list(store.get_favorites(mac)) == []
