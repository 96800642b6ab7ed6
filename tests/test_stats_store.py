import threading

import pytest

from photon_core.ensemble import build_rays
from photon_core.models import EnsembleConfig
from photon_core.stats import status_text, summarize
from photon_core.store import EnsembleStore


def test_summary_counts():
    rays = build_rays(4.0, 1.0, 3, seed=1) + build_rays(9.0, 1.0, 2, seed=2)
    stats = summarize(rays, 1.0)
    assert stats.total == 5
    assert stats.trapped == 3
    assert stats.escaped == 2
    assert stats.unaffected == 2
    assert stats.lensed == 0
    assert stats.inconclusive == 0
    assert stats.b_crit == pytest.approx(5.196152422)
    assert stats.max_step == max(len(r.points) for r in rays) - 1
    assert stats.status == "3/5 trapped in horizon"


def test_status_lines():
    assert status_text(0, 4, 4) == "All rays escaped"
    assert status_text(0, 3, 4) == "Simulating..."
    assert status_text(1, 3, 4) == "1/4 trapped in horizon"


def test_empty_summary():
    stats = summarize((), 1.0)
    assert stats.total == 0 and stats.max_step == 0


def _config(seed):
    return EnsembleConfig(mass=1.0, impact_parameter=4.0, ray_count=1, seed=seed)


def test_store_last_write_wins():
    store = EnsembleStore()
    assert store.latest() is None
    old = store.begin()
    new = store.begin()
    assert store.publish(new, _config(2), ["new"])
    # the superseded build finishes late and is ignored
    assert not store.publish(old, _config(1), ["old"])
    generation, config, rays = store.latest()
    assert generation == new
    assert config.seed == 2
    assert rays == ("new",)


def test_store_rejects_publish_once_superseded():
    store = EnsembleStore()
    first = store.begin()
    store.begin()
    assert not store.publish(first, _config(1), ["stale"])
    assert store.latest() is None


def test_store_generations_are_unique_across_threads():
    store = EnsembleStore()
    seen = []
    lock = threading.Lock()

    def worker():
        for _ in range(100):
            g = store.begin()
            with lock:
                seen.append(g)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(seen) == list(range(1, 401))
