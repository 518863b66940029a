import json

from domain_brainstormer.utils import ResultCache


def test_set_and_get(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), clock=clock)
    cache.set("Example.com", {'available': True})

    assert cache.get("example.com") == {'available': True}
    assert cache.has("EXAMPLE.COM")
    assert cache.get("other.com") is None


def test_entries_expire(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), ttl=60, clock=clock)
    cache.set("a.com", 1)
    cache.set("b.com", 2, ttl=600)

    clock.advance(61)

    assert cache.get("a.com") is None
    assert cache.get("b.com") == 2


def test_flush_persists_entries(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), clock=clock)
    cache.set("a.com", {'available': False})
    assert not cache_path.exists()

    cache.flush()

    reloaded = ResultCache(cache_file=str(cache_path), clock=clock)
    assert reloaded.get("a.com") == {'available': False}


def test_writes_batched(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), flush_every=3, clock=clock)
    cache.set("a.com", 1)
    cache.set("b.com", 2)
    assert not cache_path.exists()

    cache.set("c.com", 3)
    assert len(json.loads(cache_path.read_text())) == 3


def test_expired_entries_not_loaded(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), ttl=10, clock=clock)
    cache.set("a.com", 1)
    cache.flush()
    clock.advance(11)

    reloaded = ResultCache(cache_file=str(cache_path), ttl=10, clock=clock)
    assert len(reloaded) == 0
    assert reloaded.stats()['expired'] == 1
    assert reloaded.cleanup() == 1
    assert json.loads(cache_path.read_text()) == {}


def test_corrupt_file_gives_empty_cache(cache_path, clock):
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text("{not json")

    cache = ResultCache(cache_file=str(cache_path), clock=clock)
    assert len(cache) == 0

    cache.set("a.com", 1)
    assert cache.get("a.com") == 1


def test_clear_removes_file(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), clock=clock)
    cache.set("a.com", 1)
    cache.flush()

    cache.clear()

    assert len(cache) == 0
    assert not cache_path.exists()


def test_delete_and_stats(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), ttl=100, clock=clock)
    cache.set("a.com", 1)
    cache.set("b.com", 2, ttl=1)
    clock.advance(2)

    stats = cache.stats()
    assert stats['total'] == 2
    assert stats['valid'] == 1
    assert stats['expired'] == 1

    assert cache.delete("a.com")
    assert not cache.delete("a.com")
    assert cache.cleanup() == 1
    assert len(cache) == 0


def test_malformed_entries_skipped_on_load(cache_path, clock):
    cache_path.parent.mkdir(parents=True)
    cache_path.write_text(json.dumps({
        'a.com': {'expires_at': 9e12},
        'b.com': {'data': 1, 'expires_at': 'tomorrow'},
        'c.com': 'not an entry',
        'd.com': {'data': {'available': True}, 'expires_at': 9e12, 'cached_at': 0},
    }))

    cache = ResultCache(cache_file=str(cache_path), clock=clock)

    assert cache.get("a.com") is None
    assert cache.get("b.com") is None
    assert cache.get("c.com") is None
    assert cache.get("d.com") == {'available': True}
    assert len(cache) == 1


def test_has_sees_none_values(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), ttl=5, clock=clock)
    cache.set("a.com", None)

    assert cache.has("a.com")
    assert not cache.has("b.com")

    clock.advance(6)
    assert not cache.has("a.com")


def test_deletes_count_towards_flush(cache_path, clock):
    cache = ResultCache(cache_file=str(cache_path), flush_every=2, clock=clock)
    cache.set("a.com", 1)
    cache.set("b.com", 2)
    assert len(json.loads(cache_path.read_text())) == 2

    cache.delete("a.com")
    cache.delete("b.com")

    assert json.loads(cache_path.read_text()) == {}
