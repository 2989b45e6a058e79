from src.app.services.tenant_cache import TENANT_TAG, TenantCache


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_fresh_entry_is_returned():
    clock = FakeClock()
    cache = TenantCache(ttl=60, clock=clock)
    cache.set("lauf", "tenant-a")

    clock.now += 59
    entry = cache.get("lauf")

    assert entry is not None
    assert entry.value == "tenant-a"


def test_entry_expires_at_ttl():
    clock = FakeClock()
    cache = TenantCache(ttl=60, clock=clock)
    cache.set("lauf", "tenant-a")

    clock.now += 60

    assert cache.get("lauf") is None
    assert len(cache) == 0


def test_cached_miss_is_distinguishable_from_no_entry():
    cache = TenantCache(ttl=60, clock=FakeClock())
    cache.set("unknown", None)

    entry = cache.get("unknown")

    assert entry is not None
    assert entry.value is None
    assert cache.get("never-seen") is None


def test_invalidate_tag_drops_tagged_entries_only():
    cache = TenantCache(ttl=60, clock=FakeClock())
    cache.set("lauf", "a", tags=(TENANT_TAG,))
    cache.set("nuernberg", "b", tags=(TENANT_TAG,))
    cache.set("other", "c", tags=("config",))

    dropped = cache.invalidate_tag(TENANT_TAG)

    assert dropped == 2
    assert cache.get("lauf") is None
    assert cache.get("other").value == "c"


def test_invalidate_single_key():
    cache = TenantCache(ttl=60, clock=FakeClock())
    cache.set("lauf", "a")
    cache.invalidate("lauf")
    cache.invalidate("missing")
    assert cache.get("lauf") is None
