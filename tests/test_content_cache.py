import asyncio

from core.services.content_cache import ContentCache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _counting_loader(value="rows"):
    calls = []

    async def loader():
        calls.append(1)
        return value

    return loader, calls


async def test_second_read_is_a_hit():
    cache = ContentCache(ttl_seconds=60)
    loader, calls = _counting_loader()

    assert await cache.get_or_load("faqs", "it", loader) == "rows"
    assert await cache.get_or_load("faqs", "it", loader) == "rows"
    assert len(calls) == 1
    assert cache.stats()["hits"] == 1
    assert cache.stats()["misses"] == 1


async def test_variants_are_separate_entries():
    cache = ContentCache(ttl_seconds=60)
    loader, calls = _counting_loader()
    await cache.get_or_load("faqs", "it", loader)
    await cache.get_or_load("faqs", "en", loader)
    assert len(calls) == 2


async def test_entries_expire():
    clock = FakeClock()
    cache = ContentCache(ttl_seconds=60, clock=clock)
    loader, calls = _counting_loader()

    await cache.get_or_load("members", "public", loader)
    clock.now += 61
    await cache.get_or_load("members", "public", loader)
    assert len(calls) == 2


async def test_invalidate_drops_only_that_table():
    cache = ContentCache(ttl_seconds=60)
    loader, calls = _counting_loader()
    await cache.get_or_load("faqs", "it", loader)
    await cache.get_or_load("faqs", "en", loader)
    await cache.get_or_load("members", "public", loader)

    assert cache.invalidate("faqs") == 2
    assert cache.stats()["entries"] == 1

    await cache.get_or_load("members", "public", loader)
    assert len(calls) == 3


async def test_zero_ttl_disables_caching():
    cache = ContentCache(ttl_seconds=0)
    loader, calls = _counting_loader()
    await cache.get_or_load("faqs", "it", loader)
    await cache.get_or_load("faqs", "it", loader)
    assert len(calls) == 2


async def test_concurrent_misses_load_once():
    cache = ContentCache(ttl_seconds=60)
    calls = []

    async def slow_loader():
        calls.append(1)
        await asyncio.sleep(0.01)
        return ["faq"]

    results = await asyncio.gather(*[cache.get_or_load("faqs", "it", slow_loader) for _ in range(5)])
    assert results == [["faq"]] * 5
    assert len(calls) == 1


async def test_load_racing_an_invalidation_is_not_stored():
    cache = ContentCache(ttl_seconds=60)

    async def loader():
        # A change lands while the old rows are still being fetched
        cache.invalidate("faqs")
        return "stale"

    assert await cache.get_or_load("faqs", "it", loader) == "stale"
    assert cache.stats()["entries"] == 0


async def test_invalidate_all():
    cache = ContentCache(ttl_seconds=60)
    loader, _ = _counting_loader()
    await cache.get_or_load("faqs", "it", loader)
    await cache.get_or_load("members", "public", loader)
    cache.invalidate_all()
    assert cache.stats()["entries"] == 0


async def test_load_racing_a_full_flush_is_not_stored():
    cache = ContentCache(ttl_seconds=60)

    async def loader():
        cache.invalidate_all()
        return "stale"

    assert await cache.get_or_load("footer_resources", "en", loader) == "stale"
    assert cache.stats()["entries"] == 0

    # Later loads are cached again
    fresh, calls = _counting_loader("fresh")
    await cache.get_or_load("footer_resources", "en", fresh)
    await cache.get_or_load("footer_resources", "en", fresh)
    assert len(calls) == 1
